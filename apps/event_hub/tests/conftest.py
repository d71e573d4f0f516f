import pytest

from apps.event_hub.services.event_bus import EventBus
from apps.event_hub.services.factory import get_event_bus


@pytest.fixture
def event_bus():
    """The EventBus singleton with listeners registered by the apps set aside."""
    bus = get_event_bus()
    saved = {name: list(listeners) for name, listeners in EventBus._listeners.items()}
    bus.clear_listeners()
    yield bus
    bus.clear_listeners()
    EventBus._listeners.update(saved)


@pytest.fixture
def sample_payload():
    """Fixture to provide a sample payload for tests."""
    return {'cart_id': 'cart-123', 'context': {'is_admin_request': False}}
