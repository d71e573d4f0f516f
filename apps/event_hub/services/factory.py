from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string
from .event_bus import EventBus


def get_event_bus() -> EventBus:
    """
    Factory function to get or create the configured EventBus instance.

    Returns:
        EventBus: The EventBus singleton wired to the backend named in ``settings.EVENT_BUS``
    """
    if EventBus._initialized:
        return EventBus()

    try:
        backend_path = settings.EVENT_BUS['BACKEND']
        backend_class = import_string(backend_path)
    except (AttributeError, KeyError, ImportError) as e:
        raise ImproperlyConfigured(
            f"Invalid EVENT_BUS configuration. Please check your settings: {str(e)}"
        )

    return EventBus(backend=backend_class())
