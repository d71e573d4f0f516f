import logging
from typing import Callable, Dict, List, Optional

from apps.event_hub.interfaces import EventBusBackend, listener_name
from apps.event_hub.models import EventLog

logger = logging.getLogger(__name__)


class EventBus:
    """
    A simple event bus that supports both synchronous and asynchronous event handling.

    Components announce lifecycle points (a cart being recalculated, a product being
    saved) with ``emit_event`` and other apps hook into them with ``register_listener``.
    Uses the singleton pattern so every app registers against the same instance.
    """
    _instance = None
    _initialized = False
    _listeners: Dict[str, List[Callable]] = {}

    def __new__(cls, backend: Optional[EventBusBackend] = None):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, backend: Optional[EventBusBackend] = None):
        """Initialize the EventBus with a backend if not already initialized"""
        if not self._initialized:
            if backend is None:
                raise ValueError("Backend must be provided for EventBus initialization")
            self.backend = backend
            EventBus._initialized = True

    def register_listener(self, event_name: str, listener: Callable) -> None:
        """
        Register a listener for a specific event.

        Registering the same listener twice for one event is a no-op, so app
        ``ready()`` hooks can run more than once without double handling.

        Args:
            event_name: The name of the event to listen for
            listener: The callback to execute with the event payload
        """
        listeners = self._listeners.setdefault(event_name, [])
        if listener in listeners:
            logger.debug(f"Listener {listener_name(listener)} already registered for event {event_name}")
            return
        listeners.append(listener)
        logger.debug(f"Registered listener {listener_name(listener)} for event {event_name}")

    def unregister_listener(self, event_name: str, listener: Callable) -> None:
        listeners = self._listeners.get(event_name, [])
        if listener in listeners:
            listeners.remove(listener)
            logger.debug(f"Unregistered listener {listener_name(listener)} from event {event_name}")

    def get_listeners(self, event_name: str) -> List[Callable]:
        return list(self._listeners.get(event_name, []))

    def emit_event(self, event_name: str, payload: Dict, is_async: bool = True) -> None:
        """
        Emit an event to all registered listeners.

        Listener failures are logged and reported to the backend; they never
        propagate to the emitter.
        """
        logger.info(f"[EventBus] Emitting event {event_name} with payload {payload}")

        event_log = EventLog.objects.create(event_name=event_name, payload=payload)

        listeners = self.get_listeners(event_name)
        if not listeners:
            logger.warning(f"[EventBus] No listeners registered for event {event_name}")
            return

        failed = False
        for listener in listeners:
            try:
                if is_async:
                    logger.debug(f"[EventBus] Enqueueing async task for {listener_name(listener)}")
                    self.backend.enqueue_task(listener, payload)
                else:
                    logger.debug(f"[EventBus] Executing sync task for {listener_name(listener)}")
                    self.backend.execute_task_sync(listener, payload)
            except Exception as e:
                failed = True
                error_context = {
                    "event_name": event_name,
                    "listener": listener_name(listener),
                    "payload": payload
                }
                logger.exception(f"[EventBus] Error processing event {event_name}: {str(e)}")
                self.backend.report_error(e, error_context)

        if not is_async and not failed:
            event_log.processed = True
            event_log.save(update_fields=['processed'])

    def clear_listeners(self) -> None:
        """Clear all registered listeners. Useful for testing."""
        self._listeners.clear()
        logger.debug("Cleared all event listeners")
