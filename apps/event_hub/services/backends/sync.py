import logging
from typing import Callable, Dict, Optional

from apps.event_hub.interfaces import EventBusBackend, listener_name

logger = logging.getLogger(__name__)


class SynchronousBackend(EventBusBackend):
    """Runs every listener in-process, including the ones emitted as async."""

    def enqueue_task(self, listener: Callable, payload: Dict) -> None:
        self.execute_task_sync(listener, payload)

    def execute_task_sync(self, listener: Callable, payload: Dict) -> None:
        listener(payload)
        logger.debug(f"Executed {listener_name(listener)} synchronously with payload {payload}")

    def report_error(self, error: Exception, context: Optional[Dict] = None) -> None:
        logger.error(f"Error in synchronous backend: {str(error)}", extra={
            "error_type": error.__class__.__name__,
            "context": context
        })
