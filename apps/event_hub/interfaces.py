from abc import ABC, abstractmethod
from typing import Callable, Dict, Optional
import logging

logger = logging.getLogger(__name__)


class EventBusBackend(ABC):
    """Abstract base class for EventBus backends."""

    @abstractmethod
    def enqueue_task(self, listener: Callable, payload: Dict) -> None:
        """Hand the listener and payload over for asynchronous execution."""
        pass

    @abstractmethod
    def execute_task_sync(self, listener: Callable, payload: Dict) -> None:
        """Run the listener in the caller's thread."""
        pass

    def report_error(self, error: Exception, context: Optional[Dict] = None) -> None:
        """Report an error raised while processing a listener."""
        logger.error(f"Error in task {context}: {error}")


def listener_name(listener: Callable) -> str:
    return getattr(listener, '__qualname__', None) or getattr(listener, '__name__', None) or repr(listener)
