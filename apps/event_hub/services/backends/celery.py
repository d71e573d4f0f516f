import logging
from typing import Callable, Dict, Optional
from celery import shared_task
from functools import wraps
from django.conf import settings

from apps.event_hub.interfaces import EventBusBackend, listener_name

logger = logging.getLogger(__name__)


class CeleryBackend(EventBusBackend):
    """Celery implementation of the EventBusBackend"""

    def enqueue_task(self, listener: Callable, payload: Dict) -> None:
        """
        Enqueue a task to be executed asynchronously.
        Creates a Celery task dynamically for the listener.
        """
        try:
            task_name = f'event.{listener.__module__}.{listener_name(listener)}'

            @shared_task(name=task_name)
            @wraps(listener)
            def celery_task(task_payload):
                return listener(task_payload)

            celery_task.delay(payload)
            logger.debug(f"Enqueued task {task_name} with payload {payload}")

        except Exception as e:
            self.report_error(e, {
                "listener": listener_name(listener),
                "payload": payload,
                "action": "enqueue_task"
            })
            raise

    def execute_task_sync(self, listener: Callable, payload: Dict) -> None:
        """Execute the listener synchronously"""
        try:
            listener(payload)
            logger.debug(f"Executed {listener_name(listener)} synchronously with payload {payload}")

        except Exception as e:
            self.report_error(e, {
                "listener": listener_name(listener),
                "payload": payload,
                "action": "execute_task_sync"
            })
            raise

    def report_error(self, error: Exception, context: Optional[Dict] = None) -> None:
        """
        Report error to monitoring system.
        Logs the error and forwards it to Sentry when a DSN is configured.
        """
        logger.error(f"Error in Celery backend: {str(error)}", extra={
            "error_type": error.__class__.__name__,
            "context": context
        }, exc_info=True)

        if getattr(settings, 'SENTRY_DSN', None):
            try:
                from sentry_sdk import capture_exception
            except ImportError:
                logger.warning("SENTRY_DSN is set but sentry-sdk is not installed")
            else:
                capture_exception(error)
