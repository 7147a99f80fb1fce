# src/floatchat/core/event_bus.py
import asyncio
import inspect
import logging
from collections import defaultdict

logger = logging.getLogger(__name__)


class EventBus:
    """A simple, in-process event bus for decoupling components, with async support."""

    def __init__(self):
        self._subscribers = defaultdict(list)

    def subscribe(self, event_name: str, callback):
        logger.debug("[EventBus] Subscribing '%s' to event '%s'",
                     getattr(callback, '__name__', 'lambda'), event_name)
        self._subscribers[event_name].append(callback)

    def emit(self, event_name: str, *args, **kwargs):
        """
        Emits an event, calling all subscribed callbacks with the given arguments.
        Handles both synchronous and asynchronous (coroutine) callbacks.
        A failing callback is logged and does not stop the others.
        """
        logger.debug("[EventBus] Emitting event '%s'", event_name)

        for callback in list(self._subscribers.get(event_name, ())):
            try:
                if inspect.iscoroutinefunction(callback):
                    asyncio.ensure_future(callback(*args, **kwargs))
                else:
                    callback(*args, **kwargs)
            except Exception:
                logger.exception("[EventBus] Error in callback for event '%s'", event_name)
