"""In-process event bus carrying host lifecycle events."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable
from typing import Any

EventHandler = Callable[[dict[str, Any]], None]

HOST_EXIT = "host.exit"
HOST_STARTUP = "host.startup"
FRAME_CREATED = "frame.created"


class EventBus:
    """Dispatches events to subscribers by event name, in subscription order."""

    def __init__(self) -> None:
        self._handlers: dict[str, list[EventHandler]] = defaultdict(list)

    def subscribe(self, event_name: str, handler: EventHandler) -> None:
        """Register a callback for an event; registering the same callback twice is a no-op."""
        handlers = self._handlers[event_name]
        if handler not in handlers:
            handlers.append(handler)

    def unsubscribe(self, event_name: str, handler: EventHandler) -> bool:
        """Remove a callback. Returns False if it was not registered."""
        handlers = self._handlers.get(event_name, [])
        if handler not in handlers:
            return False
        handlers.remove(handler)
        return True

    def is_subscribed(self, event_name: str, handler: EventHandler) -> bool:
        return handler in self._handlers.get(event_name, [])

    def emit(self, event_name: str, payload: dict[str, Any]) -> None:
        """Emit an event to all subscribers."""
        # Handlers may unsubscribe themselves while running.
        for handler in list(self._handlers.get(event_name, [])):
            handler(payload)
