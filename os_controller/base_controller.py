"""Base interface for hosts whose frames can be captured and restored."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from core.event_bus import FRAME_CREATED, HOST_EXIT, HOST_STARTUP, EventBus, EventHandler
from world_model.frame_attributes import AttributeMap

FrameHandle = Any


class FrameHost(ABC):
    """Abstract host whose frames the restore engine reads and recreates.

    Lifecycle hooks are delivered through `events`. Implementations emit
    HOST_STARTUP before the first frame is shown, FRAME_CREATED with
    `{"frame": handle}` after each new frame and HOST_EXIT before exiting.
    """

    def __init__(self, events: EventBus | None = None) -> None:
        self.events = events or EventBus()

    @abstractmethod
    def is_graphical_session(self) -> bool:
        """Return whether frames are shown on a real display."""
        pass

    @abstractmethod
    def list_frames(self) -> list[FrameHandle]:
        """Return live frames in enumeration order."""
        pass

    def is_graphical_frame(self, frame: FrameHandle) -> bool:
        """Return whether a frame lives on a graphical display."""
        return True

    @abstractmethod
    def get_attributes(self, frame: FrameHandle) -> AttributeMap:
        """Return the full attribute map of a frame."""
        pass

    @abstractmethod
    def create_frame(self, attributes: AttributeMap) -> FrameHandle:
        """Create a frame with the given attributes and emit FRAME_CREATED."""
        pass

    @abstractmethod
    def get_initial_frame_config(self) -> AttributeMap:
        """Return the attributes used for the first frame."""
        pass

    @abstractmethod
    def set_initial_frame_config(self, attributes: AttributeMap) -> None:
        """Replace the attributes used for the first frame."""
        pass

    def on_exit(self, handler: EventHandler) -> None:
        self.events.subscribe(HOST_EXIT, handler)

    def on_startup(self, handler: EventHandler) -> None:
        self.events.subscribe(HOST_STARTUP, handler)

    def on_frame_created(self, handler: EventHandler) -> None:
        self.events.subscribe(FRAME_CREATED, handler)

    def remove_frame_created(self, handler: EventHandler) -> bool:
        return self.events.unsubscribe(FRAME_CREATED, handler)
