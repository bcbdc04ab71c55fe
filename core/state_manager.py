"""Process-lifetime state shared by the restore phases."""

from __future__ import annotations

from dataclasses import dataclass, field

from world_model.frame_attributes import SnapshotSequence


@dataclass
class RestoreState:
    """Mutable in-memory state for a single process lifetime."""

    pending_frames: SnapshotSequence = field(default_factory=list)
    armed: bool = True
    primary_applied: bool = False
    last_capture_count: int | None = None


class StateManager:
    """Wraps restore state and provides convenience update methods."""

    def __init__(self, state: RestoreState | None = None) -> None:
        self.state = state or RestoreState()

    def retain_pending(self, frames: SnapshotSequence) -> None:
        self.state.pending_frames = [dict(frame) for frame in frames]

    def take_pending(self) -> SnapshotSequence:
        """Return and clear the pending secondary snapshots."""
        pending = self.state.pending_frames
        self.state.pending_frames = []
        return pending

    def disarm(self) -> None:
        self.state.armed = False

    def rearm(self) -> None:
        self.state.armed = True

    def mark_primary_applied(self) -> None:
        self.state.primary_applied = True

    def record_capture(self, frame_count: int) -> None:
        self.state.last_capture_count = frame_count
