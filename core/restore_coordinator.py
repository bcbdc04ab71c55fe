"""Capture frame state on exit and restore it on the next start."""

from __future__ import annotations

import logging
from typing import Any, TypedDict

from core.policy_runtime import RestoreSettings
from core.state_manager import StateManager
from memory.stores.snapshot_store import SnapshotLoadError, SnapshotStore
from os_controller.base_controller import FrameHandle, FrameHost
from world_model.frame_attributes import (
    AttributeMap,
    SnapshotSequence,
    attributes_equal,
    filter_attributes,
    merge_attributes,
)


class CaptureResult(TypedDict):
    success: bool
    frames: int
    reason: str | None


class RestoreCoordinator:
    """Runs the capture, apply-primary and apply-secondary phases against a host.

    None of the public entry points raise for storage problems: a failed
    save is reported in the CaptureResult and a missing or corrupt snapshot
    is a cold start.
    """

    def __init__(
        self,
        host: FrameHost,
        store: SnapshotStore,
        settings: RestoreSettings,
        state: StateManager | None = None,
    ) -> None:
        self.host = host
        self.store = store
        self.settings = settings
        self.state = state or StateManager()
        self.logger = logging.getLogger("fr.restore")

    def frame_attributes(self, frame: FrameHandle) -> AttributeMap:
        return filter_attributes(self.host.get_attributes(frame), self.settings.tracked_keys)

    def capture(self) -> CaptureResult:
        """Snapshot every graphical frame and persist the sequence."""
        if not self.settings.capture_enabled:
            return {"success": False, "frames": 0, "reason": "capture disabled"}
        if not self.host.is_graphical_session():
            self.logger.debug("Skipping frame capture outside a graphical session.")
            return {"success": False, "frames": 0, "reason": "not a graphical session"}

        try:
            sequence: SnapshotSequence = [
                self.frame_attributes(frame)
                for frame in self.host.list_frames()
                if self.host.is_graphical_frame(frame)
            ]
        except Exception as e:
            self.logger.warning("Failed to read frame attributes from host: %s", e)
            return {"success": False, "frames": 0, "reason": str(e)}
        try:
            path = self.store.save(sequence)
        except (OSError, ValueError) as e:
            self.logger.warning("Failed to save frame snapshot to %s: %s", self.store.path, e)
            return {"success": False, "frames": len(sequence), "reason": str(e)}

        self.state.record_capture(len(sequence))
        self.logger.info("Captured %d frame(s) to %s", len(sequence), path)
        return {"success": True, "frames": len(sequence), "reason": None}

    def apply_primary(self) -> bool:
        """Merge the primary snapshot into the host's initial frame config."""
        if not self.settings.apply_primary_enabled:
            return False
        try:
            sequence = self.store.load()
        except SnapshotLoadError as e:
            self.logger.debug("No frame state to restore: %s", e)
            return False
        if not sequence:
            self.logger.debug("Snapshot file %s holds no frames.", self.store.path)
            return False

        primary, secondary = sequence[0], sequence[1:]
        merged = merge_attributes(self.host.get_initial_frame_config(), primary)
        self.host.set_initial_frame_config(merged)
        self.state.retain_pending(secondary)
        self.state.mark_primary_applied()
        self.logger.info(
            "Restored initial frame config; %d additional frame(s) pending.", len(secondary)
        )
        return True

    def apply_secondary(self, frame: FrameHandle) -> list[FrameHandle]:
        """Recreate pending frames that differ from the frame just created. Runs once."""
        if not self.state.state.armed or not self.settings.apply_secondary_enabled:
            return []
        # Disarm before creating frames: create_frame emits FRAME_CREATED again.
        self.state.disarm()
        self.host.remove_frame_created(self.handle_frame_created)

        current = self.frame_attributes(frame)
        pending = [
            snapshot
            for snapshot in self.state.take_pending()
            if not attributes_equal(snapshot, current)
        ]
        created = [self.host.create_frame(dict(snapshot)) for snapshot in pending]
        if created:
            self.logger.info("Recreated %d frame(s).", len(created))
        return created

    def handle_exit(self, payload: dict[str, Any]) -> None:
        self.capture()

    def handle_startup(self, payload: dict[str, Any]) -> None:
        self.apply_primary()

    def handle_frame_created(self, payload: dict[str, Any]) -> None:
        self.apply_secondary(payload["frame"])
