"""Top-level wiring of the frame restore runtime."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from core.event_bus import FRAME_CREATED, HOST_EXIT, HOST_STARTUP
from core.policy_runtime import RestoreSettings, load_effective_config, resolve_snapshot_path
from core.restore_coordinator import RestoreCoordinator
from core.state_manager import StateManager
from memory.stores.snapshot_store import SnapshotStore
from os_controller.base_controller import FrameHost


class FrameRestoreMode:
    """Installs and removes the restore hooks on a host."""

    def __init__(self, coordinator: RestoreCoordinator) -> None:
        self.coordinator = coordinator
        self.enabled = False
        self.logger = logging.getLogger("fr.orchestrator")

    def enable(self) -> None:
        """Register each enabled phase on its host event and re-arm the one-shot."""
        if self.enabled:
            return
        coordinator = self.coordinator
        host = coordinator.host
        settings = coordinator.settings
        if settings.capture_enabled:
            host.on_exit(coordinator.handle_exit)
        if settings.apply_primary_enabled:
            host.on_startup(coordinator.handle_startup)
        if settings.apply_secondary_enabled:
            coordinator.state.rearm()
            host.on_frame_created(coordinator.handle_frame_created)
        self.enabled = True
        self.logger.debug("Frame restore mode enabled.")

    def disable(self) -> None:
        """Remove every hook this mode may have installed."""
        coordinator = self.coordinator
        events = coordinator.host.events
        events.unsubscribe(HOST_EXIT, coordinator.handle_exit)
        events.unsubscribe(HOST_STARTUP, coordinator.handle_startup)
        events.unsubscribe(FRAME_CREATED, coordinator.handle_frame_created)
        self.enabled = False
        self.logger.debug("Frame restore mode disabled.")

    def toggle(self) -> bool:
        if self.enabled:
            self.disable()
        else:
            self.enable()
        return self.enabled


@dataclass
class RuntimeBundle:
    """Holds initialized runtime components."""

    config: dict[str, Any]
    settings: RestoreSettings
    store: SnapshotStore
    coordinator: RestoreCoordinator
    mode: FrameRestoreMode


class Orchestrator:
    """Creates and wires runtime components for a host."""

    def __init__(self, root: Path | None = None, config: dict[str, Any] | None = None) -> None:
        default_root = Path(__file__).resolve().parents[1]
        self.root = (root or default_root).resolve()
        self._config = config

    def load_config(self) -> dict[str, Any]:
        if self._config is None:
            self._config = load_effective_config(self.root)
        return self._config

    def build_store(self) -> SnapshotStore:
        config = self.load_config()
        settings = RestoreSettings.from_config(config)
        return SnapshotStore(resolve_snapshot_path(self.root, config), settings.tracked_keys)

    def build(self, host: FrameHost, enable: bool = True) -> RuntimeBundle:
        config = self.load_config()
        settings = RestoreSettings.from_config(config)
        store = self.build_store()
        coordinator = RestoreCoordinator(
            host=host,
            store=store,
            settings=settings,
            state=StateManager(),
        )
        mode = FrameRestoreMode(coordinator)
        if enable:
            mode.enable()
        return RuntimeBundle(
            config=config,
            settings=settings,
            store=store,
            coordinator=coordinator,
            mode=mode,
        )
