"""Configuration loading and restore settings."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from world_model.frame_attributes import DEFAULT_TRACKED_KEYS

DEFAULT_SNAPSHOT_FILE = "~/.config/frame-restore/frames.json"


def load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML from file, returning empty mapping when missing."""
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")
    return data


def merge_dicts(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge dictionaries."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_effective_config(root: Path) -> dict[str, Any]:
    """Load default.yaml and overlay local.yaml when present."""
    config_dir = root / "config"
    default_cfg = load_yaml(config_dir / "default.yaml")
    local_cfg = load_yaml(config_dir / "local.yaml")
    return merge_dicts(default_cfg, local_cfg)


def resolve_snapshot_path(root: Path, config: dict[str, Any]) -> Path:
    """Expand `~` and environment variables; relative paths resolve against root."""
    raw = str(config.get("paths", {}).get("snapshot_file") or DEFAULT_SNAPSHOT_FILE)
    path = Path(os.path.expandvars(os.path.expanduser(raw)))
    if not path.is_absolute():
        path = root / path
    return path.resolve()


@dataclass(frozen=True)
class RestoreSettings:
    """Which keys are tracked and which restore phases run."""

    tracked_keys: tuple[str, ...] = DEFAULT_TRACKED_KEYS
    capture_enabled: bool = True
    apply_primary_enabled: bool = True
    apply_secondary_enabled: bool = True

    @classmethod
    def from_config(cls, config: dict[str, Any] | None = None) -> RestoreSettings:
        cfg = (config or {}).get("restore", {}) or {}
        keys = cfg.get("tracked_keys", DEFAULT_TRACKED_KEYS)
        if keys is None:
            keys = ()
        if isinstance(keys, str) or not all(isinstance(key, str) for key in keys):
            raise ValueError("restore.tracked_keys must be a list of attribute names.")
        return cls(
            tracked_keys=tuple(dict.fromkeys(keys)),
            capture_enabled=bool(cfg.get("capture", True)),
            apply_primary_enabled=bool(cfg.get("apply_primary", True)),
            apply_secondary_enabled=bool(cfg.get("apply_secondary", True)),
        )
