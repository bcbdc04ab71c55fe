"""Configuration loading tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.policy_runtime import (
    RestoreSettings,
    load_effective_config,
    resolve_snapshot_path,
)
from world_model.frame_attributes import DEFAULT_TRACKED_KEYS


def _write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def test_local_config_overrides_defaults(tmp_path: Path) -> None:
    _write(
        tmp_path / "config" / "default.yaml",
        "restore:\n  tracked_keys: [left, top]\n  capture: true\nlogging:\n  level: INFO\n",
    )
    _write(tmp_path / "config" / "local.yaml", "restore:\n  capture: false\n")

    config = load_effective_config(tmp_path)
    settings = RestoreSettings.from_config(config)

    assert settings.tracked_keys == ("left", "top")
    assert settings.capture_enabled is False
    assert settings.apply_primary_enabled is True
    assert config["logging"]["level"] == "INFO"


def test_missing_config_uses_defaults(tmp_path: Path) -> None:
    settings = RestoreSettings.from_config(load_effective_config(tmp_path))
    assert settings == RestoreSettings()
    assert settings.tracked_keys == DEFAULT_TRACKED_KEYS


def test_non_mapping_config_is_rejected(tmp_path: Path) -> None:
    _write(tmp_path / "config" / "default.yaml", "- just\n- a list\n")
    with pytest.raises(ValueError):
        load_effective_config(tmp_path)


def test_tracked_keys_must_be_names() -> None:
    with pytest.raises(ValueError):
        RestoreSettings.from_config({"restore": {"tracked_keys": "left"}})
    with pytest.raises(ValueError):
        RestoreSettings.from_config({"restore": {"tracked_keys": ["left", 3]}})


def test_tracked_keys_are_deduplicated() -> None:
    settings = RestoreSettings.from_config({"restore": {"tracked_keys": ["left", "left", "top"]}})
    assert settings.tracked_keys == ("left", "top")


def test_snapshot_path_resolution(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FRAME_STATE_DIR", str(tmp_path / "state"))

    relative = resolve_snapshot_path(tmp_path, {"paths": {"snapshot_file": "data/frames.json"}})
    expanded = resolve_snapshot_path(tmp_path, {"paths": {"snapshot_file": "$FRAME_STATE_DIR/f.json"}})
    default = resolve_snapshot_path(tmp_path, {})

    assert relative == (tmp_path / "data" / "frames.json").resolve()
    assert expanded == (tmp_path / "state" / "f.json").resolve()
    assert default.name == "frames.json"
    assert default.parent.name == "frame-restore"


def test_shipped_default_config_loads() -> None:
    root = Path(__file__).resolve().parents[1]
    settings = RestoreSettings.from_config(load_effective_config(root))
    assert settings.tracked_keys == DEFAULT_TRACKED_KEYS
