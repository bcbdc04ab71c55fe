"""Shared fixtures."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from tests.fakes import FakeHost


@pytest.fixture
def host() -> FakeHost:
    return FakeHost()


@pytest.fixture
def restore_config(tmp_path: Path) -> dict[str, Any]:
    return {
        "paths": {"snapshot_file": str(tmp_path / "frames.json")},
        "restore": {
            "tracked_keys": ["left", "top", "width", "height", "maximized", "fullscreen"],
            "capture": True,
            "apply_primary": True,
            "apply_secondary": True,
        },
    }
