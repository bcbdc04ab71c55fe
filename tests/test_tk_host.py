"""Tk host geometry helpers and a live round trip when a display exists."""

from __future__ import annotations

from pathlib import Path

import pytest

pytest.importorskip("tkinter")

from core.orchestrator import Orchestrator  # noqa: E402
from os_controller.tk_host import TkFrameHost, build_geometry, parse_geometry  # noqa: E402


def test_parse_geometry_handles_negative_offsets() -> None:
    assert parse_geometry("800x600+-8+-8") == {"left": -8, "top": -8, "width": 800, "height": 600}
    assert parse_geometry("200x100+10+20") == {"left": 10, "top": 20, "width": 200, "height": 100}


def test_parse_geometry_rejects_garbage() -> None:
    with pytest.raises(ValueError):
        parse_geometry("800x600")


def test_build_geometry_uses_available_parts() -> None:
    assert build_geometry({"width": 800, "height": 600, "left": -8, "top": 4}) == "800x600+-8+4"
    assert build_geometry({"width": 800, "height": 600}) == "800x600"
    assert build_geometry({"left": 5, "top": 6}) == "+5+6"
    assert build_geometry({"width": 800, "maximized": True}) == ""
    assert build_geometry({"width": True, "height": 600}) == ""


def test_host_is_not_graphical_before_show() -> None:
    host = TkFrameHost()
    assert host.is_graphical_session() is False
    assert host.list_frames() == []


@pytest.fixture
def tk_host() -> TkFrameHost:
    if not TkFrameHost.display_available():
        pytest.skip("no display available")
    return TkFrameHost(title="frame-restore test")


def test_tk_frames_are_captured_and_recreated(tmp_path: Path, tk_host: TkFrameHost) -> None:
    config = {
        "paths": {"snapshot_file": str(tmp_path / "frames.json")},
        "restore": {"tracked_keys": ["title"]},
    }
    bundle = Orchestrator(root=tmp_path, config=config).build(tk_host)
    tk_host.show()
    tk_host.create_frame({"width": 320, "height": 200, "title": "second"})
    tk_host.exit()

    assert bundle.store.load() == [{"title": "frame-restore test"}, {"title": "second"}]

    next_host = TkFrameHost(title="frame-restore test")
    Orchestrator(root=tmp_path, config=config).build(next_host)
    next_host.show()
    try:
        assert [frame.title() for frame in next_host.list_frames()] == ["frame-restore test", "second"]
    finally:
        next_host.exit()


def test_exit_tears_down_when_exit_hook_fails(tk_host: TkFrameHost) -> None:
    def broken(payload: dict) -> None:
        raise RuntimeError("hook failed")

    tk_host.on_exit(broken)
    tk_host.show()

    with pytest.raises(RuntimeError):
        tk_host.exit()
    assert tk_host.root is None
    assert tk_host.is_graphical_session() is False
