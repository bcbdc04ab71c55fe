"""Frame host backed by tkinter: the root window plus host-created toplevels."""

from __future__ import annotations

import logging
import re
import tkinter as tk
from typing import Any

from core.event_bus import FRAME_CREATED, HOST_EXIT, HOST_STARTUP, EventBus
from os_controller.base_controller import FrameHost
from world_model.frame_attributes import AttributeMap

_GEOMETRY_RE = re.compile(r"^(\d+)x(\d+)([+-]-?\d+)([+-]-?\d+)$")

FULLSCREEN_SYMBOL = "fullboth"


def parse_geometry(geometry: str) -> AttributeMap:
    """Parse a Tk `WxH+X+Y` geometry string into width/height/left/top."""
    match = _GEOMETRY_RE.match(geometry.strip())
    if not match:
        raise ValueError(f"Unrecognized geometry: {geometry!r}")
    width, height, x, y = match.groups()
    return {
        "left": _offset(x),
        "top": _offset(y),
        "width": int(width),
        "height": int(height),
    }


def _offset(value: str) -> int:
    # "+-8" is a negative offset from the left/top edge.
    return int(value[1:]) if value[0] == "+" else -int(value[1:])


def build_geometry(attributes: AttributeMap) -> str:
    """Build a geometry string from whichever of width/height/left/top are ints."""
    geometry = ""
    width, height = attributes.get("width"), attributes.get("height")
    if _is_int(width) and _is_int(height):
        geometry = f"{width}x{height}"
    left, top = attributes.get("left"), attributes.get("top")
    if _is_int(left) and _is_int(top):
        geometry += f"+{left}+{top}"
    return geometry


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class TkFrameHost(FrameHost):
    """Tk implementation of FrameHost.

    `show()` emits HOST_STARTUP, creates the root with the initial frame
    config applied and emits FRAME_CREATED for it. Closing the root window
    calls `exit()`, which emits HOST_EXIT before tearing Tk down.
    """

    def __init__(self, events: EventBus | None = None, title: str = "frame-restore") -> None:
        super().__init__(events)
        self.title = title
        self.root: tk.Tk | None = None
        self._toplevels: list[tk.Toplevel] = []
        self._initial_config: AttributeMap = {}
        self.logger = logging.getLogger("fr.tk_host")

    @staticmethod
    def display_available() -> bool:
        """Probe whether a Tk root can be created on this machine."""
        try:
            probe = tk.Tk()
        except tk.TclError:
            return False
        probe.destroy()
        return True

    def is_graphical_session(self) -> bool:
        if self.root is None:
            return False
        try:
            return bool(self.root.winfo_exists())
        except tk.TclError:
            return False

    def list_frames(self) -> list[tk.Misc]:
        if self.root is None:
            return []
        self._toplevels = [top for top in self._toplevels if _exists(top)]
        return [self.root, *self._toplevels]

    def is_graphical_frame(self, frame: tk.Wm) -> bool:
        return _exists(frame) and frame.state() != "withdrawn"

    def get_attributes(self, frame: tk.Wm) -> AttributeMap:
        frame.update_idletasks()
        attributes = parse_geometry(frame.geometry())
        attributes["maximized"] = _is_zoomed(frame)
        attributes["fullscreen"] = FULLSCREEN_SYMBOL if _is_fullscreen(frame) else None
        attributes["title"] = frame.title()
        return attributes

    def create_frame(self, attributes: AttributeMap) -> tk.Toplevel:
        if self.root is None:
            raise RuntimeError("Cannot create a frame before the root frame is shown.")
        top = tk.Toplevel(self.root)
        top.title(str(attributes.get("title") or self.title))
        apply_attributes(top, attributes)
        top.protocol("WM_DELETE_WINDOW", lambda: self._close_toplevel(top))
        self._toplevels.append(top)
        top.update_idletasks()
        self.events.emit(FRAME_CREATED, {"frame": top})
        return top

    def get_initial_frame_config(self) -> AttributeMap:
        return dict(self._initial_config)

    def set_initial_frame_config(self, attributes: AttributeMap) -> None:
        self._initial_config = dict(attributes)

    def show(self) -> tk.Tk:
        """Start the host: run startup hooks, then create the root frame."""
        self.events.emit(HOST_STARTUP, {})
        self.root = tk.Tk()
        self.root.title(str(self._initial_config.get("title") or self.title))
        apply_attributes(self.root, self._initial_config)
        self.root.protocol("WM_DELETE_WINDOW", self.exit)
        self.root.update_idletasks()
        self.events.emit(FRAME_CREATED, {"frame": self.root})
        return self.root

    def run(self) -> None:
        if self.root is None:
            self.show()
        assert self.root is not None
        self.root.mainloop()

    def exit(self) -> None:
        """Run exit hooks while frames still exist, then destroy Tk."""
        if self.root is None:
            return
        try:
            self.events.emit(HOST_EXIT, {})
        finally:
            root, self.root = self.root, None
            self._toplevels = []
            root.destroy()

    def _close_toplevel(self, top: tk.Toplevel) -> None:
        if top in self._toplevels:
            self._toplevels.remove(top)
        top.destroy()


def apply_attributes(frame: tk.Wm, attributes: AttributeMap) -> None:
    """Apply geometry and window-manager state to a frame."""
    geometry = build_geometry(attributes)
    if geometry:
        frame.geometry(geometry)
    if attributes.get("maximized"):
        _set_zoomed(frame)
    if attributes.get("fullscreen"):
        frame.attributes("-fullscreen", True)


def _exists(frame: tk.Misc) -> bool:
    try:
        return bool(frame.winfo_exists())
    except tk.TclError:
        return False


def _is_zoomed(frame: tk.Wm) -> bool:
    try:
        if frame.state() == "zoomed":
            return True
    except tk.TclError:
        pass
    try:
        # X11 window managers report maximization through -zoomed.
        return bool(int(frame.attributes("-zoomed")))
    except (tk.TclError, ValueError):
        return False


def _set_zoomed(frame: tk.Wm) -> None:
    try:
        frame.state("zoomed")
    except tk.TclError:
        frame.attributes("-zoomed", True)


def _is_fullscreen(frame: tk.Wm) -> bool:
    try:
        return bool(int(frame.attributes("-fullscreen")))
    except (tk.TclError, ValueError):
        return False
