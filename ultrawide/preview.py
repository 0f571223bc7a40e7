"""
Layout Preview

Prints the frames the layout assigns to a set of placeholder windows.
"""

from __future__ import annotations
import math
import os
from dataclasses import dataclass
from typing import List, Optional

from .config import LayoutConfig
from .geometry import Pane
from .layout_manager import LayoutManager
from .layouts import UltraWideLayout


@dataclass(frozen=True)
class PreviewWindow:
    """Placeholder window for previews."""

    id: int
    title: str = ""


def parse_screen(value: str) -> Pane:
    """
    Parse a screen size.

    Accepts "WIDTHxHEIGHT" (e.g. "3440x1440") or "X,Y,WIDTHxHEIGHT".
    """
    x, y = 0.0, 0.0
    size = value.strip().lower()
    if "," in size:
        parts = size.split(",")
        if len(parts) != 3:
            raise ValueError(f"Invalid screen format: {value}. Use WxH or X,Y,WxH")
        x, y, size = float(parts[0]), float(parts[1]), parts[2]

    try:
        width, height = (float(v) for v in size.split("x"))
    except ValueError:
        raise ValueError(f"Invalid screen format: {value}. Use WxH or X,Y,WxH")
    if not all(math.isfinite(v) and v > 0 for v in (width, height)):
        raise ValueError(f"Invalid screen format: {value}. Size must be positive")
    return Pane(x, y, width, height)


def format_frames(manager: LayoutManager) -> List[str]:
    """Render the manager's current frames as text lines."""
    state = manager.state
    lines = [
        f"{manager.layout.name}: mode={state.layout_mode.value} "
        f"main_pane_count={state.main_pane_count} "
        f"main_pane_ratio={state.main_pane_ratio:.2f}"
    ]
    for win in manager.windows:
        pane = manager.frames.get(win.id)
        if pane is None:
            continue
        lines.append(
            f"  {win.title or win.id}: x={pane.x:.1f} y={pane.y:.1f} "
            f"width={pane.width:.1f} height={pane.height:.1f}"
        )
    return lines


def main(environ: Optional[dict] = None) -> int:
    """Main entry point."""
    env = os.environ if environ is None else environ

    try:
        config = LayoutConfig.from_env(env)
        screen = parse_screen(env.get("ULTRAWIDE_SCREEN", "3440x1440"))
        window_count = int(env.get("ULTRAWIDE_WINDOWS", "4"))
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    manager = LayoutManager(
        layout=UltraWideLayout(config),
        screen=screen,
        debug=bool(env.get("ULTRAWIDE_DEBUG")),
    )
    for i in range(1, window_count + 1):
        manager.add_window(PreviewWindow(id=i, title=f"window-{i}"))

    # Comma separated layout commands to apply first, e.g. "command2,command3"
    commands = env.get("ULTRAWIDE_COMMANDS", "").split(",")
    command_names = (c.strip() for c in commands)
    for command_name in filter(None, command_names):
        try:
            manager.run_command(command_name)
        except ValueError as e:
            print(f"Error: {e}")
            return 1

    for line in format_frames(manager):
        print(line)
    return 0
