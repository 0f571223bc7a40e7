"""
ultrawide

A three column tiling layout for ultra-wide monitors.

This package provides:
- Tiling primitives (window partitioning, pane splitting, BSP tiling)
- The 3Column Ultra Wide layout with carousel, center and grid modes
- A pub/sub driven layout manager for hosts

Example usage:
    from ultrawide import UltraWideLayout, Pane

    layout = UltraWideLayout()
    state = layout.initial_state
    state = layout.run_command("command1", state)
    frames = layout.calculate(windows, Pane(0, 0, 3440, 1440), state)

Or preview a layout:
    python -m ultrawide
"""

__version__ = "0.1.0"

from .geometry import Pane

from .config import LayoutConfig, parse_layout_mode

from .layouts import (
    Layout,
    LayoutCommand,
    LayoutMode,
    LayoutState,
    UltraWideLayout,
    Window,
    partition_windows,
    split_pane,
    bsp_window_panes,
    partition_window_panes,
    calculate_new_layout_state,
    expand_main_pane,
    shrink_main_pane,
)

from .layout_manager import LayoutManager

from . import topics

__all__ = [
    # Version
    "__version__",
    # Geometry
    "Pane",
    # Configuration
    "LayoutConfig",
    "parse_layout_mode",
    # Layouts
    "Layout",
    "LayoutCommand",
    "LayoutMode",
    "LayoutState",
    "UltraWideLayout",
    "Window",
    "partition_windows",
    "split_pane",
    "bsp_window_panes",
    "partition_window_panes",
    "calculate_new_layout_state",
    "expand_main_pane",
    "shrink_main_pane",
    # Manager
    "LayoutManager",
    # Event topics
    "topics",
]
