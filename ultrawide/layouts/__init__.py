"""
Layout System

Provides the ultra-wide layout and the tiling primitives it is built from.
"""

from .layout_base import Layout, LayoutCommand, Window
from .layout_state import (
    LayoutMode,
    LayoutState,
    calculate_new_layout_state,
    expand_main_pane,
    shrink_main_pane,
)
from .partition import (
    partition_windows,
    split_pane,
    bsp_window_panes,
    partition_window_panes,
)
from .layout_ultrawide import UltraWideLayout

__all__ = [
    # Base classes
    "Layout",
    "LayoutCommand",
    "Window",
    # State
    "LayoutMode",
    "LayoutState",
    "calculate_new_layout_state",
    "expand_main_pane",
    "shrink_main_pane",
    # Tiling primitives
    "partition_windows",
    "split_pane",
    "bsp_window_panes",
    "partition_window_panes",
    # Layout implementations
    "UltraWideLayout",
]
