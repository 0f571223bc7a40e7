"""
Layout State

Layout state value and the pure transitions applied to it by commands.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from enum import Enum

MAX_MAIN_PANE_COUNT = 8
MIN_MAIN_PANE_RATIO = 0.2
MAX_MAIN_PANE_RATIO = 0.9
PANE_RESIZE_STEP = 0.05


class LayoutMode(Enum):
    """Macro arrangement of main and secondary windows."""

    CAROUSEL = "carousel"  # Secondary column on the left, main row on the right
    CENTER = "center"  # Main windows centered, secondary on both sides
    GRID = "grid"  # No main windows, everything tiled


@dataclass(frozen=True)
class LayoutState:
    """State the host keeps for the layout and feeds back on every call."""

    main_pane_ratio: float = 0.5
    main_pane_count: int = 1
    layout_mode: LayoutMode = LayoutMode.CAROUSEL


def clamp(value, lower, upper):
    return min(max(value, lower), upper)


def calculate_new_layout_state(
    state: LayoutState,
    main_pane_count_delta: int,
    max_main_pane_count: int = MAX_MAIN_PANE_COUNT,
) -> LayoutState:
    """
    Apply a main pane count change and derive the resulting layout mode.

    The mode rules are checked in order, first match wins:
    a count of zero switches to grid; leaving grid by decreasing enters
    center; leaving grid by increasing enters carousel. Otherwise the mode
    is kept. The ratio is never touched.

    Args:
        state: Current layout state
        main_pane_count_delta: Signed change to the main pane count
        max_main_pane_count: Bound for the absolute main pane count

    Returns:
        New layout state
    """
    main_pane_count = clamp(
        state.main_pane_count + main_pane_count_delta,
        -max_main_pane_count,
        max_main_pane_count,
    )

    layout_mode = state.layout_mode
    if main_pane_count == 0:
        layout_mode = LayoutMode.GRID
    elif main_pane_count_delta < 0 and state.layout_mode == LayoutMode.GRID:
        layout_mode = LayoutMode.CENTER
    elif main_pane_count_delta > 0 and state.layout_mode == LayoutMode.GRID:
        layout_mode = LayoutMode.CAROUSEL

    return replace(state, main_pane_count=main_pane_count, layout_mode=layout_mode)


def expand_main_pane(
    state: LayoutState,
    step: float = PANE_RESIZE_STEP,
    max_ratio: float = MAX_MAIN_PANE_RATIO,
) -> LayoutState:
    """Grow the main pane ratio by one step, up to max_ratio."""
    return replace(state, main_pane_ratio=min(state.main_pane_ratio + step, max_ratio))


def shrink_main_pane(
    state: LayoutState,
    step: float = PANE_RESIZE_STEP,
    min_ratio: float = MIN_MAIN_PANE_RATIO,
) -> LayoutState:
    """Shrink the main pane ratio by one step, down to min_ratio."""
    return replace(state, main_pane_ratio=max(state.main_pane_ratio - step, min_ratio))
