"""
Pane Partitioning

Building blocks shared by the layout modes: splitting window lists,
halving panes, binary space partition tiling and single-row tiling.
"""

from __future__ import annotations
import math
from dataclasses import replace
from typing import Dict, Hashable, List, Sequence, Tuple, TYPE_CHECKING

from ..geometry import Pane

if TYPE_CHECKING:
    from .layout_base import Window


def partition_windows(
    windows: Sequence["Window"], min_windows_per_pane: int = 0
) -> Tuple[List["Window"], List["Window"]]:
    """
    Split windows into two groups, the first one at least as large.

    Args:
        windows: Ordered windows to split
        min_windows_per_pane: Minimum size of the first group (capped by
            the number of windows)

    Returns:
        (first, second) keeping the original order
    """
    split_index = max(math.ceil(len(windows) / 2), min_windows_per_pane)
    return list(windows[:split_index]), list(windows[split_index:])


def split_pane(pane: Pane, split_vertical: bool) -> Tuple[Pane, Pane]:
    """
    Halve a pane.

    A vertical split stacks the halves top and bottom, otherwise they sit
    side by side. Coordinates are not rounded.
    """
    if split_vertical:
        pane_a = replace(pane, height=pane.height / 2)
        pane_b = replace(pane_a, y=pane_a.y + pane_a.height)
    else:
        pane_a = replace(pane, width=pane.width / 2)
        pane_b = replace(pane_a, x=pane_a.x + pane_a.width)
    return pane_a, pane_b


def bsp_window_panes(
    windows: Sequence["Window"], pane: Pane, split_vertical: bool = True
) -> Dict[Hashable, Pane]:
    """
    Tile windows into pane by binary space partition.

    The split orientation alternates at each level, starting with
    split_vertical.
    """
    if not windows:
        return {}
    if len(windows) == 1:
        return {windows[0].id: pane}

    windows_a, windows_b = partition_windows(windows)
    pane_a, pane_b = split_pane(pane, split_vertical)

    result = bsp_window_panes(windows_a, pane_a, not split_vertical)
    result.update(bsp_window_panes(windows_b, pane_b, not split_vertical))
    return result


def partition_window_panes(
    windows: Sequence["Window"], pane: Pane
) -> Dict[Hashable, Pane]:
    """Give each window an equal-width, full-height slice of pane, left to right."""
    if not windows:
        return {}

    frame_width = pane.width / len(windows)
    return {
        win.id: replace(pane, x=pane.x + frame_width * i, width=frame_width)
        for i, win in enumerate(windows)
    }
