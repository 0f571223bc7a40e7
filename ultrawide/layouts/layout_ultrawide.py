"""
Ultra-Wide Layout

Three column layout for ultra-wide monitors with carousel, center and grid
modes.
"""

from __future__ import annotations
from dataclasses import replace
from functools import partial
from typing import Dict, Hashable, List, Optional, TYPE_CHECKING

from ..geometry import Pane
from .layout_base import Layout, LayoutCommand, Window
from .layout_state import (
    LayoutMode,
    LayoutState,
    calculate_new_layout_state,
    expand_main_pane,
    shrink_main_pane,
)
from .partition import bsp_window_panes, partition_window_panes, partition_windows

if TYPE_CHECKING:
    from ..config import LayoutConfig


class UltraWideLayout(Layout):
    """
    3Column Ultra Wide layout.

    Modes:
    - carousel: secondary windows in a left column, main windows side by
      side in the rest of the screen
    - center: main windows in the middle, secondary windows split between a
      left and a right column
    - grid: all windows tiled across the screen

    Commands 1 and 2 change the main pane count (and move between modes),
    commands 3 and 4 grow and shrink the main pane ratio.
    """

    def __init__(self, config: Optional["LayoutConfig"] = None):
        if config is None:
            # Import here to avoid circular dependency
            from ..config import LayoutConfig

            config = LayoutConfig()
        self.config = config

        self._commands = {
            "command1": LayoutCommand(
                description="Increase main pane count (or leave carousel mode)",
                update_state=partial(self._change_main_pane_count, delta=+1),
            ),
            "command2": LayoutCommand(
                description="Decrease main pane count (or enter carousel mode)",
                update_state=partial(self._change_main_pane_count, delta=-1),
            ),
            "command3": LayoutCommand(
                description="Increase main pane size",
                update_state=partial(
                    expand_main_pane,
                    step=config.pane_resize_step,
                    max_ratio=config.max_main_pane_ratio,
                ),
            ),
            "command4": LayoutCommand(
                description="Decrease main pane size",
                update_state=partial(
                    shrink_main_pane,
                    step=config.pane_resize_step,
                    min_ratio=config.min_main_pane_ratio,
                ),
            ),
        }

    @property
    def name(self) -> str:
        return "3Column Ultra Wide"

    @property
    def initial_state(self) -> LayoutState:
        return self.config.initial_state()

    @property
    def commands(self) -> Dict[str, LayoutCommand]:
        return self._commands

    def _change_main_pane_count(self, state: LayoutState, delta: int) -> LayoutState:
        return calculate_new_layout_state(
            state, delta, max_main_pane_count=self.config.max_main_pane_count
        )

    def calculate(
        self,
        windows: List[Window],
        area: Pane,
        state: LayoutState,
    ) -> Dict[Hashable, Pane]:
        if not windows:
            return {}

        # Unknown modes raise ValueError
        layout_mode = LayoutMode(state.layout_mode)
        main_pane_count = abs(state.main_pane_count)
        main_windows = windows[:main_pane_count]
        secondary_windows = windows[main_pane_count:]

        main_pane_width = area.width * state.main_pane_ratio
        secondary_pane_width = area.width - main_pane_width

        if layout_mode == LayoutMode.GRID:
            return bsp_window_panes(windows, area, split_vertical=False)

        if layout_mode == LayoutMode.CENTER:
            return self._calculate_center(
                main_windows, secondary_windows, area, secondary_pane_width
            )

        return self._calculate_carousel(
            main_windows, secondary_windows, area, secondary_pane_width
        )

    def _calculate_carousel(
        self,
        main_windows: List[Window],
        secondary_windows: List[Window],
        area: Pane,
        secondary_pane_width: float,
    ) -> Dict[Hashable, Pane]:
        # Half width so the main row lines up with center + right in center mode
        left_width = secondary_pane_width / 2 if secondary_windows else 0
        left_pane = replace(area, width=left_width)
        main_pane = replace(
            area,
            x=left_pane.x + left_pane.width,
            width=area.width - left_pane.width,
        )

        result = partition_window_panes(main_windows, main_pane)
        result.update(bsp_window_panes(secondary_windows, left_pane, True))
        return result

    def _calculate_center(
        self,
        main_windows: List[Window],
        secondary_windows: List[Window],
        area: Pane,
        secondary_pane_width: float,
    ) -> Dict[Hashable, Pane]:
        left_windows, right_windows = partition_windows(secondary_windows, 2)

        left_width = secondary_pane_width / 2 if left_windows else 0
        right_width = secondary_pane_width / 2 if right_windows else 0
        center_width = area.width - left_width - right_width

        left_pane = replace(area, width=left_width)
        center_pane = replace(
            area, x=left_pane.x + left_pane.width, width=center_width
        )
        right_pane = replace(
            area, x=center_pane.x + center_pane.width, width=right_width
        )

        result = bsp_window_panes(main_windows, center_pane, False)
        result.update(bsp_window_panes(left_windows, left_pane, True))
        result.update(bsp_window_panes(right_windows, right_pane, True))
        return result
