"""
Layout Configuration

Tunables for the ultra-wide layout and their environment overrides.
"""

from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Optional

from .layouts.layout_state import LayoutMode, LayoutState


def parse_layout_mode(mode: str | LayoutMode) -> LayoutMode:
    """
    Parse a layout mode value.

    Accepts a LayoutMode member or its string value ("carousel", "center",
    "grid"), case-insensitive.
    """
    if isinstance(mode, LayoutMode):
        return mode
    if isinstance(mode, str):
        try:
            return LayoutMode(mode.strip().lower())
        except ValueError:
            valid = ", ".join(m.value for m in LayoutMode)
            raise ValueError(f"Invalid layout mode: {mode}. Use one of: {valid}")
    raise ValueError(f"Invalid layout mode type: {type(mode)}. Use str or LayoutMode")


@dataclass
class LayoutConfig:
    """Ultra-wide layout configuration."""

    # Main pane count is clamped to [-max_main_pane_count, max_main_pane_count]
    max_main_pane_count: int = 8

    # Main pane ratio bounds
    min_main_pane_ratio: float = 0.2
    max_main_pane_ratio: float = 0.9

    # Ratio change per expand/shrink command (the host's resize step, if any)
    pane_resize_step: float = 0.05

    # Initial layout state
    initial_main_pane_ratio: float = 0.5
    initial_main_pane_count: int = 1
    initial_layout_mode: str | LayoutMode = LayoutMode.CAROUSEL

    def __post_init__(self):
        """Validate bounds and normalize the initial state."""
        self.initial_layout_mode = parse_layout_mode(self.initial_layout_mode)

        if not 0 < self.min_main_pane_ratio < self.max_main_pane_ratio <= 1:
            raise ValueError(
                "Invalid main pane ratio bounds: "
                f"{self.min_main_pane_ratio}..{self.max_main_pane_ratio}"
            )
        if self.max_main_pane_count < 0:
            raise ValueError(
                f"Invalid max main pane count: {self.max_main_pane_count}"
            )
        if self.pane_resize_step <= 0:
            raise ValueError(f"Invalid pane resize step: {self.pane_resize_step}")

        self.initial_main_pane_ratio = min(
            max(self.initial_main_pane_ratio, self.min_main_pane_ratio),
            self.max_main_pane_ratio,
        )
        self.initial_main_pane_count = min(
            max(self.initial_main_pane_count, -self.max_main_pane_count),
            self.max_main_pane_count,
        )

    def initial_state(self) -> LayoutState:
        """Build the layout state a fresh layout starts in."""
        return LayoutState(
            main_pane_ratio=self.initial_main_pane_ratio,
            main_pane_count=self.initial_main_pane_count,
            layout_mode=self.initial_layout_mode,
        )

    @classmethod
    def from_env(cls, environ: Optional[dict] = None) -> "LayoutConfig":
        """Build a config from ULTRAWIDE_* environment variables."""
        env = os.environ if environ is None else environ
        kwargs = {}

        if env.get("ULTRAWIDE_MAX_MAIN_PANE_COUNT"):
            kwargs["max_main_pane_count"] = int(env["ULTRAWIDE_MAX_MAIN_PANE_COUNT"])
        if env.get("ULTRAWIDE_MIN_MAIN_PANE_RATIO"):
            kwargs["min_main_pane_ratio"] = float(env["ULTRAWIDE_MIN_MAIN_PANE_RATIO"])
        if env.get("ULTRAWIDE_MAX_MAIN_PANE_RATIO"):
            kwargs["max_main_pane_ratio"] = float(env["ULTRAWIDE_MAX_MAIN_PANE_RATIO"])
        if env.get("ULTRAWIDE_RESIZE_STEP"):
            kwargs["pane_resize_step"] = float(env["ULTRAWIDE_RESIZE_STEP"])
        if env.get("ULTRAWIDE_MAIN_PANE_RATIO"):
            kwargs["initial_main_pane_ratio"] = float(env["ULTRAWIDE_MAIN_PANE_RATIO"])
        if env.get("ULTRAWIDE_MAIN_PANE_COUNT"):
            kwargs["initial_main_pane_count"] = int(env["ULTRAWIDE_MAIN_PANE_COUNT"])
        if env.get("ULTRAWIDE_LAYOUT_MODE"):
            kwargs["initial_layout_mode"] = env["ULTRAWIDE_LAYOUT_MODE"]

        return cls(**kwargs)
