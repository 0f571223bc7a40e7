"""
Geometry Types

Screen rectangles shared by the layout algorithms and the host.
"""

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class Pane:
    """Rectangular screen region (top-left origin, y grows downward)."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def area(self) -> float:
        return self.width * self.height
