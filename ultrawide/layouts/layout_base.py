"""
Window Layout Base Classes

Provides the Layout interface the host drives and the command type it binds.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Dict, Hashable, List, Protocol

from ..geometry import Pane
from .layout_state import LayoutState


class Window(Protocol):
    """Host window. Only its stable id is read."""

    id: Hashable


@dataclass(frozen=True)
class LayoutCommand:
    """A named state transition the host binds to a key."""

    description: str
    update_state: Callable[[LayoutState], LayoutState]


class Layout(ABC):
    """Abstract base class for window layouts."""

    @abstractmethod
    def calculate(
        self,
        windows: List[Window],
        area: Pane,
        state: LayoutState,
    ) -> Dict[Hashable, Pane]:
        """
        Calculate window positions and sizes.

        Args:
            windows: Ordered list of windows to layout
            area: Available screen area
            state: Current layout state

        Returns:
            Dictionary mapping window ids to their assigned pane
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Layout name for display."""
        pass

    @property
    @abstractmethod
    def initial_state(self) -> LayoutState:
        """State the host starts the layout with."""
        pass

    @property
    def commands(self) -> Dict[str, LayoutCommand]:
        """Commands the host may bind. None by default."""
        return {}

    def run_command(self, command_name: str, state: LayoutState) -> LayoutState:
        """Apply the named command to state."""
        command = self.commands.get(command_name)
        if command is None:
            valid = ", ".join(self.commands) or "none"
            raise ValueError(
                f"Unknown layout command: {command_name}. Available: {valid}"
            )
        return command.update_state(state)
