"""
Layout Manager

Host-side adapter that keeps the window list, screen and layout state, and
recomputes frame assignments whenever one of them changes.
"""

from __future__ import annotations
import os
import time
from typing import Dict, Hashable, List, Optional

from pubsub import pub

from . import topics
from .geometry import Pane
from .layouts import Layout, LayoutState, UltraWideLayout, Window


class LayoutManager:
    """
    Drives a layout from events on the bus.

    This component subscribes to window/screen lifecycle events and layout
    command events. It publishes LAYOUT_STATE_CHANGED and FRAMES_ASSIGNED.

    Responsibilities:
    - Track the ordered window list and the screen area
    - CMD_INCREASE_MAIN_COUNT / CMD_DECREASE_MAIN_COUNT: change main pane count
    - CMD_EXPAND_MAIN / CMD_SHRINK_MAIN: resize the main pane
    - CMD_LAYOUT_COMMAND: run any layout command by name
    - CMD_PROMOTE: move a window into the first main pane
    """

    # Command topic -> layout command name
    COMMAND_TOPICS = {
        topics.CMD_INCREASE_MAIN_COUNT: "command1",
        topics.CMD_DECREASE_MAIN_COUNT: "command2",
        topics.CMD_EXPAND_MAIN: "command3",
        topics.CMD_SHRINK_MAIN: "command4",
    }

    def __init__(
        self,
        layout: Optional[Layout] = None,
        screen: Optional[Pane] = None,
        debug: Optional[bool] = None,
    ):
        self.layout: Layout = layout if layout is not None else UltraWideLayout()
        self.state: LayoutState = self.layout.initial_state
        self.screen: Optional[Pane] = screen
        self.windows: List[Window] = []
        self.frames: Dict[Hashable, Pane] = {}

        # Setup debug event logging if enabled
        if debug is None:
            debug = bool(os.getenv("ULTRAWIDE_DEBUG"))
        if debug:
            pub.subscribe(self.debug_event_logger, pub.ALL_TOPICS)

        self._setup_subscriptions()

    def _setup_subscriptions(self):
        """Subscribe to events LayoutManager cares about."""
        # Notification events
        pub.subscribe(self._on_window_created, topics.WINDOW_CREATED)
        pub.subscribe(self._on_window_closed, topics.WINDOW_CLOSED)
        pub.subscribe(self._on_screen_changed, topics.SCREEN_CHANGED)

        # Layout command events
        pub.subscribe(self._on_increase_main_count, topics.CMD_INCREASE_MAIN_COUNT)
        pub.subscribe(self._on_decrease_main_count, topics.CMD_DECREASE_MAIN_COUNT)
        pub.subscribe(self._on_expand_main, topics.CMD_EXPAND_MAIN)
        pub.subscribe(self._on_shrink_main, topics.CMD_SHRINK_MAIN)
        pub.subscribe(self._on_layout_command, topics.CMD_LAYOUT_COMMAND)
        pub.subscribe(self._on_promote, topics.CMD_PROMOTE)

    def debug_event_logger(self, topic=pub.AUTO_TOPIC, **kwargs):
        """Log all events published on the event bus."""
        timestamp = time.strftime("%H:%M:%S")
        topic_name = topic.getName()
        data_str = ", ".join(f"{k}={v}" for k, v in kwargs.items() if k != "topic")
        print(f"[{timestamp}] EVENT: {topic_name} | {data_str}")

    def _on_window_created(self, window: Window):
        """Handle WINDOW_CREATED event."""
        self.add_window(window)

    def _on_window_closed(self, window: Window):
        """Handle WINDOW_CLOSED event."""
        self.remove_window(window)

    def _on_screen_changed(self, screen: Pane):
        """Handle SCREEN_CHANGED event."""
        self.set_screen(screen)

    def _on_increase_main_count(self):
        """Handle CMD_INCREASE_MAIN_COUNT command."""
        self.run_command(self.COMMAND_TOPICS[topics.CMD_INCREASE_MAIN_COUNT])

    def _on_decrease_main_count(self):
        """Handle CMD_DECREASE_MAIN_COUNT command."""
        self.run_command(self.COMMAND_TOPICS[topics.CMD_DECREASE_MAIN_COUNT])

    def _on_expand_main(self):
        """Handle CMD_EXPAND_MAIN command."""
        self.run_command(self.COMMAND_TOPICS[topics.CMD_EXPAND_MAIN])

    def _on_shrink_main(self):
        """Handle CMD_SHRINK_MAIN command."""
        self.run_command(self.COMMAND_TOPICS[topics.CMD_SHRINK_MAIN])

    def _on_layout_command(self, command_name: str):
        """Handle CMD_LAYOUT_COMMAND command.

        Args:
            command_name: Name of a command in the layout's command table
        """
        if command_name not in self.layout.commands:
            return
        self.run_command(command_name)

    def _on_promote(self, window: Window):
        """Handle CMD_PROMOTE command."""
        self.promote(window)

    def _index_of(self, window: Window) -> Optional[int]:
        for i, win in enumerate(self.windows):
            if win.id == window.id:
                return i
        return None

    def add_window(self, window: Window):
        """Append a window to the layout."""
        if self._index_of(window) is not None:
            return
        self.windows.append(window)
        self.update_frames()

    def remove_window(self, window: Window):
        """Remove a window from the layout."""
        idx = self._index_of(window)
        if idx is None:
            return
        del self.windows[idx]
        self.update_frames()

    def promote(self, window: Window):
        """Move a window to the front so it takes the first main pane."""
        idx = self._index_of(window)
        if idx is None or idx == 0:
            return
        self.windows.insert(0, self.windows.pop(idx))
        self.update_frames()

    def set_screen(self, screen: Pane):
        """Set the usable screen area."""
        self.screen = screen
        self.update_frames()

    def run_command(self, command_name: str):
        """Apply a layout command and publish the new state."""
        new_state = self.layout.run_command(command_name, self.state)
        if new_state == self.state:
            return

        self.state = new_state
        pub.sendMessage(topics.LAYOUT_STATE_CHANGED, state=self.state)
        self.update_frames()

    def calculate_layout(self) -> Dict[Hashable, Pane]:
        """Calculate frame assignments for the current windows and screen."""
        if self.screen is None:
            return {}
        return self.layout.calculate(self.windows, self.screen, self.state)

    def update_frames(self) -> Dict[Hashable, Pane]:
        """Recompute frames and publish them."""
        self.frames = self.calculate_layout()
        pub.sendMessage(topics.FRAMES_ASSIGNED, frames=self.frames)
        return self.frames
