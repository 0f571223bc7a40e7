"""
Event Topics for the ultrawide layout

All pub/sub topics are defined here for easy discovery and documentation.
Topic naming convention: <category>.<action>
"""

# Window lifecycle events (published by the host)
WINDOW_CREATED = "window.created"
"""Published when a window should be laid out. Params: window"""

WINDOW_CLOSED = "window.closed"
"""Published when a window is gone. Params: window"""

# Screen events (published by the host)
SCREEN_CHANGED = "screen.changed"
"""Published when the usable screen area changes. Params: screen (Pane)"""

# Command events (imperative - tell the layout manager to do something)
# These are triggered by the host's keybindings

CMD_INCREASE_MAIN_COUNT = "cmd.increase_main_count"
"""Command: Increase main pane count (or leave grid mode)."""

CMD_DECREASE_MAIN_COUNT = "cmd.decrease_main_count"
"""Command: Decrease main pane count (or leave grid mode)."""

CMD_EXPAND_MAIN = "cmd.expand_main"
"""Command: Increase main pane size."""

CMD_SHRINK_MAIN = "cmd.shrink_main"
"""Command: Decrease main pane size."""

CMD_LAYOUT_COMMAND = "cmd.layout_command"
"""Command: Run a layout command by name. Requires command_name parameter."""

CMD_PROMOTE = "cmd.promote"
"""Command: Move a window to the front of the main panes. Params: window"""

# Layout notifications (published by the layout manager)
LAYOUT_STATE_CHANGED = "layout.state_changed"
"""Published when the layout state changes. Params: state (LayoutState)"""

FRAMES_ASSIGNED = "layout.frames_assigned"
"""Published after frames are recomputed. Params: frames (window id -> Pane)"""
