"""
Unit tests for the event-driven layout manager.
"""

import pytest
from pubsub import pub

from ultrawide import topics
from ultrawide.config import LayoutConfig
from ultrawide.geometry import Pane
from ultrawide.layout_manager import LayoutManager
from ultrawide.layouts import LayoutMode, LayoutState, UltraWideLayout


@pytest.fixture
def published():
    """Record LAYOUT_STATE_CHANGED and FRAMES_ASSIGNED messages."""
    received = {"states": [], "frames": []}

    def on_state(state):
        received["states"].append(state)

    def on_frames(frames):
        received["frames"].append(frames)

    pub.subscribe(on_state, topics.LAYOUT_STATE_CHANGED)
    pub.subscribe(on_frames, topics.FRAMES_ASSIGNED)
    # Listeners are weakly referenced, keep them alive for the test
    received["_listeners"] = (on_state, on_frames)
    return received


@pytest.mark.unit
class TestLayoutManager:
    """Test LayoutManager window and screen tracking."""

    def test_initial_state(self):
        manager = LayoutManager()

        assert isinstance(manager.layout, UltraWideLayout)
        assert manager.state == LayoutState(0.5, 1, LayoutMode.CAROUSEL)
        assert manager.windows == []
        assert manager.frames == {}

    def test_no_screen_no_frames(self, mock_window):
        manager = LayoutManager()
        manager.add_window(mock_window(id=1))

        assert manager.frames == {}

    def test_add_window(self, mock_window, ultrawide_area, published):
        manager = LayoutManager(screen=ultrawide_area)
        manager.add_window(mock_window(id=1))

        assert manager.frames == {1: ultrawide_area}
        assert published["frames"][-1] == {1: ultrawide_area}

    def test_add_window_twice(self, mock_window, ultrawide_area):
        manager = LayoutManager(screen=ultrawide_area)
        manager.add_window(mock_window(id=1))
        manager.add_window(mock_window(id=1))

        assert len(manager.windows) == 1

    def test_remove_window(self, windows, ultrawide_area):
        manager = LayoutManager(screen=ultrawide_area)
        w1, w2 = windows(2)
        manager.add_window(w1)
        manager.add_window(w2)
        manager.remove_window(w1)

        assert manager.windows == [w2]
        assert manager.frames == {2: ultrawide_area}

    def test_remove_unknown_window(self, mock_window, ultrawide_area, published):
        manager = LayoutManager(screen=ultrawide_area)
        manager.remove_window(mock_window(id=42))

        assert published["frames"] == []

    def test_promote(self, windows, ultrawide_area):
        manager = LayoutManager(screen=ultrawide_area)
        ws = windows(3)
        for win in ws:
            manager.add_window(win)

        manager.promote(ws[2])

        assert [w.id for w in manager.windows] == [3, 1, 2]
        assert manager.frames[3] == Pane(860, 0, 2580, 1440)

    def test_set_screen_recomputes(self, mock_window, standard_area, ultrawide_area):
        manager = LayoutManager(screen=standard_area)
        manager.add_window(mock_window(id=1))
        manager.set_screen(ultrawide_area)

        assert manager.frames == {1: ultrawide_area}

    def test_run_command_publishes_state(self, windows, ultrawide_area, published):
        manager = LayoutManager(screen=ultrawide_area)
        for win in windows(2):
            manager.add_window(win)

        manager.run_command("command2")

        assert manager.state.layout_mode == LayoutMode.GRID
        assert published["states"] == [manager.state]
        assert published["frames"][-1] == {
            1: Pane(0, 0, 1720, 1440),
            2: Pane(1720, 0, 1720, 1440),
        }

    def test_unchanged_state_not_published(self, ultrawide_area, published):
        manager = LayoutManager(
            layout=UltraWideLayout(LayoutConfig(initial_main_pane_ratio=0.9)),
            screen=ultrawide_area,
        )
        manager.run_command("command3")

        assert published["states"] == []

    def test_unknown_command(self):
        manager = LayoutManager()
        with pytest.raises(ValueError):
            manager.run_command("nope")


@pytest.mark.unit
class TestLayoutManagerEvents:
    """Test LayoutManager reacting to bus events."""

    def test_window_events(self, windows, ultrawide_area):
        manager = LayoutManager()
        w1, w2 = windows(2)

        pub.sendMessage(topics.SCREEN_CHANGED, screen=ultrawide_area)
        pub.sendMessage(topics.WINDOW_CREATED, window=w1)
        pub.sendMessage(topics.WINDOW_CREATED, window=w2)
        assert set(manager.frames) == {1, 2}

        pub.sendMessage(topics.WINDOW_CLOSED, window=w1)
        assert manager.frames == {2: ultrawide_area}

    def test_command_events(self):
        manager = LayoutManager()

        pub.sendMessage(topics.CMD_INCREASE_MAIN_COUNT)
        assert manager.state.main_pane_count == 2

        pub.sendMessage(topics.CMD_DECREASE_MAIN_COUNT)
        pub.sendMessage(topics.CMD_DECREASE_MAIN_COUNT)
        assert manager.state.layout_mode == LayoutMode.GRID

        pub.sendMessage(topics.CMD_EXPAND_MAIN)
        assert manager.state.main_pane_ratio == pytest.approx(0.55)

        pub.sendMessage(topics.CMD_SHRINK_MAIN)
        pub.sendMessage(topics.CMD_SHRINK_MAIN)
        assert manager.state.main_pane_ratio == pytest.approx(0.45)

    def test_named_command_event(self):
        manager = LayoutManager()
        pub.sendMessage(topics.CMD_LAYOUT_COMMAND, command_name="command2")
        pub.sendMessage(topics.CMD_LAYOUT_COMMAND, command_name="command2")

        assert manager.state.main_pane_count == -1
        assert manager.state.layout_mode == LayoutMode.CENTER

    def test_promote_event(self, windows, ultrawide_area):
        manager = LayoutManager(screen=ultrawide_area)
        ws = windows(2)
        for win in ws:
            manager.add_window(win)

        pub.sendMessage(topics.CMD_PROMOTE, window=ws[1])

        assert [w.id for w in manager.windows] == [2, 1]

    def test_debug_logger(self, capsys):
        manager = LayoutManager(debug=True)
        pub.sendMessage(topics.CMD_EXPAND_MAIN)

        out = capsys.readouterr().out
        assert "EVENT: cmd.expand_main" in out
        assert "EVENT: layout.state_changed | state=" in out
        assert manager.state.main_pane_ratio == pytest.approx(0.55)

    def test_unknown_named_command_event_ignored(self, published):
        manager = LayoutManager()
        pub.sendMessage(topics.CMD_LAYOUT_COMMAND, command_name="command9")

        assert manager.state == LayoutState(0.5, 1, LayoutMode.CAROUSEL)
        assert published["states"] == []

    def test_debug_logger_from_env(self, monkeypatch, capsys):
        monkeypatch.setenv("ULTRAWIDE_DEBUG", "1")
        manager = LayoutManager()
        pub.sendMessage(topics.CMD_SHRINK_MAIN)

        out = capsys.readouterr().out
        assert "EVENT: cmd.shrink_main" in out
        assert manager.state.main_pane_ratio == pytest.approx(0.45)

    def test_debug_logger_off_by_default(self, monkeypatch, capsys):
        monkeypatch.delenv("ULTRAWIDE_DEBUG", raising=False)
        manager = LayoutManager()
        pub.sendMessage(topics.CMD_SHRINK_MAIN)

        assert "EVENT:" not in capsys.readouterr().out
        assert manager.state.main_pane_ratio == pytest.approx(0.45)
