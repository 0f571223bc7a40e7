"""
Shared pytest fixtures for ultrawide tests.
"""

import itertools

import pytest
from pubsub import pub

from ultrawide.geometry import Pane


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without a host")


@pytest.fixture
def mock_window():
    """Factory fixture for creating mock window objects."""

    class MockWindow:
        def __init__(self, id=1, title="test"):
            self.id = id
            self.title = title

        def __repr__(self):
            return f"MockWindow({self.id})"

    return MockWindow


@pytest.fixture
def windows(mock_window):
    """Factory for a list of n mock windows with ids 1..n."""

    def make(n):
        return [mock_window(id=i) for i in range(1, n + 1)]

    return make


@pytest.fixture
def standard_area():
    """Standard 1920x1080 area for layout tests."""
    return Pane(0, 0, 1920, 1080)


@pytest.fixture
def ultrawide_area():
    """Ultra-wide 3440x1440 area for layout tests."""
    return Pane(0, 0, 3440, 1440)


@pytest.fixture
def offset_area():
    """Area on a secondary screen, not at the origin."""
    return Pane(1920, 100, 2560, 1080)


@pytest.fixture(autouse=True)
def clean_bus():
    """Drop listeners left on the global bus by a test."""
    yield
    pub.unsubAll()


def _overlaps(a, b, eps=1e-6):
    return (
        a.x + eps < b.x + b.width
        and b.x + eps < a.x + a.width
        and a.y + eps < b.y + b.height
        and b.y + eps < a.y + a.height
    )


@pytest.fixture
def assert_tiles():
    """Check that frames cover a pane exactly: same area, inside, no overlaps."""

    def check(frames, pane):
        total = sum(f.area for f in frames.values())
        assert total == pytest.approx(pane.area)
        for a, b in itertools.combinations(frames.values(), 2):
            assert not _overlaps(a, b), f"{a} overlaps {b}"
        for f in frames.values():
            assert f.x >= pane.x - 1e-6
            assert f.y >= pane.y - 1e-6
            assert f.x + f.width <= pane.x + pane.width + 1e-6
            assert f.y + f.height <= pane.y + pane.height + 1e-6

    return check
