"""
conftest.py
-----------
Shared pytest configuration and fixtures for the chase scene tests.

Contains:
- Repo root on sys.path so `from src...` imports resolve without install
- Headless SDL drivers for tests that touch pygame surfaces
- Common fixtures (scene config, viewport, event manager, clock)
"""

import os
import sys

import pytest
from unittest.mock import MagicMock

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from src.core.runtime.scene_config import SceneConfig  # noqa: E402
from src.core.runtime.viewport import ViewportSize  # noqa: E402
from src.core.runtime.simulation_clock import SimulationClock  # noqa: E402
from src.core.services.event_manager import EventManager, reset_events  # noqa: E402


TICK = 1 / 60


# ===========================================================
# Fixtures
# ===========================================================

@pytest.fixture(autouse=True)
def fresh_event_singleton():
    """Never let one test's subscribers leak into the next."""
    reset_events()
    yield
    reset_events()


@pytest.fixture
def config():
    return SceneConfig()


@pytest.fixture
def viewport():
    return ViewportSize(1280, 720)


@pytest.fixture
def events():
    return EventManager()


@pytest.fixture
def mock_events():
    """EventManager stand-in that records dispatched events."""
    manager = MagicMock()
    manager.dispatch = MagicMock(return_value=1)
    return manager


@pytest.fixture
def clock(config, viewport, events):
    return SimulationClock(config, viewport, events=events)


@pytest.fixture
def run_ticks():
    """Return a helper that feeds a clock `count` steps of `dt` seconds."""
    def _run(clock, count, dt=TICK):
        for _ in range(count):
            clock.simulate(dt)
    return _run


# Pytest configuration
def pytest_configure(config):
    config.addinivalue_line("markers", "integration: multi-component scenarios")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


def pytest_collection_modifyitems(config, items):
    for item in items:
        if "integration" not in item.keywords:
            item.add_marker(pytest.mark.unit)
