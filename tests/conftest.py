"""Test configuration for alch."""

import pytest

from alch import config
from alch.app import CurrentColor


@pytest.fixture(autouse=True)
def fresh_display_config():
    """Each test starts with the display capability unset."""
    config._reset_display_config()
    yield
    config._reset_display_config()


class FakeClock:
    """Deterministic clock for debounce tests."""

    def __init__(self, start: float = 0.0):
        self._now = start

    def __call__(self) -> float:
        return self._now

    def advance(self, seconds: float) -> None:
        self._now += seconds


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def current():
    return CurrentColor()
