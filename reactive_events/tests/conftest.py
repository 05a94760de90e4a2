"""
Global pytest configuration and fixtures.

This file configures pytest behavior for all tests in the project.
"""

import pytest

from reactive_events.config.settings import reset_settings


ENV_VARS = (
    "REACTIVE_EVENTS_CLOCK",
    "REACTIVE_EVENTS_DEFAULT_INTERVAL",
    "REACTIVE_EVENTS_LOG_LEVEL",
    "REACTIVE_EVENTS_DEBUG",
)


class FakeClock:
    """Manually advanced clock for interval tests."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Give every test default settings, unaffected by the environment."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("dotenv.load_dotenv", lambda *args, **kwargs: False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def clock():
    """Create a fake clock starting at t=1000."""
    return FakeClock()
