"""Shared fixtures for lapwatch tests."""

import pytest

from lapwatch.config import CONFIG_ENV_VAR, set_config


class FakeClock:
    """Nanosecond clock that only moves when told to."""

    def __init__(self, start: int = 1_000):
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, ns: int):
        self.now += ns


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Keep config lookup away from the real environment and working dir."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.chdir(tmp_path)
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def clock():
    return FakeClock()
