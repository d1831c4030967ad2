"""Stopwatch with named laps for ad-hoc timing."""

from .config import StopwatchConfig, get_config, set_config
from .errors import (
    ConfigError,
    LapIndexError,
    NotStoppedError,
    StopwatchError,
    UnknownLapError,
)
from .stopwatch import LappingStopwatch

__all__ = [
    "LappingStopwatch",
    "StopwatchConfig",
    "get_config",
    "set_config",
    "StopwatchError",
    "NotStoppedError",
    "UnknownLapError",
    "LapIndexError",
    "ConfigError",
]
