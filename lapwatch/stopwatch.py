"""Stopwatch with named laps."""

import logging
import time
from types import MappingProxyType
from typing import Callable, Mapping, Optional

from .config import get_config
from .errors import ConfigError, LapIndexError, NotStoppedError, UnknownLapError

logger = logging.getLogger(__name__)

NS_PER_SEC = 1_000_000_000


def _seconds(ns: int) -> float:
    return ns / NS_PER_SEC


def _default_clock() -> Callable[[], int]:
    try:
        return get_config().get_clock()
    except ConfigError as e:
        logger.warning("ignoring lapwatch config, using monotonic clock: %s", e)
        return time.monotonic_ns


class LappingStopwatch:
    """Stopwatch recording named laps as elapsed time since start.

    The start instant is taken on construction. Laps recorded under the
    same name are kept in call order and addressed by index. All
    durations are returned in seconds.

    Not safe for concurrent mutation; guard it with an external lock if
    several threads share one instance.
    """

    def __init__(self, clock: Optional[Callable[[], int]] = None):
        self._clock = _default_clock() if clock is None else clock
        self._laps: dict[str, list[int]] = {}
        self._end: int | None = None
        self._start = self._clock()
        logger.debug("stopwatch started at %d", self._start)

    @classmethod
    def start(cls, clock: Optional[Callable[[], int]] = None) -> "LappingStopwatch":
        """Create and start a new stopwatch.

        Args:
            clock: Zero-argument callable returning nanoseconds. Defaults
                to the configured clock.
        """
        return cls(clock=clock)

    @property
    def start_ns(self) -> int:
        return self._start

    @property
    def end_ns(self) -> int | None:
        return self._end

    @property
    def is_stopped(self) -> bool:
        return self._end is not None

    @property
    def laps(self) -> Mapping[str, tuple[float, ...]]:
        """Read-only view of all laps in seconds."""
        return MappingProxyType({
            name: tuple(_seconds(ns) for ns in durations)
            for name, durations in self._laps.items()
        })

    def stop(self):
        """Record the end time. Calling it again overwrites the end time."""
        self._end = self._clock()
        logger.debug("stopwatch stopped after %.6fs", _seconds(self._end - self._start))

    def lap(self, name: str):
        """Record the time elapsed since start under the given name.

        Laps with the same name are appended in order of creation.
        """
        elapsed = self._clock() - self._start
        self._laps.setdefault(name, []).append(elapsed)
        logger.debug("lap %r #%d at %.6fs", name, len(self._laps[name]) - 1, _seconds(elapsed))

    def get_final(self, do_stop: bool = False) -> float:
        """Get the time between start and end.

        Args:
            do_stop: Stop the watch first if it is still running.

        Raises:
            NotStoppedError: The watch is running and do_stop is false.
        """
        if self._end is None:
            if not do_stop:
                raise NotStoppedError()
            self.stop()
        return _seconds(self._end - self._start)

    def get_current(self) -> float:
        """Get the time between start and now."""
        return _seconds(self._clock() - self._start)

    def get_lap(self, name: str, index: int = 0) -> float:
        """Get the time from start to a recorded lap.

        Args:
            name: Lap name.
            index: Which recording of that name, in call order.

        Raises:
            UnknownLapError: No lap was recorded under name.
            LapIndexError: index is outside [0, number of recordings).
        """
        return _seconds(self._lap_ns(name, index))

    def get_difference(self, lap1: str, lap2: str, index1: int = 0, index2: int = 0) -> float:
        """Get the absolute time between two laps. Argument order does not matter."""
        time1 = self._lap_ns(lap1, index1)
        time2 = self._lap_ns(lap2, index2)
        return _seconds(abs(time1 - time2))

    def _lap_ns(self, name: str, index: int) -> int:
        if name not in self._laps:
            raise UnknownLapError(name)
        durations = self._laps[name]
        if not 0 <= index < len(durations):
            raise LapIndexError(name, index)
        return durations[index]

    def lap_names(self) -> list[str]:
        """Lap names in the order they were first recorded."""
        return list(self._laps)

    def lap_count(self, name: str) -> int:
        return len(self._laps.get(name, ()))

    def __enter__(self) -> "LappingStopwatch":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.stop()
        return False

    def __repr__(self) -> str:
        state = "stopped" if self.is_stopped else "running"
        elapsed = self.get_final() if self.is_stopped else self.get_current()
        return f"<LappingStopwatch {state} {elapsed:.6f}s laps={self.lap_names()}>"
