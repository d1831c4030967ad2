"""Exceptions raised by lapwatch."""


class StopwatchError(Exception):
    """Base class for lapwatch errors."""


class NotStoppedError(StopwatchError, RuntimeError):
    """Raised when the final time is requested from a running stopwatch."""

    def __init__(self):
        super().__init__("the stopwatch has not been stopped properly")


class UnknownLapError(StopwatchError, KeyError):
    """Raised when no lap was recorded under the requested name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No lap with name {name} exists")

    def __str__(self) -> str:
        # KeyError would repr() the message
        return self.args[0]


class LapIndexError(StopwatchError, IndexError):
    """Raised when a lap name is known but the index is not."""

    def __init__(self, name: str, index: int):
        self.name = name
        self.index = index
        super().__init__(f"There is no lap with name {name} and index {index}")


class ConfigError(StopwatchError, ValueError):
    """Raised for invalid configuration values."""
