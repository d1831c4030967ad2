"""Configuration loading for lapwatch."""

import os
import time
from pathlib import Path
from dataclasses import dataclass, fields
from typing import Callable, Optional
import yaml

from .errors import ConfigError


CONFIG_ENV_VAR = "LAPWATCH_CONFIG"
DEFAULT_CONFIG_FILE = "lapwatch.yaml"

CLOCKS: dict[str, Callable[[], int]] = {
    "monotonic": time.monotonic_ns,
    "perf_counter": time.perf_counter_ns,
}

# nanoseconds per unit
UNITS = {
    "ns": 1,
    "us": 1_000,
    "ms": 1_000_000,
    "s": 1_000_000_000,
}


@dataclass
class StopwatchConfig:
    """Clock source and report formatting for stopwatches."""
    clock: str = "monotonic"
    unit: str = "ms"
    precision: int = 3

    def __post_init__(self):
        if self.clock not in CLOCKS:
            raise ConfigError(
                f"unknown clock {self.clock!r}, expected one of {sorted(CLOCKS)}"
            )
        if self.unit not in UNITS:
            raise ConfigError(
                f"unknown unit {self.unit!r}, expected one of {sorted(UNITS)}"
            )
        if isinstance(self.precision, bool) or not isinstance(self.precision, int) or self.precision < 0:
            raise ConfigError(f"precision must be a non-negative integer, got {self.precision!r}")

    @classmethod
    def load(cls, path: str | Path | None = None) -> "StopwatchConfig":
        """Load config from YAML.

        Lookup order: explicit path, the LAPWATCH_CONFIG environment
        variable, then lapwatch.yaml in the working directory. A missing
        file yields the defaults.
        """
        if path is None:
            path = os.environ.get(CONFIG_ENV_VAR) or DEFAULT_CONFIG_FILE
        config_file = Path(path)

        if not config_file.exists():
            return cls()

        try:
            with open(config_file) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"invalid YAML in {config_file}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"{config_file} must contain a mapping")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"unknown config keys in {config_file}: {', '.join(unknown)}")

        return cls(**data)

    def get_clock(self) -> Callable[[], int]:
        """Return the nanosecond clock this config selects."""
        return CLOCKS[self.clock]


_config: Optional[StopwatchConfig] = None


def get_config() -> StopwatchConfig:
    """Get the active config, loading it on first use."""
    global _config
    if _config is None:
        _config = StopwatchConfig.load()
    return _config


def set_config(config: Optional[StopwatchConfig]):
    """Replace the active config. Passing None reloads on next use."""
    global _config
    _config = config
