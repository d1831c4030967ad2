"""Read-only reports of stopwatch laps."""

import csv
import io
import json
from dataclasses import dataclass
from typing import Optional

from .config import UNITS, get_config
from .stopwatch import NS_PER_SEC, LappingStopwatch

FORMATS = ("table", "json", "jsonl", "csv")
COLUMNS = ["name", "index", "elapsed"]
MAX_CELL_WIDTH = 60


@dataclass
class LapRecord:
    """A single recorded lap."""
    name: str
    index: int
    elapsed_sec: float

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "index": self.index,
            "elapsed_sec": self.elapsed_sec,
        }


def lap_records(watch: LappingStopwatch) -> list[LapRecord]:
    """All laps, grouped by name in first-recorded order."""
    return [
        LapRecord(name=name, index=i, elapsed_sec=elapsed)
        for name, durations in watch.laps.items()
        for i, elapsed in enumerate(durations)
    ]


def snapshot(watch: LappingStopwatch) -> dict:
    """Summarize a stopwatch without stopping it."""
    return {
        "stopped": watch.is_stopped,
        "current_sec": watch.get_current(),
        "final_sec": watch.get_final() if watch.is_stopped else None,
        "laps": {name: list(durations) for name, durations in watch.laps.items()},
    }


def format_duration(seconds: float, unit: Optional[str] = None, precision: Optional[int] = None) -> str:
    """Format seconds in the given unit, e.g. '1.234ms'."""
    config = get_config()
    unit = config.unit if unit is None else unit
    precision = config.precision if precision is None else precision
    if unit not in UNITS:
        raise ValueError(f"unknown unit {unit!r}")
    value = seconds * NS_PER_SEC / UNITS[unit]
    return f"{value:,.{precision}f}{unit}"


def format_table(rows: list[dict], columns: list[str]) -> str:
    """Format rows as a simple table."""
    if not rows:
        return "(no laps)"

    widths = {col: len(col) for col in columns}
    for row in rows:
        for col in columns:
            widths[col] = max(widths[col], min(len(str(row.get(col, ""))), MAX_CELL_WIDTH))

    header = " | ".join(col.ljust(widths[col]) for col in columns)
    separator = "-+-".join("-" * widths[col] for col in columns)

    lines = [header, separator]
    for row in rows:
        lines.append(" | ".join(
            str(row.get(col, ""))[:MAX_CELL_WIDTH].ljust(widths[col])
            for col in columns
        ))

    return "\n".join(lines)


def render(watch: LappingStopwatch, fmt: str = "table") -> str:
    """Render the laps of a stopwatch as table, json, jsonl or csv."""
    records = [r.to_dict() for r in lap_records(watch)]

    if fmt == "json":
        return json.dumps(snapshot(watch), indent=2)
    if fmt == "jsonl":
        return "\n".join(json.dumps(r) for r in records)
    if fmt == "csv":
        buf = io.StringIO()
        writer = csv.DictWriter(buf, fieldnames=["name", "index", "elapsed_sec"], lineterminator="\n")
        writer.writeheader()
        writer.writerows(records)
        return buf.getvalue()
    if fmt == "table":
        rows = [
            {"name": r["name"], "index": r["index"], "elapsed": format_duration(r["elapsed_sec"])}
            for r in records
        ]
        return format_table(rows, COLUMNS)

    raise ValueError(f"unknown format {fmt!r}, expected one of {', '.join(FORMATS)}")
