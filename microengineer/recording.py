"""Telemetry recording: sample entry values each tick and export them.

Example:
    >>> from microengineer.recording import TelemetryRecorder
    >>>
    >>> recorder = TelemetryRecorder(layout.entries, ["Altitude (Sea)", "Speed"])
    >>> dashboard.recorder = recorder
    >>> ...  # fly
    >>> recorder.write("ascent.parquet")
"""

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import polars as pl
from beartype import beartype

from microengineer.entries.base import EntryKind
from microengineer.entries.registry import EntryTable

logger = logging.getLogger(__name__)

TIME_COLUMN = "universal_time"


@beartype
class TelemetryRecorder:
    """Collects one row of entry values per sample.

    Numeric and time entries are recorded as Float64 columns in the base
    unit, text entries as strings. Missing values are nulls.
    """

    def __init__(self, entries: EntryTable, entry_names: Sequence[str]) -> None:
        self.entry_names: list[str] = []
        self._kinds: dict[str, EntryKind] = {}

        for name in entry_names:
            entry = entries.get(name)
            if entry is None:
                raise ValueError(f"Unknown entry: {name!r}")
            if entry.is_table_row:
                raise ValueError(f"Entry {name!r} is a table and cannot be recorded")
            if name in self._kinds:
                continue
            self.entry_names.append(name)
            self._kinds[name] = entry.kind

        self._rows: list[dict[str, Any]] = []

    def __len__(self) -> int:
        return len(self._rows)

    def sample(self, entries: EntryTable, universal_time: float | int | None = None) -> None:
        """Append the current values of the recorded entries."""
        row: dict[str, Any] = {TIME_COLUMN: float(universal_time) if universal_time is not None else None}
        for name in self.entry_names:
            entry = entries.get(name)
            value = entry.value if entry is not None else None
            if value is None:
                row[name] = None
            elif self._kinds[name] is EntryKind.TEXT:
                row[name] = str(value)
            else:
                row[name] = float(value)
        self._rows.append(row)

    def clear(self) -> None:
        self._rows = []

    def to_frame(self) -> pl.DataFrame:
        """All samples as a DataFrame, one column per entry."""
        schema: dict[str, Any] = {TIME_COLUMN: pl.Float64}
        for name in self.entry_names:
            schema[name] = pl.Utf8 if self._kinds[name] is EntryKind.TEXT else pl.Float64
        columns = {name: [row[name] for row in self._rows] for name in schema}
        return pl.DataFrame(columns, schema=schema)

    def write(self, path: str | Path) -> Path:
        """Export the samples as Parquet or CSV, chosen by file extension."""
        path = Path(path)
        df = self.to_frame()
        if path.suffix == ".parquet":
            df.write_parquet(path)
        elif path.suffix == ".csv":
            df.write_csv(path)
        else:
            raise ValueError(f"Unsupported export format: {path.suffix!r} (use .parquet or .csv)")
        logger.info(f"Wrote {len(df)} telemetry samples to {path}.")
        return path
