"""
Gazetteer reader.

Reads the headerless gazetteer CSV (level, id, target name, source name,
parent id) into immutable records. Rows that cannot become a record are
reported to the log and skipped; they never abort the run.
"""
from __future__ import annotations

import csv
from pathlib import Path
from typing import Iterable

from gazetteer_i18n.types import GazetteerConfig, GazetteerRecord, Level, LogSink


class GazetteerReader:
    """Turns gazetteer rows into :class:`GazetteerRecord` values."""

    def __init__(self, config: GazetteerConfig):
        self._config = config

    def read(self, path: str | Path, log: LogSink | None = None) -> list[GazetteerRecord]:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"gazetteer file not found: {path}")

        with path.open(encoding="utf-8-sig", newline="") as f:
            return self.parse_rows(csv.reader(f), log)

    def parse_rows(self, rows: Iterable[list[str]], log: LogSink | None = None) -> list[GazetteerRecord]:
        log = log if log is not None else LogSink()
        records = []
        for row_number, row in enumerate(rows, start=1):
            if not any(cell.strip() for cell in row):
                continue
            try:
                records.append(self.parse_row(row))
            except ValueError as e:
                log.error(f"Skipping malformed gazetteer row {row_number}: {e}")
        return records

    def parse_row(self, row: list[str]) -> GazetteerRecord:
        config = self._config
        # the parent id is the only column that may be missing
        required = max(config.level_column, config.id_column, config.target_column, config.source_column) + 1
        if len(row) < required:
            raise ValueError(f"expected at least {required} columns, got {len(row)}")

        parent_id = row[config.parent_id_column] if len(row) > config.parent_id_column else ""
        return GazetteerRecord(
            level=Level.parse(row[config.level_column]),
            id=row[config.id_column],
            parent_id=parent_id,
            name_source=row[config.source_column],
            name_target=row[config.target_column],
        )
