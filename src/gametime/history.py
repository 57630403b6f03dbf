"""CSV import and export of decision history."""

from __future__ import annotations

import csv
import math
from pathlib import Path
from typing import Iterable

from .models import DecisionRecord
from .state import parse_timestamp

COLUMNS = ["Game", "Timeframe", "Strategy", "Action", "Outcome", "Timestamp"]


class HistoryFormatError(ValueError):
    def __init__(self, message: str, *, line: int | None = None) -> None:
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


def format_outcome(value: int | float) -> str:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"outcome must be numeric, got {value!r}")
    return repr(value)


def parse_outcome(raw: str) -> int | float:
    """Parse a plain decimal; digit separators, NaN and infinities are rejected."""
    text = raw.strip()
    if "_" in text:
        raise ValueError(f"non-numeric outcome: {raw!r}")
    try:
        return int(text)
    except ValueError:
        pass
    try:
        value = float(text)
    except ValueError:
        raise ValueError(f"non-numeric outcome: {raw!r}") from None
    if not math.isfinite(value):
        raise ValueError(f"non-finite outcome: {raw!r}")
    return value


def export_history(path: str | Path, records: Iterable[DecisionRecord]) -> int:
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)

    count = 0
    with out.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(COLUMNS)
        for record in records:
            writer.writerow(
                [
                    record.game,
                    record.timeframe,
                    record.strategy,
                    record.action,
                    format_outcome(record.outcome),
                    record.timestamp,
                ]
            )
            count += 1
    return count


def import_history(path: str | Path) -> list[DecisionRecord]:
    """Read records back in file order.

    A missing or unreadable file raises the underlying ``OSError``. Text that
    is not UTF-8 or not valid CSV, missing columns, a non-numeric outcome or a
    timestamp that is not ISO-8601 raise :class:`HistoryFormatError`.
    """
    source = Path(path)
    with source.open("r", newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        try:
            return _read_records(reader, source)
        except UnicodeDecodeError as exc:
            raise HistoryFormatError(f"{source} is not valid UTF-8 text", line=reader.line_num + 1) from exc
        except csv.Error as exc:
            raise HistoryFormatError(f"malformed CSV: {exc}", line=reader.line_num) from exc


def _read_records(reader: csv.DictReader, source: Path) -> list[DecisionRecord]:
    if reader.fieldnames is None:
        raise HistoryFormatError(f"{source} has no header row", line=1)
    missing = [column for column in COLUMNS if column not in reader.fieldnames]
    if missing:
        raise HistoryFormatError(f"missing columns: {', '.join(missing)}", line=1)

    records: list[DecisionRecord] = []
    for row in reader:
        if not any((value or "").strip() for value in row.values() if isinstance(value, str)):
            continue
        line = reader.line_num
        try:
            outcome = parse_outcome(row["Outcome"] or "")
        except ValueError as exc:
            raise HistoryFormatError(str(exc), line=line) from exc

        timestamp = row["Timestamp"] or ""
        try:
            parse_timestamp(timestamp)
        except ValueError as exc:
            raise HistoryFormatError(f"invalid timestamp: {timestamp!r}", line=line) from exc

        records.append(
            DecisionRecord(
                game=row["Game"] or "",
                timeframe=row["Timeframe"] or "",
                strategy=row["Strategy"] or "",
                action=row["Action"] or "",
                outcome=outcome,
                timestamp=timestamp,
            )
        )
    return records
