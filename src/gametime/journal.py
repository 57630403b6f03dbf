from __future__ import annotations

import json
import threading
from pathlib import Path

from .decision import format_timestamp, utc_now
from .models import Decision


class DecisionJournal:
    """Decisions as JSON lines, in the order they were made.

    Unlike the CSV history this keeps the chosen index and the history
    length, and it is never rewritten; entries are only ever appended.
    """

    def __init__(self, path: str) -> None:
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    def append(self, decision: Decision) -> None:
        entry = decision.journal_entry(logged_at=format_timestamp(utc_now()))
        with self._lock, self._path.open("a", encoding="utf-8") as f:
            f.write(json.dumps(entry, separators=(",", ":")) + "\n")

    def entries(self) -> list[dict]:
        if not self._path.exists():
            return []
        with self._lock, self._path.open("r", encoding="utf-8") as f:
            return [json.loads(line) for line in f if line.strip()]
