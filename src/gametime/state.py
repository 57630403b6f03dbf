from __future__ import annotations

import threading
from datetime import datetime, timezone
from typing import Iterable

from .catalog import GameCatalog
from .models import DecisionRecord

UNKNOWN_ACTION_INDEX = -1


def parse_timestamp(value: str) -> datetime:
    raw = value.strip()
    if raw.endswith("Z") or raw.endswith("z"):
        raw = raw[:-1] + "+00:00"
    parsed = datetime.fromisoformat(raw)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


class SessionState:
    """Decision history plus per-game aggregates derived from it.

    Live play goes through :meth:`apply`, where a key's streak counter only
    ever grows. :meth:`rebuild` replays an imported history in timestamp
    order and counts true consecutive runs instead, resetting a key's streak
    whenever the previous record differs. The two disagree on purpose; keep
    them separate.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._history: list[int] = []
        self._records: list[DecisionRecord] = []
        self._cumulative_scores: dict[str, float] = {}
        self._patterns: dict[str, dict[str, int]] = {}
        self._streak_counts: dict[str, dict[str, int]] = {}

    @property
    def history(self) -> list[int]:
        with self._lock:
            return list(self._history)

    @property
    def records(self) -> list[DecisionRecord]:
        with self._lock:
            return list(self._records)

    @property
    def cumulative_scores(self) -> dict[str, float]:
        with self._lock:
            return dict(self._cumulative_scores)

    @property
    def patterns(self) -> dict[str, dict[str, int]]:
        with self._lock:
            return {game: dict(counts) for game, counts in self._patterns.items()}

    @property
    def streak_counts(self) -> dict[str, dict[str, int]]:
        with self._lock:
            return {game: dict(counts) for game, counts in self._streak_counts.items()}

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def score(self, game: str) -> float:
        with self._lock:
            return self._cumulative_scores.get(game, 0)

    def top_patterns(self, game: str, limit: int = 3) -> list[tuple[str, int]]:
        with self._lock:
            counts = self._patterns.get(game, {})
            return sorted(counts.items(), key=lambda item: -item[1])[:limit]

    def apply(self, record: DecisionRecord, action_index: int) -> None:
        key = record.pattern_key
        with self._lock:
            self._records.append(record)
            self._history.append(action_index)
            self._add_totals(record)
            streaks = self._streak_counts.setdefault(record.game, {})
            streaks[key] = streaks.get(key, 0) + 1

    def _add_totals(self, record: DecisionRecord) -> None:
        self._cumulative_scores[record.game] = self._cumulative_scores.get(record.game, 0) + record.outcome
        counts = self._patterns.setdefault(record.game, {})
        counts[record.pattern_key] = counts.get(record.pattern_key, 0) + 1

    @classmethod
    def rebuild(
        cls,
        records: Iterable[DecisionRecord],
        catalog: GameCatalog | None = None,
    ) -> SessionState:
        """Return a fresh state replayed from ``records`` in timestamp order.

        Ties keep their input order. History indices are looked up in
        ``catalog``; labels it cannot resolve become ``UNKNOWN_ACTION_INDEX``.
        """
        ordered = sorted(records, key=lambda record: parse_timestamp(record.timestamp))
        state = cls()
        previous: DecisionRecord | None = None
        streak = 0

        for record in ordered:
            index = None
            if catalog is not None:
                index = catalog.action_index(record.game, record.timeframe, record.action)
            state._records.append(record)
            state._history.append(UNKNOWN_ACTION_INDEX if index is None else index)
            state._add_totals(record)

            if (
                previous is not None
                and previous.game == record.game
                and previous.pattern_key == record.pattern_key
            ):
                streak += 1
            else:
                streak = 1
            state._streak_counts.setdefault(record.game, {})[record.pattern_key] = streak
            previous = record

        return state

    def snapshot(self) -> dict:
        with self._lock:
            return {
                "decisions": len(self._records),
                "history": list(self._history),
                "cumulative_scores": dict(self._cumulative_scores),
                "patterns": {game: dict(counts) for game, counts in self._patterns.items()},
                "streak_counts": {game: dict(counts) for game, counts in self._streak_counts.items()},
                "records": [record.to_dict() for record in self._records],
            }
