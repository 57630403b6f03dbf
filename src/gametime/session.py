from __future__ import annotations

import logging
import random
import threading
from pathlib import Path
from typing import Sequence

from .catalog import default_catalog
from .config import Config
from .decision import DecisionEngine
from .history import export_history, import_history
from .journal import DecisionJournal
from .models import Decision
from .state import SessionState

logger = logging.getLogger(__name__)


class PlannerSession:
    """One run of the planner: an engine, its session state and the journal."""

    def __init__(
        self,
        engine: DecisionEngine,
        *,
        state: SessionState | None = None,
        journal: DecisionJournal | None = None,
    ) -> None:
        self.engine = engine
        self._state = state or SessionState()
        self._journal = journal
        self._swap_lock = threading.Lock()

    @property
    def state(self) -> SessionState:
        return self._state

    def decide(
        self,
        game: str,
        timeframe: str,
        strategy: str,
        history: Sequence[int] | None = None,
    ) -> Decision | None:
        with self._swap_lock:
            state = self._state
            prior = state.history if history is None else history
            decision = self.engine.decide(game, timeframe, strategy, prior)
            if decision is None:
                return None
            state.apply(decision.record, decision.action_index)

        if self._journal is not None:
            self._journal.append(decision)
        return decision

    def import_history(self, path: str | Path) -> int:
        records = import_history(path)
        rebuilt = SessionState.rebuild(records, self.engine.catalog)
        with self._swap_lock:
            self._state = rebuilt
        logger.info("Imported %s decision(s) from %s", len(records), path)
        return len(records)

    def export_history(self, path: str | Path) -> int:
        count = export_history(path, self._state.records)
        logger.info("Exported %s decision(s) to %s", count, path)
        return count


def build_session(config: Config) -> PlannerSession:
    rng = random.Random(config.rng_seed) if config.rng_seed is not None else None
    journal = DecisionJournal(config.decision_log_path) if config.decision_log_enabled else None
    session = PlannerSession(DecisionEngine(default_catalog(), rng=rng), journal=journal)

    if config.autoload_history:
        if Path(config.history_path).exists():
            session.import_history(config.history_path)
        else:
            logger.info("No history at %s; starting empty", config.history_path)
    return session
