from __future__ import annotations

import logging
import random
from datetime import datetime, timezone
from typing import Callable, Sequence

from .catalog import GameCatalog
from .models import Decision, DecisionRecord

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(value: datetime) -> str:
    """ISO-8601 UTC with millisecond precision and a ``Z`` suffix."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.replace(tzinfo=None).isoformat(timespec="milliseconds") + "Z"


class DecisionEngine:
    def __init__(
        self,
        catalog: GameCatalog,
        *,
        rng: random.Random | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.catalog = catalog
        self._rng = rng or random.Random()
        self._clock = clock or utc_now

    def list_games(self) -> list[str]:
        return self.catalog.list_games()

    def list_timeframes(self, game: str) -> list[str]:
        return self.catalog.list_timeframes(game)

    def list_actions(self, game: str, timeframe: str) -> list[str]:
        return self.catalog.list_actions(game, timeframe)

    def list_strategies(self, game: str) -> list[str]:
        return self.catalog.list_strategies(game)

    def decide(
        self,
        game: str,
        timeframe: str,
        strategy_name: str,
        history: Sequence[int] = (),
    ) -> Decision | None:
        frame = self.catalog.get_timeframe(game, timeframe)
        if frame is None:
            logger.warning("Rejected decision game=%s timeframe=%s: unknown game or timeframe", game, timeframe)
            return None

        strategy = self.catalog.get_strategy(game, strategy_name)
        if strategy is None:
            logger.warning("Rejected decision game=%s strategy=%s: unknown strategy", game, strategy_name)
            return None

        actions, payoffs = frame.actions, frame.payoffs
        if not actions or not payoffs or len(actions) != len(payoffs):
            logger.warning("Rejected decision game=%s timeframe=%s: malformed payoff matrix", game, timeframe)
            return None

        prior = tuple(history)
        index = strategy.choose(payoffs, prior)
        if not 0 <= index < len(actions):
            logger.warning(
                "Rejected decision game=%s strategy=%s: index %s outside %s actions",
                game,
                strategy_name,
                index,
                len(actions),
            )
            return None

        row = payoffs[index]
        outcome = row[self._rng.randrange(len(row))]

        record = DecisionRecord(
            game=game,
            timeframe=timeframe,
            strategy=strategy_name,
            action=actions[index],
            outcome=outcome,
            timestamp=format_timestamp(self._clock()),
        )
        logger.info(
            "Decided game=%s timeframe=%s strategy=%s action=%s outcome=%s",
            game,
            timeframe,
            strategy_name,
            record.action,
            outcome,
        )
        return Decision(
            action_index=index,
            action=record.action,
            outcome=outcome,
            history=prior + (index,),
            record=record,
        )
