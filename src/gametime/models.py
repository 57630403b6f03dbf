from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Sequence

PayoffMatrix = tuple[tuple[float, ...], ...]


@dataclass(frozen=True)
class Timeframe:
    name: str
    actions: tuple[str, ...]
    payoffs: PayoffMatrix

    def __post_init__(self) -> None:
        object.__setattr__(self, "actions", tuple(self.actions))
        object.__setattr__(self, "payoffs", tuple(tuple(row) for row in self.payoffs))
        if not self.actions:
            raise ValueError(f"timeframe {self.name!r} has no actions")
        if len(self.actions) != len(self.payoffs):
            raise ValueError(
                f"timeframe {self.name!r} has {len(self.actions)} actions "
                f"but {len(self.payoffs)} payoff rows"
            )
        for action, row in zip(self.actions, self.payoffs):
            if not row:
                raise ValueError(f"timeframe {self.name!r} action {action!r} has no outcomes")


@dataclass(frozen=True)
class Game:
    id: str
    name: str
    description: str
    timeframes: Mapping[str, Timeframe] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "timeframes", MappingProxyType(dict(self.timeframes)))


def build_game(
    id: str,
    name: str,
    description: str,
    timeframes: Sequence[tuple[str, Sequence[str], Sequence[Sequence[float]]]],
) -> Game:
    return Game(
        id=id,
        name=name,
        description=description,
        timeframes={
            tf_name: Timeframe(name=tf_name, actions=tuple(actions), payoffs=tuple(tuple(r) for r in payoffs))
            for tf_name, actions, payoffs in timeframes
        },
    )


@dataclass(frozen=True)
class DecisionRecord:
    game: str
    timeframe: str
    strategy: str
    action: str
    outcome: int | float
    timestamp: str

    @property
    def pattern_key(self) -> str:
        return f"{self.timeframe}:{self.action}"

    def to_dict(self) -> dict:
        return {
            "game": self.game,
            "timeframe": self.timeframe,
            "strategy": self.strategy,
            "action": self.action,
            "outcome": self.outcome,
            "timestamp": self.timestamp,
        }


@dataclass(frozen=True)
class Decision:
    action_index: int
    action: str
    outcome: int | float
    history: tuple[int, ...]
    record: DecisionRecord

    def to_dict(self) -> dict:
        return {
            "action_index": self.action_index,
            "action": self.action,
            "outcome": self.outcome,
            "history": list(self.history),
            "record": self.record.to_dict(),
        }

    def journal_entry(self, *, logged_at: str) -> dict:
        return {
            "logged_at": logged_at,
            **self.record.to_dict(),
            "action_index": self.action_index,
            "history_length": len(self.history),
        }
