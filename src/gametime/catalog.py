from __future__ import annotations

from typing import Iterable, Mapping

from .games import ALL_GAMES
from .models import Game, Timeframe
from .strategies import Strategy, default_strategies


class GameCatalog:
    """Read-only lookup over games, their timeframes and the strategy set.

    Every lookup is total: unknown keys give an empty list or ``None``
    rather than an exception.
    """

    def __init__(self, games: Iterable[Game], strategies: Mapping[str, Strategy]) -> None:
        self._games: dict[str, Game] = {}
        for game in games:
            if game.id in self._games:
                raise ValueError(f"duplicate game id: {game.id}")
            self._games[game.id] = game
        self._strategies: dict[str, Strategy] = dict(strategies)

    def list_games(self) -> list[str]:
        return list(self._games)

    def get_game(self, game: str) -> Game | None:
        return self._games.get(game)

    def list_timeframes(self, game: str) -> list[str]:
        found = self._games.get(game)
        if found is None:
            return []
        return list(found.timeframes)

    def get_timeframe(self, game: str, timeframe: str) -> Timeframe | None:
        found = self._games.get(game)
        if found is None:
            return None
        return found.timeframes.get(timeframe)

    def list_actions(self, game: str, timeframe: str) -> list[str]:
        found = self.get_timeframe(game, timeframe)
        if found is None:
            return []
        return list(found.actions)

    def list_strategies(self, game: str) -> list[str]:
        if game not in self._games:
            return []
        return list(self._strategies)

    def get_strategy(self, game: str, name: str) -> Strategy | None:
        if game not in self._games:
            return None
        return self._strategies.get(name)

    def action_index(self, game: str, timeframe: str, action: str) -> int | None:
        actions = self.list_actions(game, timeframe)
        if action not in actions:
            return None
        return actions.index(action)


def default_catalog() -> GameCatalog:
    return GameCatalog(ALL_GAMES, default_strategies())
