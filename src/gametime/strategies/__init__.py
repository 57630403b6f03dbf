from .base import Strategy
from .minimax import MinimaxStrategy, maximin_index
from .nash_equilibrium import NashEquilibriumStrategy, pure_equilibrium_rows
from .tit_for_tat import TitForTatStrategy


def default_strategies() -> dict[str, Strategy]:
    strategies: list[Strategy] = [
        MinimaxStrategy(),
        TitForTatStrategy(),
        NashEquilibriumStrategy(),
    ]
    return {strategy.name: strategy for strategy in strategies}


__all__ = [
    "Strategy",
    "MinimaxStrategy",
    "TitForTatStrategy",
    "NashEquilibriumStrategy",
    "default_strategies",
    "maximin_index",
    "pure_equilibrium_rows",
]
