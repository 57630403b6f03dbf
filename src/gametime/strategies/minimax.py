from __future__ import annotations

from typing import Sequence

from ..models import PayoffMatrix
from .base import Strategy


def maximin_index(payoffs: PayoffMatrix) -> int:
    """Index of the row whose worst outcome is best; first row wins ties."""
    best_index = 0
    best_floor: float | None = None
    for index, row in enumerate(payoffs):
        floor = min(row)
        if best_floor is None or floor > best_floor:
            best_index = index
            best_floor = floor
    return best_index


class MinimaxStrategy(Strategy):
    name = "minimax"

    def choose(self, payoffs: PayoffMatrix, history: Sequence[int] = ()) -> int:
        return maximin_index(payoffs)
