from __future__ import annotations

from typing import Sequence

from ..models import PayoffMatrix
from .base import Strategy
from .minimax import maximin_index


def pure_equilibrium_rows(payoffs: PayoffMatrix) -> list[int]:
    """Row indices of every pure equilibrium cell, in row-major order.

    Columns are read as the choices of an opposing party. A cell (i, j)
    qualifies when no other row beats it in column j and no other column
    beats it in row i. A row is listed once per qualifying cell.
    """
    rows: list[int] = []
    for i, row in enumerate(payoffs):
        for j, value in enumerate(row):
            row_player_stays = all(
                j >= len(other) or other[j] <= value for other in payoffs
            )
            column_player_stays = all(other <= value for other in row)
            if row_player_stays and column_player_stays:
                rows.append(i)
    return rows


class NashEquilibriumStrategy(Strategy):
    name = "nashEquilibrium"

    def choose(self, payoffs: PayoffMatrix, history: Sequence[int] = ()) -> int:
        candidates = pure_equilibrium_rows(payoffs)
        if not candidates:
            return maximin_index(payoffs)

        best = candidates[0]
        for current in candidates[1:]:
            if max(payoffs[current]) > max(payoffs[best]):
                best = current
        return best
