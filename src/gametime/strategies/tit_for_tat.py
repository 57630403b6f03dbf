from __future__ import annotations

from typing import Sequence

from ..models import PayoffMatrix
from .base import Strategy


class TitForTatStrategy(Strategy):
    """Binary alternation keyed on the previous choice.

    An empty history opens cooperatively with index 1. After that a previous
    index of 0 maps to 1 and anything else maps to 0, whatever the number of
    actions in the matrix.
    """

    name = "titForTat"

    def choose(self, payoffs: PayoffMatrix, history: Sequence[int] = ()) -> int:
        if not history:
            return 1 if len(payoffs) > 1 else 0
        if history[-1] == 0:
            # single-action matrices have no index 1
            return 1 if len(payoffs) > 1 else 0
        return 0
