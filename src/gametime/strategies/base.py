from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from ..models import PayoffMatrix


class Strategy(ABC):
    name: str

    @abstractmethod
    def choose(self, payoffs: PayoffMatrix, history: Sequence[int] = ()) -> int:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
