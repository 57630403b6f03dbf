from ..models import Game
from .food_delivery import GAME as FOOD_DELIVERY
from .productivity import GAME as PRODUCTIVITY

ALL_GAMES: list[Game] = [FOOD_DELIVERY, PRODUCTIVITY]

__all__ = ["ALL_GAMES", "FOOD_DELIVERY", "PRODUCTIVITY"]
