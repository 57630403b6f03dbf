"""Productivity game definition: effort level against outcome quality."""

from ..models import build_game

_EFFORT = ["Low Effort", "High Effort"]

GAME = build_game(
    id="productivity",
    name="Productivity",
    description="How much effort to put into work, from urgent minute-to-minute "
                "tasks up to month-long goals.",
    timeframes=[
        ("minute", _EFFORT, [[1, 0], [3, 2]]),
        ("day", _EFFORT, [[2, 1], [4, 3]]),
        ("week", _EFFORT, [[3, 2], [6, 5]]),
        ("month", _EFFORT, [[5, 3], [10, 8]]),
    ],
)
