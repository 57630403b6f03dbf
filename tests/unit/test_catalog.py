import pytest

from src.gametime.catalog import GameCatalog, default_catalog
from src.gametime.models import Timeframe, build_game
from src.gametime.strategies import default_strategies


def test_list_games_includes_bundled_games() -> None:
    catalog = default_catalog()

    assert catalog.list_games() == ["foodDelivery", "productivity"]


def test_list_timeframes_for_valid_and_unknown_game() -> None:
    catalog = default_catalog()

    assert catalog.list_timeframes("foodDelivery") == ["minute", "day", "month"]
    assert catalog.list_timeframes("invalidGame") == []


def test_list_actions_for_valid_and_unknown_keys() -> None:
    catalog = default_catalog()

    assert catalog.list_actions("foodDelivery", "day") == ["Order Takeout", "Cook Meal"]
    assert catalog.list_actions("foodDelivery", "invalidTimeframe") == []
    assert catalog.list_actions("invalidGame", "day") == []


def test_list_strategies_for_valid_and_unknown_game() -> None:
    catalog = default_catalog()

    assert catalog.list_strategies("foodDelivery") == ["minimax", "titForTat", "nashEquilibrium"]
    assert catalog.list_strategies("productivity") == ["minimax", "titForTat", "nashEquilibrium"]
    assert catalog.list_strategies("invalidGame") == []


def test_every_timeframe_has_one_payoff_row_per_action() -> None:
    catalog = default_catalog()

    for game in catalog.list_games():
        for timeframe in catalog.list_timeframes(game):
            frame = catalog.get_timeframe(game, timeframe)
            assert frame is not None
            assert len(catalog.list_actions(game, timeframe)) == len(frame.payoffs)


def test_action_index_resolves_labels() -> None:
    catalog = default_catalog()

    assert catalog.action_index("foodDelivery", "day", "Cook Meal") == 1
    assert catalog.action_index("foodDelivery", "day", "Skip Dinner") is None
    assert catalog.action_index("invalidGame", "day", "Cook Meal") is None


def test_get_strategy_unknown_game_returns_none() -> None:
    catalog = default_catalog()

    assert catalog.get_strategy("foodDelivery", "minimax") is not None
    assert catalog.get_strategy("invalidGame", "minimax") is None


def test_timeframe_rejects_mismatched_payoffs() -> None:
    with pytest.raises(ValueError, match="2 actions but 1 payoff rows"):
        Timeframe(name="day", actions=("a", "b"), payoffs=((1, 2),))


def test_timeframe_rejects_empty_outcome_row() -> None:
    with pytest.raises(ValueError, match="has no outcomes"):
        Timeframe(name="day", actions=("a",), payoffs=((),))


def test_catalog_rejects_duplicate_game_ids() -> None:
    game = build_game("g", "G", "", [("day", ["a", "b"], [[1, 2], [3, 4]])])

    with pytest.raises(ValueError, match="duplicate game id"):
        GameCatalog([game, game], default_strategies())
