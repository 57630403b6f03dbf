import json
import random

import pytest

from src.gametime.catalog import default_catalog
from src.gametime.config import Config
from src.gametime.decision import DecisionEngine
from src.gametime.history import HistoryFormatError
from src.gametime.journal import DecisionJournal
from src.gametime.session import PlannerSession, build_session


def _session(journal: DecisionJournal | None = None) -> PlannerSession:
    return PlannerSession(DecisionEngine(default_catalog(), rng=random.Random(3)), journal=journal)


def test_session_decide_uses_own_history_and_records_state() -> None:
    session = _session()

    first = session.decide("foodDelivery", "day", "titForTat")
    second = session.decide("foodDelivery", "day", "titForTat")

    assert first is not None and second is not None
    assert first.action_index == 1
    assert second.action_index == 0
    assert session.state.history == [1, 0]
    assert session.state.cumulative_scores["foodDelivery"] == first.outcome + second.outcome


def test_session_decide_with_explicit_history() -> None:
    session = _session()

    decision = session.decide("foodDelivery", "day", "titForTat", [0])

    assert decision is not None
    assert decision.action_index == 1
    assert decision.history == (0, 1)
    assert session.state.history == [1]


def test_session_decide_rejects_invalid_request_without_state_change() -> None:
    session = _session()

    assert session.decide("invalidGame", "day", "minimax") is None
    assert len(session.state) == 0


def test_session_writes_journal(tmp_path) -> None:
    journal = DecisionJournal(str(tmp_path / "decisions.jsonl"))
    session = _session(journal)

    session.decide("productivity", "week", "minimax")

    lines = journal.path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 1
    assert json.loads(lines[0])["action_index"] == 1


def test_session_export_then_import_rebuilds_state(tmp_path) -> None:
    path = tmp_path / "history.csv"
    session = _session()
    for _ in range(3):
        session.decide("foodDelivery", "month", "minimax")
    session.export_history(path)

    restored = _session()
    count = restored.import_history(path)

    assert count == 3
    assert restored.state.records == session.state.records
    assert restored.state.history == [1, 1, 1]
    assert restored.state.cumulative_scores == session.state.cumulative_scores
    assert restored.state.streak_counts == {"foodDelivery": {"month:Cancel Subscriptions": 3}}


def test_session_failed_import_keeps_current_state(tmp_path) -> None:
    session = _session()
    session.decide("foodDelivery", "day", "minimax")
    before = session.state

    with pytest.raises(FileNotFoundError):
        session.import_history(tmp_path / "missing.csv")

    bad = tmp_path / "bad.csv"
    bad.write_text("Game,Timeframe,Strategy,Action,Outcome,Timestamp\nx,y,z,a,b,c\n", encoding="utf-8")
    with pytest.raises(HistoryFormatError):
        session.import_history(bad)

    assert session.state is before
    assert len(session.state) == 1


def test_build_session_autoloads_history(tmp_path) -> None:
    history = tmp_path / "history.csv"
    history.write_text(
        "Game,Timeframe,Strategy,Action,Outcome,Timestamp\n"
        "foodDelivery,day,minimax,Cook Meal,5,2024-03-20T10:00:00Z\n",
        encoding="utf-8",
    )
    config = Config(
        history_path=str(history),
        autoload_history=True,
        decision_log_enabled=False,
        decision_log_path=str(tmp_path / "decisions.jsonl"),
        rng_seed=11,
        api_host="127.0.0.1",
        api_port=8080,
    )

    session = build_session(config)

    assert session.state.history == [1]
    assert session.state.score("foodDelivery") == 5
    assert not (tmp_path / "decisions.jsonl").exists()


def test_build_session_without_history_file_starts_empty(tmp_path) -> None:
    config = Config(
        history_path=str(tmp_path / "missing.csv"),
        autoload_history=True,
        decision_log_enabled=True,
        decision_log_path=str(tmp_path / "logs" / "decisions.jsonl"),
        rng_seed=None,
        api_host="127.0.0.1",
        api_port=8080,
    )

    session = build_session(config)

    assert len(session.state) == 0
    assert (tmp_path / "logs").is_dir()
