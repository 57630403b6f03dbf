from __future__ import annotations

from pathlib import Path

from fastapi import FastAPI, HTTPException, Request
from pydantic import BaseModel

from .config import load_config
from .history import HistoryFormatError
from .session import PlannerSession, build_session


class DecisionRequest(BaseModel):
    game: str
    timeframe: str
    strategy: str
    history: list[int] | None = None


class HistoryFileRequest(BaseModel):
    path: str


def _session(request: Request) -> PlannerSession:
    return request.app.state.session


def _resolve_history_path(history_dir: Path, raw: str) -> Path:
    candidate = Path(raw)
    if candidate.is_absolute():
        raise HTTPException(status_code=400, detail="history path must be relative")
    root = history_dir.resolve()
    resolved = (root / candidate).resolve()
    if not resolved.is_relative_to(root):
        raise HTTPException(status_code=400, detail="history path escapes the history directory")
    return resolved


def create_app(
    session: PlannerSession | None = None,
    *,
    history_dir: str | Path | None = None,
) -> FastAPI:
    """Build the API around one session.

    Import and export paths sent by clients are confined to ``history_dir``,
    which defaults to the directory holding ``GAMETIME_HISTORY_PATH``.
    """
    if session is None or history_dir is None:
        config = load_config()
        session = session or build_session(config)
        history_dir = history_dir or Path(config.history_path).parent

    app = FastAPI(title="Gametime Planner API", version="0.1.0")
    app.state.session = session
    app.state.history_dir = Path(history_dir)

    @app.get("/healthz")
    async def healthz() -> dict:
        return {"ok": True}

    @app.get("/games")
    async def list_games(request: Request) -> dict:
        return {"items": _session(request).engine.list_games()}

    @app.get("/games/{game}/timeframes")
    async def list_timeframes(game: str, request: Request) -> dict:
        return {"items": _session(request).engine.list_timeframes(game)}

    @app.get("/games/{game}/timeframes/{timeframe}/actions")
    async def list_actions(game: str, timeframe: str, request: Request) -> dict:
        return {"items": _session(request).engine.list_actions(game, timeframe)}

    @app.get("/games/{game}/strategies")
    async def list_strategies(game: str, request: Request) -> dict:
        return {"items": _session(request).engine.list_strategies(game)}

    @app.post("/decisions")
    def decide(payload: DecisionRequest, request: Request) -> dict:
        decision = _session(request).decide(
            payload.game,
            payload.timeframe,
            payload.strategy,
            payload.history,
        )
        if decision is None:
            raise HTTPException(status_code=422, detail="invalid decision request")
        return decision.to_dict()

    @app.get("/status")
    async def status(request: Request) -> dict:
        return _session(request).state.snapshot()

    @app.post("/history/import")
    def import_history(payload: HistoryFileRequest, request: Request) -> dict:
        path = _resolve_history_path(request.app.state.history_dir, payload.path)
        try:
            count = _session(request).import_history(path)
        except FileNotFoundError:
            raise HTTPException(status_code=404, detail="history file not found") from None
        except HistoryFormatError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        except OSError as exc:
            raise HTTPException(status_code=400, detail=f"history file unreadable: {exc.strerror}") from exc
        return {"ok": True, "records": count}

    @app.post("/history/export")
    def export_history(payload: HistoryFileRequest, request: Request) -> dict:
        path = _resolve_history_path(request.app.state.history_dir, payload.path)
        try:
            count = _session(request).export_history(path)
        except OSError as exc:
            raise HTTPException(status_code=400, detail=f"history file unwritable: {exc.strerror}") from exc
        return {"ok": True, "records": count}

    return app
