from __future__ import annotations

import logging
from pathlib import Path

import uvicorn

from .api import create_app
from .config import load_config
from .session import build_session

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s - %(message)s",
)
logger = logging.getLogger(__name__)


def serve() -> None:
    config = load_config()
    session = build_session(config)
    app = create_app(session, history_dir=Path(config.history_path).parent)

    logger.info("Serving %s game(s) on %s:%s", len(session.engine.list_games()), config.api_host, config.api_port)
    try:
        uvicorn.run(app, host=config.api_host, port=config.api_port, log_level="info")
    finally:
        if config.autoload_history and len(session.state):
            session.export_history(config.history_path)


if __name__ == "__main__":
    serve()
