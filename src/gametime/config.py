from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


@dataclass(frozen=True)
class Config:
    history_path: str
    autoload_history: bool
    decision_log_enabled: bool
    decision_log_path: str
    rng_seed: int | None
    api_host: str
    api_port: int



def _bool_from_env(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}



def _int_from_env(name: str, default: str) -> int:
    raw = os.getenv(name, default).strip()
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None



def load_config() -> Config:
    load_dotenv()

    rng_seed_raw = os.getenv("GAMETIME_RNG_SEED", "").strip()
    rng_seed = _int_from_env("GAMETIME_RNG_SEED", "0") if rng_seed_raw else None

    api_port = _int_from_env("GAMETIME_API_PORT", "8080")
    if not 0 < api_port < 65536:
        raise ValueError("GAMETIME_API_PORT must be between 1 and 65535")

    return Config(
        history_path=os.getenv("GAMETIME_HISTORY_PATH", "logs/history.csv").strip(),
        autoload_history=_bool_from_env(os.getenv("GAMETIME_AUTOLOAD_HISTORY"), False),
        decision_log_enabled=_bool_from_env(os.getenv("GAMETIME_DECISION_LOG_ENABLED"), True),
        decision_log_path=os.getenv(
            "GAMETIME_DECISION_LOG_PATH",
            "logs/decisions.jsonl",
        ).strip(),
        rng_seed=rng_seed,
        api_host=os.getenv("GAMETIME_API_HOST", "127.0.0.1").strip(),
        api_port=api_port,
    )
