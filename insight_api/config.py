# insight_api/config.py
from __future__ import annotations

import logging
import os
from dotenv import load_dotenv

# Load .env from project root
load_dotenv()


def _get_env(name: str, default: str = "") -> str:
    return os.getenv(name, default).strip()


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name, str(default))
    try:
        return int(raw)
    except ValueError:
        return default


# -------------------------
# Engine contract (not configurable)
# -------------------------
# Trimmed scenario text shorter than this is rejected by the facade
MIN_SCENARIO_CHARS: int = 5


# -------------------------
# HTTP service config
# -------------------------
APP_TITLE: str = _get_env("APP_TITLE", "Fan Insight Generator API")

# Caller-side limit on scenario text (the engine itself accepts any length)
MAX_SCENARIO_CHARS: int = _get_env_int("MAX_SCENARIO_CHARS", 400)

LOG_LEVEL: str = _get_env("LOG_LEVEL", "INFO").upper()

_VALID_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def validate_config() -> None:
    if not APP_TITLE:
        raise RuntimeError("APP_TITLE must be non-empty")

    if MAX_SCENARIO_CHARS < MIN_SCENARIO_CHARS:
        raise RuntimeError(
            f"MAX_SCENARIO_CHARS must be >= {MIN_SCENARIO_CHARS} (got {MAX_SCENARIO_CHARS})"
        )

    if LOG_LEVEL not in _VALID_LOG_LEVELS:
        raise RuntimeError(f"LOG_LEVEL must be one of {sorted(_VALID_LOG_LEVELS)} (got {LOG_LEVEL!r})")


def configure_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
