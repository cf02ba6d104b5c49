"""CLI configuration helpers."""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Dict, Mapping

_DEFAULT_LOG_LEVEL = "WARNING"
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "PatternArena"
        return Path.home() / "PatternArena"
    return Path.home() / ".config" / "pattern_arena"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def _normalize_log_level(value: object) -> str:
    if isinstance(value, str) and value.upper() in _LOG_LEVELS:
        return value.upper()
    return _DEFAULT_LOG_LEVEL


def load_config(path: Path | None = None) -> Dict[str, str]:
    """Load config from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {"log_level": _DEFAULT_LOG_LEVEL}
    except (OSError, ValueError):
        return {"log_level": _DEFAULT_LOG_LEVEL}
    if not isinstance(raw, dict):
        return {"log_level": _DEFAULT_LOG_LEVEL}
    return {"log_level": _normalize_log_level(raw.get("log_level"))}


def resolve_log_level(config: Mapping[str, str]) -> int:
    """Pick the effective log level: ARENA_DEBUG, then ARENA_LOG_LEVEL, then config."""
    if os.getenv("ARENA_DEBUG") == "1":
        return logging.DEBUG
    env_level = os.getenv("ARENA_LOG_LEVEL")
    if env_level and env_level.upper() in _LOG_LEVELS:
        return getattr(logging, env_level.upper())
    name = _normalize_log_level(config.get("log_level"))
    return getattr(logging, name)
