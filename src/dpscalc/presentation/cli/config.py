"""CLI configuration helpers."""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Dict, Optional

DEFINITIONS_ENV_VAR = "DPSCALC_DEFINITIONS"
_DEFAULT_LOG_LEVEL = "WARNING"
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

logger = logging.getLogger(__name__)


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "dpscalc"
        return Path.home() / "dpscalc"
    return Path.home() / ".config" / "dpscalc"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def _default_config() -> Dict[str, Optional[str]]:
    return {"definitions_path": None, "log_level": _DEFAULT_LOG_LEVEL}


def _normalize_log_level(value: object) -> str:
    if isinstance(value, str) and value.upper() in _LOG_LEVELS:
        return value.upper()
    return _DEFAULT_LOG_LEVEL


def load_config(path: Path | None = None) -> Dict[str, Optional[str]]:
    """Load config from disk or return defaults.

    A missing or malformed file yields the defaults. ``DPSCALC_DEFINITIONS``
    overrides the stored definitions path.
    """
    config_path = path or get_default_config_path()
    config = _default_config()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raw = {}
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", config_path, exc)
        raw = {}
    if isinstance(raw, dict):
        definitions_path = raw.get("definitions_path")
        if isinstance(definitions_path, str) and definitions_path:
            config["definitions_path"] = definitions_path
        config["log_level"] = _normalize_log_level(raw.get("log_level"))
    env_path = os.environ.get(DEFINITIONS_ENV_VAR)
    if env_path:
        config["definitions_path"] = env_path
    return config
