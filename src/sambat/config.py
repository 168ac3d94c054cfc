"""
Runtime settings for the converter and its command-line entry point.

Values come from the environment, optionally seeded from a ``.env`` file:

  SAMBAT_LOG_LEVEL           logging level name (default INFO)
  SAMBAT_LOG_FILE            rotating log file path (default: console only)
  SAMBAT_PICKER_FIRST_YEAR   first BS year offered by year pickers (default 2070)
  SAMBAT_PICKER_LAST_YEAR    last BS year offered by year pickers (default 2090)
  SAMBAT_ENV_FILE            alternate path of the .env file
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_ENV_PATH = Path(".env")


def _get_env(key: str, *, default: Optional[str] = None, required: bool = False) -> Optional[str]:
    """Fetch an environment variable or raise a helpful error."""
    val = os.getenv(key, default)
    if required and not val:
        raise RuntimeError(f"Missing required env var: {key}")
    return val


def _get_int_env(key: str, default: int) -> int:
    raw = _get_env(key, default=str(default))
    try:
        return int(raw)
    except (TypeError, ValueError) as exc:
        raise RuntimeError(f"Env var {key} must be an integer, got {raw!r}") from exc


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    log_file: Optional[str] = None
    picker_first_year: int = 2070
    picker_last_year: int = 2090


def load_settings(env_path: Optional[Path] = None) -> Settings:
    """Read settings, loading ``env_path`` (or SAMBAT_ENV_FILE / ./.env) first."""
    path = env_path or Path(_get_env("SAMBAT_ENV_FILE", default=str(DEFAULT_ENV_PATH)))
    load_dotenv(dotenv_path=path, override=False)

    return Settings(
        log_level=(_get_env("SAMBAT_LOG_LEVEL", default="INFO") or "INFO").upper(),
        log_file=_get_env("SAMBAT_LOG_FILE") or None,
        picker_first_year=_get_int_env("SAMBAT_PICKER_FIRST_YEAR", 2070),
        picker_last_year=_get_int_env("SAMBAT_PICKER_LAST_YEAR", 2090),
    )
