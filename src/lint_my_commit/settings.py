"""Environment-driven settings for lint-my-commit.

Hooks are usually installed once and run non-interactively, so knobs live in
environment variables (optionally a local .env file) instead of CLI flags.
"""

from __future__ import annotations

import os
from typing import Optional

from dotenv import load_dotenv

from lint_my_commit.core.config import LinterSettings, LoggingConfig
from lint_my_commit.core.errors import ConfigurationError

ENV_PREFIX = "LINT_MY_COMMIT_"


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(f"{ENV_PREFIX}{name}")
    if value is None or not value.strip():
        return default
    return value.strip()


def _env_int(name: str, default: int) -> int:
    raw = _env(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from exc


def _color_enabled() -> bool:
    # https://no-color.org: any non-empty value disables color.
    if os.getenv("NO_COLOR"):
        return False
    return (_env("COLOR", "1") or "1").lower() not in {"0", "false", "no", "off"}


def load_settings() -> LinterSettings:
    """Build settings from the process environment and an optional .env file."""

    load_dotenv()

    logging_config = LoggingConfig(
        level=(_env("LOG_LEVEL", "WARNING") or "WARNING").upper(),
        file_path=_env("LOG_FILE"),
        max_bytes=_env_int("LOG_MAX_BYTES", 1024 * 1024),
        backup_count=_env_int("LOG_BACKUP_COUNT", 3),
    )
    return LinterSettings(
        logging=logging_config,
        encoding=_env("ENCODING", "utf-8") or "utf-8",
        color=_color_enabled(),
    )
