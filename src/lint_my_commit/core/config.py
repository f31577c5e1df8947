"""Core configuration dataclasses.

We keep settings parsing outside the core, but these dataclasses define the
shape the app layer builds and hands to logging and the reporter.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class LoggingConfig:
    """Diagnostic logging settings."""

    level: str = "WARNING"
    file_path: Optional[str] = None
    max_bytes: int = 1024 * 1024
    backup_count: int = 3


@dataclass(frozen=True)
class LinterSettings:
    """Runtime settings for one lint-my-commit invocation."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    encoding: str = "utf-8"
    color: bool = True
