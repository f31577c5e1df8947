from __future__ import annotations

import pytest

from lint_my_commit.core.errors import ConfigurationError
from lint_my_commit.settings import load_settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("NO_COLOR", raising=False)
    for name in ("LOG_LEVEL", "LOG_FILE", "LOG_MAX_BYTES", "LOG_BACKUP_COUNT", "ENCODING", "COLOR"):
        monkeypatch.delenv(f"LINT_MY_COMMIT_{name}", raising=False)


def test_defaults() -> None:
    settings = load_settings()
    assert settings.logging.level == "WARNING"
    assert settings.logging.file_path is None
    assert settings.logging.max_bytes == 1024 * 1024
    assert settings.logging.backup_count == 3
    assert settings.encoding == "utf-8"
    assert settings.color is True


def test_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv("LINT_MY_COMMIT_LOG_LEVEL", "debug")
    monkeypatch.setenv("LINT_MY_COMMIT_LOG_FILE", "logs/lint.log")
    monkeypatch.setenv("LINT_MY_COMMIT_LOG_BACKUP_COUNT", "7")
    monkeypatch.setenv("LINT_MY_COMMIT_ENCODING", "latin-1")
    monkeypatch.setenv("LINT_MY_COMMIT_COLOR", "off")
    settings = load_settings()
    assert settings.logging.level == "DEBUG"
    assert settings.logging.file_path == "logs/lint.log"
    assert settings.logging.backup_count == 7
    assert settings.encoding == "latin-1"
    assert settings.color is False


def test_no_color_convention(monkeypatch) -> None:
    monkeypatch.setenv("NO_COLOR", "1")
    assert load_settings().color is False


def test_invalid_integer(monkeypatch) -> None:
    monkeypatch.setenv("LINT_MY_COMMIT_LOG_BACKUP_COUNT", "three")
    with pytest.raises(ConfigurationError):
        load_settings()
