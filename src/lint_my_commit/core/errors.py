"""Errors raised by the core linter."""

from __future__ import annotations

from enum import Enum


class LintError(Exception):
    """Base class for every fatal lint-my-commit error."""


class ConfigurationError(LintError):
    """Missing paths, unreadable files, malformed JSON or patterns."""


class StructuralErrorKind(Enum):
    EMPTY_MESSAGE = "Empty commits are not allowed!"
    EMPTY_SUBJECT = "Subject cannot be empty!"
    MISSING_BODY_SEPARATOR = "Body should be preceeded by a blank line!"


class StructuralError(LintError):
    """The message violates the subject/blank-line/body grammar."""

    def __init__(self, kind: StructuralErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind
