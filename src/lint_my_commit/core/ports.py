"""Ports (interfaces) used by the core linter.

Ports define the minimal contracts for input and reporting adapters so that
the core can be reused outside a file-based git hook.
"""

from __future__ import annotations

from typing import Any, Protocol, Sequence

from lint_my_commit.core.errors import ConfigurationError, StructuralError


class InputSourcePort(Protocol):
    """Acquisition of the two inputs a lint run needs."""

    async def read_commit_message(self) -> str:
        ...

    async def read_rules_document(self) -> Any:
        ...


class ReporterPort(Protocol):
    """User-facing reporting of a lint run."""

    def started(self) -> None:
        ...

    def no_rules(self) -> None:
        ...

    def success(self) -> None:
        ...

    def invalid_lines(self, lines: Sequence[str]) -> None:
        ...

    def structural_error(self, error: StructuralError) -> None:
        ...

    def configuration_error(self, error: ConfigurationError) -> None:
        ...

    def finished(self, exit_code: int) -> None:
        ...
