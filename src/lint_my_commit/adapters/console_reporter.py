"""Colorized console reporter.

Progress and success go to stdout in green, the no-rules caution in yellow,
and every error (including offending commit lines) to stderr in red. Lines
are never wrapped to the console width.
"""

from __future__ import annotations

from typing import Optional, Sequence

from rich.console import Console

from lint_my_commit.core.errors import ConfigurationError, StructuralError

PROGRAM = "lint-my-commit"

OK_STYLE = "green"
WARN_STYLE = "yellow"
ERROR_STYLE = "red"


class ConsoleReporter:
    """Render lint outcomes with rich, keeping commit text verbatim."""

    def __init__(
        self,
        stdout: Optional[Console] = None,
        stderr: Optional[Console] = None,
        color: bool = True,
    ) -> None:
        self._stdout = stdout or Console(no_color=not color, highlight=False)
        self._stderr = stderr or Console(stderr=True, no_color=not color, highlight=False)

    def _log(self, message: str) -> None:
        self._stdout.print(message, style=OK_STYLE, markup=False, highlight=False, soft_wrap=True)

    def _warn(self, message: str) -> None:
        self._stderr.print(message, style=WARN_STYLE, markup=False, highlight=False, soft_wrap=True)

    def _error(self, message: str) -> None:
        self._stderr.print(message, style=ERROR_STYLE, markup=False, highlight=False, soft_wrap=True)

    def started(self) -> None:
        self._log("Linting commit message...")

    def no_rules(self) -> None:
        self._warn("No available linting rules, exiting process with status code 0")

    def success(self) -> None:
        self._log("Commit message validated successfully")

    def invalid_lines(self, lines: Sequence[str]) -> None:
        self._error("Following lines present linting errors:")
        for line in lines:
            self._error(line)

    def structural_error(self, error: StructuralError) -> None:
        self._error(str(error))

    def configuration_error(self, error: ConfigurationError) -> None:
        self._error("Something went wrong. Please, review your configuration.")
        self._error(str(error))

    def finished(self, exit_code: int) -> None:
        message = f"{PROGRAM} finished with exit code {exit_code}"
        if exit_code == 0:
            self._log(message)
        else:
            self._error(message)
