"""Core lint pipeline.

This module is I/O-agnostic. It only relies on ports for input and reporting,
so a different frontend can reuse it without changes here.
"""

from __future__ import annotations

import asyncio
import logging

from lint_my_commit.core.errors import ConfigurationError, StructuralError
from lint_my_commit.core.ports import InputSourcePort, ReporterPort
from lint_my_commit.core.rules_engine import build_rules
from lint_my_commit.core.segmenter import segment
from lint_my_commit.core.validator import validate

LOGGER = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


class CommitLinter:
    """Orchestrates input acquisition, segmentation, validation and reporting."""

    def __init__(self, source: InputSourcePort, reporter: ReporterPort) -> None:
        self._source = source
        self._reporter = reporter

    async def run(self) -> int:
        """Lint one commit message and return the process exit code."""

        self._reporter.started()
        exit_code = await self._lint()
        self._reporter.finished(exit_code)
        return exit_code

    async def _lint(self) -> int:
        try:
            # Both inputs are independent; either failing aborts the run.
            message, document = await asyncio.gather(
                self._source.read_commit_message(),
                self._source.read_rules_document(),
            )
            sections = segment(message)
            rules = build_rules(document)
        except StructuralError as exc:
            LOGGER.info("Structural error: %s", exc.kind.name)
            self._reporter.structural_error(exc)
            return EXIT_FAILURE
        except ConfigurationError as exc:
            LOGGER.info("Configuration error: %s", exc)
            self._reporter.configuration_error(exc)
            return EXIT_FAILURE

        result = validate(sections, rules)
        if result.skipped:
            self._reporter.no_rules()
            return EXIT_OK
        if not result.valid:
            self._reporter.invalid_lines(result.invalid_lines)
            return EXIT_FAILURE

        self._reporter.success()
        return EXIT_OK
