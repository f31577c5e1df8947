"""File-backed input source for the commit-msg hook."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Optional

from lint_my_commit.core.errors import ConfigurationError

LOGGER = logging.getLogger(__name__)


class FileInputSource:
    """Read the commit message file and the JSON rules file.

    Reads run in worker threads so the linter can fetch both files at once.
    """

    def __init__(
        self,
        message_path: Optional[str],
        rules_path: Optional[str],
        encoding: str = "utf-8",
    ) -> None:
        self._message_path = message_path
        self._rules_path = rules_path
        self._encoding = encoding

    async def read_commit_message(self) -> str:
        if not self._message_path:
            raise ConfigurationError("No file path provided for commit message")
        return await asyncio.to_thread(self._read_text, self._message_path)

    async def read_rules_document(self) -> Any:
        if not self._rules_path:
            raise ConfigurationError("No file path provided for linting rules")
        raw = await asyncio.to_thread(self._read_text, self._rules_path)
        try:
            return json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ConfigurationError(f"Rules file {self._rules_path} is not valid JSON: {exc}") from exc

    def _read_text(self, path: str) -> str:
        LOGGER.debug("Reading %s", path)
        try:
            # newline="" leaves \r and \r\n for the segmenter to interpret.
            with open(path, "r", encoding=self._encoding, newline="") as handle:
                return handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigurationError(f"Cannot read {path}: {exc}") from exc
