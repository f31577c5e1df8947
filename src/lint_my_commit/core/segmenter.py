"""Commit message segmentation (core domain)."""

from __future__ import annotations

import logging
import re
from typing import List, Optional

from lint_my_commit.core.errors import StructuralError, StructuralErrorKind
from lint_my_commit.core.models import CommitSections

LOGGER = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r"\r?\n")


def split_lines(text: str) -> List[str]:
    """Split text on line breaks, normalizing whitespace-only lines to ``""``.

    Non-blank lines are returned untouched so indentation and trailing
    spaces inside real content survive.
    """

    return ["" if not line.strip() else line for line in _LINE_BREAK.split(text)]


def segment(text: object) -> CommitSections:
    """Split a raw commit message into subject, body and footer.

    Grammar:
    - The first line is the subject and must not be blank.
    - Body content, if any, must be preceded by a blank line.
    - The body runs until the next blank line; that line and everything
      after it form the footer.
    """

    if not isinstance(text, str) or not text.strip():
        raise StructuralError(StructuralErrorKind.EMPTY_MESSAGE)

    lines = split_lines(text)

    subject = lines.pop(0)
    if not subject:
        raise StructuralError(StructuralErrorKind.EMPTY_SUBJECT)

    separator: Optional[str] = lines.pop(0) if lines else None

    body_start = next((index for index, line in enumerate(lines) if line), None)
    if body_start is None:
        return CommitSections(subject=subject)

    if separator:
        raise StructuralError(StructuralErrorKind.MISSING_BODY_SEPARATOR)

    body: List[str] = []
    footer: List[str] = []
    for line in lines[body_start:]:
        # The first blank line closes the body for good.
        if not line or footer:
            footer.append(line)
            continue
        body.append(line)

    LOGGER.debug("Segmented message: body=%s lines, footer=%s lines", len(body), len(footer))
    return CommitSections(subject=subject, body=tuple(body), footer=tuple(footer))
