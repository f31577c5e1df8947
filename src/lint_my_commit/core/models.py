"""Core domain models.

These dataclasses are shared across the core and adapters to avoid tight
coupling to file or console-specific types.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Section(Enum):
    """The three sections of a commit message, in validation order."""

    SUBJECT = "subject"
    BODY = "body"
    FOOTER = "footer"

    @property
    def rule_key(self) -> str:
        return f"{self.value}Pattern"


@dataclass(frozen=True)
class CommitSections:
    """A commit message split into subject, body and footer."""

    subject: str
    body: Tuple[str, ...] = ()
    footer: Tuple[str, ...] = ()

    def lines_for(self, section: Section) -> Tuple[str, ...]:
        if section is Section.SUBJECT:
            return (self.subject,)
        if section is Section.BODY:
            return self.body
        return self.footer


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one commit message.

    ``skipped`` marks the no-rules case: a pass that did not check anything.
    """

    invalid_lines: Tuple[str, ...] = ()
    skipped: bool = False

    @property
    def valid(self) -> bool:
        return not self.invalid_lines
