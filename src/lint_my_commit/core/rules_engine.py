"""Rule compilation (core domain)."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import re
from typing import Any, Optional

from lint_my_commit.core.errors import ConfigurationError
from lint_my_commit.core.models import Section

LOGGER = logging.getLogger(__name__)

RULE_KEYS = {section.rule_key: section for section in Section}


@dataclass(frozen=True)
class RuleSet:
    """One optional compiled line pattern per commit section.

    Patterns are applied with ``re.search``: an unanchored pattern matches
    any substring of a line, so rule authors anchor with ``^``/``$`` when they
    mean the whole line.
    """

    subject: Optional[re.Pattern] = None
    body: Optional[re.Pattern] = None
    footer: Optional[re.Pattern] = None

    def pattern_for(self, section: Section) -> Optional[re.Pattern]:
        return getattr(self, section.value)

    @property
    def is_empty(self) -> bool:
        return all(self.pattern_for(section) is None for section in Section)


def _compile(key: str, source: Any) -> re.Pattern:
    if not isinstance(source, str):
        raise ConfigurationError(f'Rule "{key}" must be a string, got {type(source).__name__}')
    try:
        return re.compile(source)
    except re.error as exc:
        raise ConfigurationError(f'Rule "{key}" is not a valid regular expression: {exc}') from exc


def build_rules(document: Any) -> RuleSet:
    """Compile the recognized patterns of a parsed rules document.

    - Anything other than a JSON object means no rules.
    - Unknown keys are dropped with a warning rather than rejected.
    - A malformed pattern fails the whole run.
    """

    if not isinstance(document, dict):
        if document is not None:
            LOGGER.warning("Rules config is not a JSON object, ignoring it")
        return RuleSet()

    patterns: dict[str, re.Pattern] = {}
    for key, value in document.items():
        section = RULE_KEYS.get(key)
        if section is None:
            LOGGER.warning('Unrecognized key "%s" in rules config file', key)
            continue
        patterns[section.value] = _compile(key, value)

    LOGGER.info("%s rules are loaded", len(patterns))
    return RuleSet(**patterns)
