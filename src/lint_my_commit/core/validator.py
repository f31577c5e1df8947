"""Per-section line validation (core domain)."""

from __future__ import annotations

from typing import List

from lint_my_commit.core.models import CommitSections, Section, ValidationResult
from lint_my_commit.core.rules_engine import RuleSet


def validate(sections: CommitSections, rules: RuleSet) -> ValidationResult:
    """Return every line that fails its section's pattern.

    Validation logic:
    - No configured rules short-circuits to a skipped (but passing) result.
    - Sections are checked in subject, body, footer order; line order is kept.
    - Blank footer lines, the body/footer separator included, are exempt.
    - Sections without a pattern contribute nothing.
    """

    if rules.is_empty:
        return ValidationResult(skipped=True)

    invalid_lines: List[str] = []
    for section in Section:
        pattern = rules.pattern_for(section)
        if pattern is None:
            continue
        for line in sections.lines_for(section):
            if section is Section.FOOTER and not line:
                continue
            if not pattern.search(line):
                invalid_lines.append(line)

    return ValidationResult(invalid_lines=tuple(invalid_lines))
