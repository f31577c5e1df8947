from __future__ import annotations

import logging

import pytest

from lint_my_commit.core.errors import ConfigurationError
from lint_my_commit.core.models import Section
from lint_my_commit.core.rules_engine import RuleSet, build_rules


def test_build_rules_compiles_recognized_keys() -> None:
    rules = build_rules({"subjectPattern": "^feat:", "footerPattern": "^Refs"})
    assert rules.pattern_for(Section.SUBJECT).pattern == "^feat:"
    assert rules.pattern_for(Section.BODY) is None
    assert rules.pattern_for(Section.FOOTER).pattern == "^Refs"
    assert not rules.is_empty


def test_unrecognized_keys_are_dropped_with_warning(caplog) -> None:
    with caplog.at_level(logging.WARNING):
        rules = build_rules({"titlePattern": ".*", "bodyPattern": "^.{0,72}$"})
    assert rules.body is not None
    assert rules.subject is None
    assert 'Unrecognized key "titlePattern" in rules config file' in caplog.text


def test_only_unrecognized_keys_yield_empty_ruleset(caplog) -> None:
    with caplog.at_level(logging.WARNING):
        rules = build_rules({"foo": "bar"})
    assert rules.is_empty


def test_empty_document_yields_empty_ruleset() -> None:
    assert build_rules({}).is_empty
    assert RuleSet().is_empty


def test_non_object_document_yields_empty_ruleset(caplog) -> None:
    with caplog.at_level(logging.WARNING):
        assert build_rules(["^feat"]).is_empty
    assert "not a JSON object" in caplog.text
    assert build_rules(None).is_empty


def test_malformed_pattern_is_a_configuration_error() -> None:
    with pytest.raises(ConfigurationError, match="subjectPattern"):
        build_rules({"subjectPattern": "(unclosed"})


def test_non_string_pattern_is_a_configuration_error() -> None:
    with pytest.raises(ConfigurationError, match="bodyPattern"):
        build_rules({"bodyPattern": 42})
