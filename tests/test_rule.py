"""Tests for rule construction and configuration round-trips."""

from __future__ import annotations

import dataclasses

import pytest

from entityfield.exceptions import ConfigurationError, EntityFieldError
from entityfield.model import Bundle, FieldStatus, Rule


def test_rule_defaults_to_all_status() -> None:
    rule = Rule("title")

    assert rule.status is FieldStatus.ALL
    assert rule.match_value == ""


def test_rule_accepts_status_string() -> None:
    rule = Rule("color", "match", "red")

    assert rule.status is FieldStatus.MATCH


@pytest.mark.parametrize("field_name", ["", "   ", None, 3], ids=["empty", "blank", "none", "int"])
def test_rule_rejects_invalid_field_name(field_name: object) -> None:
    with pytest.raises(ConfigurationError, match="field_name"):
        Rule(field_name)  # type: ignore[arg-type]


@pytest.mark.parametrize("status", ["any", "MATCH", "", None, 1], ids=["unknown", "upper", "empty", "none", "int"])
def test_rule_rejects_unknown_status(status: object) -> None:
    with pytest.raises(ConfigurationError, match="field_status"):
        Rule("title", status)  # type: ignore[arg-type]


def test_rule_rejects_non_string_match_value() -> None:
    with pytest.raises(ConfigurationError, match="match_value"):
        Rule("count", FieldStatus.MATCH, 5)  # type: ignore[arg-type]


def test_configuration_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        Rule("")
    assert issubclass(ConfigurationError, EntityFieldError)


def test_rule_is_immutable() -> None:
    rule = Rule("title")

    with pytest.raises(dataclasses.FrozenInstanceError):
        rule.field_name = "body"  # type: ignore[misc]


def test_from_configuration_merges_defaults() -> None:
    rule = Rule.from_configuration({"field_name": "title"})

    assert rule == Rule("title", FieldStatus.ALL, "")


def test_from_configuration_treats_null_value_as_empty() -> None:
    rule = Rule.from_configuration({"field_name": "color", "field_status": "match", "field_value": None})

    assert rule.match_value == ""


def test_from_configuration_rejects_unknown_keys() -> None:
    with pytest.raises(ConfigurationError, match="unknown rule configuration keys"):
        Rule.from_configuration({"field_name": "title", "field_type": "text"})


def test_from_configuration_requires_field_name() -> None:
    with pytest.raises(ConfigurationError, match="field_name"):
        Rule.from_configuration({"field_status": "empty"})


def test_to_configuration_round_trips() -> None:
    configuration = {"field_name": "color", "field_status": "match", "field_value": "red"}

    assert Rule.from_configuration(configuration).to_configuration() == configuration


def test_status_labels() -> None:
    assert FieldStatus.ALL.label == "All values"
    assert FieldStatus.EMPTY.label == "Empty value"
    assert FieldStatus.MATCH.label == "Match"


def test_bundle_requires_id() -> None:
    with pytest.raises(ConfigurationError, match="bundle id"):
        Bundle(id="")


def test_bundle_display_label_falls_back_to_id() -> None:
    assert Bundle(id="node").display_label == "node"
    assert Bundle(id="node", label="Content type").display_label == "Content type"
