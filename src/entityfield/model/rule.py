"""Immutable rule model for entity-field conditions."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from entityfield.constants.conditions import (
    DEFAULT_RULE_CONFIGURATION,
    FIELD_NAME_KEY,
    FIELD_STATUS_KEY,
    FIELD_VALUE_KEY,
    RULE_CONFIGURATION_KEYS,
    STATUS_ALL,
    STATUS_EMPTY,
    STATUS_LABELS,
    STATUS_MATCH,
    VALID_STATUSES,
)
from entityfield.exceptions import ConfigurationError


class FieldStatus(StrEnum):
    """Evaluation mode of a rule."""

    ALL = STATUS_ALL
    EMPTY = STATUS_EMPTY
    MATCH = STATUS_MATCH

    @property
    def label(self) -> str:
        """Human-readable name of the mode."""
        return STATUS_LABELS[self.value]


@dataclass(frozen=True)
class Rule:
    """Which field to inspect and how.

    Construction validates eagerly: an empty ``field_name`` or a status outside
    :class:`FieldStatus` raises :class:`ConfigurationError`, so a constructed
    rule can always be evaluated.
    """

    field_name: str
    status: FieldStatus = FieldStatus.ALL
    match_value: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.field_name, str) or not self.field_name.strip():
            raise ConfigurationError("field_name must be a non-empty string")
        object.__setattr__(self, "status", _coerce_status(self.status))
        if not isinstance(self.match_value, str):
            raise ConfigurationError(f"match_value must be a string, got {type(self.match_value).__name__}")

    @classmethod
    def from_configuration(cls, configuration: Mapping[str, Any]) -> Rule:
        """Build a rule from ``field_name``/``field_status``/``field_value`` settings.

        Missing keys fall back to the defaults (``all`` status, empty value).
        """
        unknown = set(configuration) - RULE_CONFIGURATION_KEYS
        if unknown:
            raise ConfigurationError(f"unknown rule configuration keys: {sorted(unknown)}")

        merged = {**DEFAULT_RULE_CONFIGURATION, **configuration}
        field_value = merged[FIELD_VALUE_KEY]
        if field_value is None:
            field_value = ""
        return cls(
            field_name=merged[FIELD_NAME_KEY],
            status=merged[FIELD_STATUS_KEY],
            match_value=field_value,
        )

    def to_configuration(self) -> dict[str, str]:
        """Return the rule as a ``field_name``/``field_status``/``field_value`` mapping."""
        return {
            FIELD_NAME_KEY: self.field_name,
            FIELD_STATUS_KEY: self.status.value,
            FIELD_VALUE_KEY: self.match_value,
        }


def _coerce_status(value: Any) -> FieldStatus:
    """Return *value* as a FieldStatus, raising ConfigurationError when unrecognized."""
    if isinstance(value, FieldStatus):
        return value
    if isinstance(value, str) and value in VALID_STATUSES:
        return FieldStatus(value)
    raise ConfigurationError(f"field_status must be one of {sorted(VALID_STATUSES)}, got {value!r}")
