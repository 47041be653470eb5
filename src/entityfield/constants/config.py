"""Condition file defaults and allowed keys."""

from __future__ import annotations

CONFIG_FILENAME: str = "entityfield.yaml"

LOGIC_AND: str = "and"
LOGIC_OR: str = "or"
VALID_LOGIC: frozenset[str] = frozenset({LOGIC_AND, LOGIC_OR})
DEFAULT_LOGIC: str = LOGIC_AND

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset({"logic", "bundles", "conditions"})
ALLOWED_BUNDLE_KEYS: frozenset[str] = frozenset({"label"})
ALLOWED_CONDITION_KEYS: frozenset[str] = frozenset(
    {
        "bundle",
        "field_name",
        "field_status",
        "field_value",
        "negate",
    }
)
