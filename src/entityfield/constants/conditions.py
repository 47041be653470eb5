"""Condition status values and rule configuration defaults."""

from __future__ import annotations

STATUS_ALL: str = "all"
STATUS_EMPTY: str = "empty"
STATUS_MATCH: str = "match"

VALID_STATUSES: frozenset[str] = frozenset({STATUS_ALL, STATUS_EMPTY, STATUS_MATCH})

STATUS_LABELS: dict[str, str] = {
    STATUS_ALL: "All values",
    STATUS_EMPTY: "Empty value",
    STATUS_MATCH: "Match",
}

FIELD_NAME_KEY: str = "field_name"
FIELD_STATUS_KEY: str = "field_status"
FIELD_VALUE_KEY: str = "field_value"

RULE_CONFIGURATION_KEYS: frozenset[str] = frozenset({FIELD_NAME_KEY, FIELD_STATUS_KEY, FIELD_VALUE_KEY})

DEFAULT_RULE_CONFIGURATION: dict[str, str] = {
    FIELD_NAME_KEY: "",
    FIELD_STATUS_KEY: STATUS_ALL,
    FIELD_VALUE_KEY: "",
}

SUMMARY_SUFFIX: str = "field"

# Field-item mappings expose their scalar under this key.
FIELD_ITEM_VALUE_KEY: str = "value"
