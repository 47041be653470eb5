"""Shared type aliases for entityfield."""

from .common import FieldMap, FieldMapLookup, FieldSnapshot, FieldValues, JsonObject, JsonValue, StatusName

__all__ = [
    "FieldMap",
    "FieldMapLookup",
    "FieldSnapshot",
    "FieldValues",
    "JsonObject",
    "JsonValue",
    "StatusName",
]
