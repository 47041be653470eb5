"""Selectable field names per bundle."""

from __future__ import annotations

from entityfield.types import FieldMapLookup


def field_options(field_map: FieldMapLookup, entity_type_id: str) -> tuple[str, ...]:
    """Return the sorted field names available on *entity_type_id*.

    *field_map* is either the mapping ``{entity_type_id: {field_name: ...}}``
    or a zero-argument callable returning it. Unknown entity types yield an
    empty tuple.
    """
    resolved = field_map() if callable(field_map) else field_map
    fields = resolved.get(entity_type_id) or {}
    return tuple(sorted(set(fields)))
