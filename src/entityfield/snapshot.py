"""Conversion of plain entity records into field snapshots."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from entityfield.constants.conditions import FIELD_ITEM_VALUE_KEY
from entityfield.exceptions import SnapshotError
from entityfield.types import FieldSnapshot


def build_snapshot(record: Mapping[str, Any]) -> FieldSnapshot:
    """Materialize a snapshot from an entity record.

    Each key becomes a field. ``None`` is an empty field, a list or tuple is a
    multi-value field (order kept, ``None`` items dropped) and any other value
    is a single-value field. Mapping items carrying a ``value`` entry are
    field items and contribute that entry. Every value is stored as its
    ``str()`` form, so booleans become ``"True"``/``"False"`` rather than
    ``"1"``/``""``; a ``match`` against a boolean field must use ``"True"``.
    """
    if not isinstance(record, Mapping):
        raise SnapshotError(f"entity record must be a mapping, got {type(record).__name__}")

    snapshot: dict[str, tuple[str, ...]] = {}
    for name, raw in record.items():
        if not isinstance(name, str):
            raise SnapshotError(f"field names must be strings, got {name!r}")
        snapshot[name] = _field_values(raw)
    return snapshot


def _field_values(raw: Any) -> tuple[str, ...]:
    if raw is None:
        return ()
    if isinstance(raw, (list, tuple)):
        return tuple(_item_string(item) for item in raw if not _is_empty_item(item))
    if _is_empty_item(raw):
        return ()
    return (_item_string(raw),)


def _is_empty_item(item: Any) -> bool:
    if item is None:
        return True
    return isinstance(item, Mapping) and FIELD_ITEM_VALUE_KEY in item and item[FIELD_ITEM_VALUE_KEY] is None


def _item_string(item: Any) -> str:
    if isinstance(item, Mapping) and FIELD_ITEM_VALUE_KEY in item:
        return str(item[FIELD_ITEM_VALUE_KEY])
    return str(item)
