"""Cross-module type aliases."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any, Literal, TypeAlias

StatusName: TypeAlias = Literal["all", "empty", "match"]

FieldValues: TypeAlias = Sequence[str]
FieldSnapshot: TypeAlias = Mapping[str, FieldValues]

FieldMap: TypeAlias = Mapping[str, Mapping[str, Any]]
FieldMapLookup: TypeAlias = FieldMap | Callable[[], FieldMap]

JsonScalar: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]
JsonObject: TypeAlias = dict[str, JsonValue]
