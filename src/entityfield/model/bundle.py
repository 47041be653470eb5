"""Bundle model: the entity sub-type a condition is bound to."""

from __future__ import annotations

from dataclasses import dataclass

from entityfield.exceptions import ConfigurationError


@dataclass(frozen=True)
class Bundle:
    """An entity type/bundle with its display label."""

    id: str
    label: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.id, str) or not self.id.strip():
            raise ConfigurationError("bundle id must be a non-empty string")
        if not isinstance(self.label, str):
            raise ConfigurationError(f"bundle '{self.id}' label must be a string")

    @property
    def display_label(self) -> str:
        """Label used in summaries; falls back to the id."""
        return self.label or self.id
