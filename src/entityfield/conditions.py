"""Named condition sets evaluated together against per-bundle snapshots."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from entityfield.constants.config import DEFAULT_LOGIC, LOGIC_AND, VALID_LOGIC
from entityfield.evaluator import ConditionEvaluator
from entityfield.exceptions import ConfigurationError
from entityfield.types import FieldSnapshot

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConditionSet:
    """Ordered collection of named conditions, each bound to a bundle.

    ``logic`` decides how individual verdicts combine in :meth:`passes`:
    ``and`` requires every condition, ``or`` any one of them.
    """

    conditions: Mapping[str, ConditionEvaluator] = field(default_factory=dict)
    logic: str = DEFAULT_LOGIC

    def __post_init__(self) -> None:
        if self.logic not in VALID_LOGIC:
            raise ConfigurationError(f"logic must be one of {sorted(VALID_LOGIC)}, got {self.logic!r}")
        for name, condition in self.conditions.items():
            if condition.bundle is None:
                raise ConfigurationError(f"condition '{name}' is not bound to a bundle")
        object.__setattr__(self, "conditions", MappingProxyType(dict(self.conditions)))

    def __len__(self) -> int:
        return len(self.conditions)

    @property
    def bundle_ids(self) -> tuple[str, ...]:
        """Distinct bundle ids referenced by the set, sorted."""
        return tuple(sorted({c.bundle.id for c in self.conditions.values() if c.bundle is not None}))

    def evaluate_all(self, snapshots: Mapping[str, FieldSnapshot]) -> dict[str, bool]:
        """Evaluate every condition against the snapshot of its bundle.

        A bundle with no snapshot means no entity of that bundle is in
        context, so its conditions fail (before ``negate`` is applied).
        """
        results: dict[str, bool] = {}
        for name, condition in self.conditions.items():
            assert condition.bundle is not None
            snapshot = snapshots.get(condition.bundle.id)
            if snapshot is None:
                logger.debug("No %s entity in context for condition %s", condition.bundle.id, name)
                results[name] = condition.negate
                continue
            results[name] = condition.execute(snapshot)
        return results

    def passes(self, results: Mapping[str, bool]) -> bool:
        """Combine per-condition verdicts according to ``logic``."""
        if self.logic == LOGIC_AND:
            return all(results.values())
        return any(results.values())
