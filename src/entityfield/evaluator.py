"""Pass/fail evaluation of a rule against a field snapshot."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from entityfield.constants.conditions import SUMMARY_SUFFIX
from entityfield.model import Bundle, FieldStatus, Rule
from entityfield.types import FieldSnapshot

logger = logging.getLogger(__name__)


def evaluate(rule: Rule, snapshot: FieldSnapshot) -> bool:
    """Return whether *snapshot* satisfies *rule*.

    A field missing from the snapshot never passes, whatever the status.
    ``match`` compares the string form of each value to ``rule.match_value``
    exactly and passes on the first hit.
    """
    if rule.field_name not in snapshot:
        return False

    values = snapshot[rule.field_name]
    is_empty = len(values) == 0

    if rule.status is FieldStatus.EMPTY:
        return is_empty
    if rule.status is FieldStatus.ALL:
        return not is_empty
    if is_empty:
        return False
    return any(str(value) == rule.match_value for value in values)


@dataclass(frozen=True)
class ConditionEvaluator:
    """A rule bound to the bundle it was configured for."""

    rule: Rule
    bundle: Bundle | None = None
    negate: bool = False

    def evaluate(self, snapshot: FieldSnapshot) -> bool:
        """Raw verdict, ignoring ``negate``."""
        result = evaluate(self.rule, snapshot)
        logger.debug(
            "Condition on %s (%s) evaluated to %s",
            self.rule.field_name,
            self.rule.status.value,
            result,
        )
        return result

    def execute(self, snapshot: FieldSnapshot) -> bool:
        """Verdict with ``negate`` applied."""
        result = self.evaluate(snapshot)
        return not result if self.negate else result

    def summary(self) -> str:
        """Short human-readable label, e.g. ``"Content type field"``."""
        subject = self.bundle.display_label if self.bundle is not None else self.rule.field_name
        return f"{subject} {SUMMARY_SUFFIX}"
