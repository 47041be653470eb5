"""Rendering of condition set results for the CLI."""

from __future__ import annotations

import json
from collections.abc import Mapping

from entityfield.conditions import ConditionSet
from entityfield.constants.branding import FAIL_LABEL, PASS_LABEL
from entityfield.types import JsonObject


def build_report(condition_set: ConditionSet, results: Mapping[str, bool]) -> JsonObject:
    """Build the JSON-serializable evaluation report."""
    conditions: list[JsonObject] = []
    for name, condition in condition_set.conditions.items():
        conditions.append(
            {
                "name": name,
                "bundle": condition.bundle.id if condition.bundle is not None else None,
                "summary": condition.summary(),
                **condition.rule.to_configuration(),
                "negate": condition.negate,
                "passed": results[name],
            }
        )
    return {
        "passed": condition_set.passes(results),
        "logic": condition_set.logic,
        "conditions": conditions,
    }


def render_json(report: JsonObject) -> str:
    return json.dumps(report, indent=2, sort_keys=True)


def render_text(report: JsonObject) -> str:
    """One line per condition followed by the combined verdict."""
    lines: list[str] = []
    conditions = report["conditions"]
    assert isinstance(conditions, list)
    for entry in conditions:
        assert isinstance(entry, dict)
        label = PASS_LABEL if entry["passed"] else FAIL_LABEL
        negated = " (negated)" if entry["negate"] else ""
        lines.append(
            f"{label} {entry['name']}: {entry['summary']} "
            f"{entry['field_name']} [{entry['field_status']}]{negated}"
        )
    overall = PASS_LABEL if report["passed"] else FAIL_LABEL
    lines.append(f"{overall} ({report['logic']} of {len(conditions)} condition(s))")
    return "\n".join(lines)
