"""Condition file loading for entityfield."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from entityfield.conditions import ConditionSet
from entityfield.constants.conditions import RULE_CONFIGURATION_KEYS
from entityfield.constants.config import (
    ALLOWED_BUNDLE_KEYS,
    ALLOWED_CONDITION_KEYS,
    ALLOWED_CONFIG_KEYS,
    CONFIG_FILENAME,
    DEFAULT_LOGIC,
    VALID_LOGIC,
)
from entityfield.evaluator import ConditionEvaluator
from entityfield.exceptions import ConfigurationError
from entityfield.fields import field_options
from entityfield.model import Bundle, Rule
from entityfield.types import FieldMapLookup

logger = logging.getLogger(__name__)


def load_conditions(path: Path, field_map: FieldMapLookup | None = None) -> ConditionSet:
    """Load a condition set from ``entityfield.yaml`` or an explicit file path.

    When *field_map* is given, rules naming a field their bundle does not
    offer are logged as warnings; they still load and simply never pass.
    """
    path = path.resolve()
    if path.is_dir():
        path = path / CONFIG_FILENAME
    if not path.exists():
        raise ConfigurationError(f"Config file not found: {path}")

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        raise ConfigurationError(f"Config file at {path} is not valid UTF-8: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigurationError(f"Config file at {path} must be a YAML mapping")

    unknown = set(raw) - ALLOWED_CONFIG_KEYS
    if unknown:
        raise ConfigurationError(f"unknown top-level keys: {sorted(unknown, key=str)}")

    logic = raw.get("logic", DEFAULT_LOGIC)
    if not isinstance(logic, str) or logic not in VALID_LOGIC:
        raise ConfigurationError(f"logic must be one of {sorted(VALID_LOGIC)}, got {logic!r}")

    bundles = _build_bundles(raw.get("bundles"))

    conditions_raw = raw.get("conditions", {})
    if conditions_raw is None:
        conditions_raw = {}
    if not isinstance(conditions_raw, dict):
        raise ConfigurationError("conditions must be a mapping")

    conditions: dict[str, ConditionEvaluator] = {}
    for name, condition_raw in conditions_raw.items():
        if not isinstance(name, str) or not name.strip():
            raise ConfigurationError(f"condition names must be non-empty strings, got {name!r}")
        condition = _build_condition(name, condition_raw, bundles)
        if field_map is not None:
            _warn_unknown_field(name, condition, field_map)
        conditions[name] = condition
        logger.debug("Loaded condition: %s (%s)", name, condition.summary())

    return ConditionSet(conditions=conditions, logic=logic)


def _build_bundles(raw: Any) -> dict[str, Bundle] | None:
    """Return declared bundles keyed by id, or ``None`` when none are declared."""
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise ConfigurationError("bundles must be a mapping")

    bundles: dict[str, Bundle] = {}
    for bundle_id, bundle_raw in raw.items():
        if bundle_raw is None:
            bundle_raw = {}
        if not isinstance(bundle_raw, dict):
            raise ConfigurationError(f"bundles.{bundle_id} must be a mapping")
        unknown = set(bundle_raw) - ALLOWED_BUNDLE_KEYS
        if unknown:
            raise ConfigurationError(f"unknown keys in bundles.{bundle_id}: {sorted(unknown, key=str)}")
        bundles[bundle_id] = Bundle(id=bundle_id, label=bundle_raw.get("label", ""))
    return bundles


def _build_condition(name: str, raw: Any, bundles: dict[str, Bundle] | None) -> ConditionEvaluator:
    """Build one condition, prefixing configuration errors with its key path."""
    if not isinstance(raw, dict):
        raise ConfigurationError(f"conditions.{name} must be a mapping")

    unknown = set(raw) - ALLOWED_CONDITION_KEYS
    if unknown:
        raise ConfigurationError(f"unknown keys in conditions.{name}: {sorted(unknown, key=str)}")

    bundle_id = raw.get("bundle")
    if not isinstance(bundle_id, str) or not bundle_id.strip():
        raise ConfigurationError(f"conditions.{name}.bundle must be a non-empty string")
    if bundles is None:
        bundle = Bundle(id=bundle_id)
    elif bundle_id in bundles:
        bundle = bundles[bundle_id]
    else:
        raise ConfigurationError(f"conditions.{name}.bundle references undeclared bundle '{bundle_id}'")

    negate = raw.get("negate", False)
    if not isinstance(negate, bool):
        raise ConfigurationError(f"conditions.{name}.negate must be a boolean")

    try:
        rule = Rule.from_configuration({key: raw[key] for key in RULE_CONFIGURATION_KEYS if key in raw})
    except ConfigurationError as exc:
        raise ConfigurationError(f"conditions.{name}: {exc}") from exc

    return ConditionEvaluator(rule=rule, bundle=bundle, negate=negate)


def _warn_unknown_field(name: str, condition: ConditionEvaluator, field_map: FieldMapLookup) -> None:
    assert condition.bundle is not None
    available = field_options(field_map, condition.bundle.id)
    if condition.rule.field_name not in available:
        logger.warning(
            "Condition %s checks field %s, which bundle %s does not offer",
            name,
            condition.rule.field_name,
            condition.bundle.id,
        )
