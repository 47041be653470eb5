"""Condition file validation for entityfield."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Any

import yaml

from entityfield.constants.conditions import (
    FIELD_NAME_KEY,
    FIELD_STATUS_KEY,
    FIELD_VALUE_KEY,
    VALID_STATUSES,
)
from entityfield.constants.config import (
    ALLOWED_BUNDLE_KEYS,
    ALLOWED_CONDITION_KEYS,
    ALLOWED_CONFIG_KEYS,
    CONFIG_FILENAME,
    VALID_LOGIC,
)
from entityfield.constants.validation import (
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    CFG007,
    CFG008,
)
from entityfield.exceptions.validation import ValidationError, sort_errors


def validate_config_file(path: Path) -> list[ValidationError]:
    """Validate a condition file and return all validation errors.

    This is the collect-all counterpart of :func:`load_conditions` used by
    ``entityfield validate-config`` and as the preflight of ``evaluate``.
    It never raises; every problem is returned as a :class:`ValidationError`.
    """
    errors: list[ValidationError] = []
    path = path.resolve()
    if path.is_dir():
        path = path / CONFIG_FILENAME
    path_str = str(path)

    if not path.exists():
        errors.append(
            ValidationError(
                code=CFG001,
                path=path_str,
                field="",
                message=f"config file not found: {path}",
            )
        )
        return errors

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        errors.append(
            ValidationError(
                code=CFG002,
                path=path_str,
                field="",
                message=f"config file is not valid UTF-8: {exc}",
            )
        )
        return errors
    except yaml.YAMLError as exc:
        errors.append(
            ValidationError(
                code=CFG002,
                path=path_str,
                field="",
                message=f"invalid YAML: {exc}",
            )
        )
        return errors

    if raw is None:
        return errors

    if not isinstance(raw, dict):
        errors.append(
            ValidationError(
                code=CFG003,
                path=path_str,
                field="",
                message=f"config must be a YAML mapping, got {type(raw).__name__}",
            )
        )
        return errors

    for key in sorted(raw.keys(), key=str):
        if key not in ALLOWED_CONFIG_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=str(key),
                    message=f"unknown key `{key}`",
                    hint=_suggest_key(str(key), ALLOWED_CONFIG_KEYS),
                )
            )

    if "logic" in raw:
        val = raw["logic"]
        if not isinstance(val, str) or val not in VALID_LOGIC:
            errors.append(
                ValidationError(
                    code=CFG006,
                    path=path_str,
                    field="logic",
                    message="invalid value for `logic`",
                    hint=f"expected one of: {', '.join(sorted(VALID_LOGIC))}; got: {val!r}",
                )
            )

    declared = _validate_bundles_block(raw, path_str, errors)
    _validate_conditions_block(raw, path_str, declared, errors)

    return sort_errors(errors)


def _validate_bundles_block(
    raw: dict[str, Any],
    path_str: str,
    errors: list[ValidationError],
) -> frozenset[str] | None:
    """Validate the ``bundles`` mapping; return declared ids, or ``None`` when absent."""
    bundles = raw.get("bundles")
    if bundles is None:
        return None
    if not isinstance(bundles, dict):
        errors.append(
            ValidationError(
                code=CFG005,
                path=path_str,
                field="bundles",
                message="`bundles` must be a mapping",
            )
        )
        return None

    for bundle_id, bundle in bundles.items():
        field = f"bundles.{bundle_id}"
        if not isinstance(bundle_id, str) or not bundle_id.strip():
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field=field,
                    message=f"bundle id must be a non-empty string, got {bundle_id!r}",
                )
            )
            continue
        if bundle is None:
            continue
        if not isinstance(bundle, dict):
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field=field,
                    message=f"`{field}` must be a mapping",
                )
            )
            continue
        for key in sorted(bundle.keys(), key=str):
            if key not in ALLOWED_BUNDLE_KEYS:
                errors.append(
                    ValidationError(
                        code=CFG004,
                        path=path_str,
                        field=f"{field}.{key}",
                        message=f"unknown key `{key}` in `{field}`",
                        hint=_suggest_key(str(key), ALLOWED_BUNDLE_KEYS),
                    )
                )
        if "label" in bundle and not isinstance(bundle["label"], str):
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field=f"{field}.label",
                    message=f"invalid type for `{field}.label`",
                    hint="expected a string",
                )
            )

    return frozenset(key for key in bundles if isinstance(key, str))


def _validate_conditions_block(
    raw: dict[str, Any],
    path_str: str,
    declared: frozenset[str] | None,
    errors: list[ValidationError],
) -> None:
    """Validate every entry of the ``conditions`` mapping."""
    conditions = raw.get("conditions")
    if conditions is None:
        return
    if not isinstance(conditions, dict):
        errors.append(
            ValidationError(
                code=CFG005,
                path=path_str,
                field="conditions",
                message="`conditions` must be a mapping",
            )
        )
        return

    for name, condition in conditions.items():
        field = f"conditions.{name}"
        if not isinstance(name, str) or not name.strip():
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field=field,
                    message=f"condition name must be a non-empty string, got {name!r}",
                )
            )
            continue
        if not isinstance(condition, dict):
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field=field,
                    message=f"`{field}` must be a mapping",
                )
            )
            continue
        _validate_condition(condition, field, path_str, declared, errors)


def _validate_condition(
    condition: dict[str, Any],
    field: str,
    path_str: str,
    declared: frozenset[str] | None,
    errors: list[ValidationError],
) -> None:
    for key in sorted(condition.keys(), key=str):
        if key not in ALLOWED_CONDITION_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=f"{field}.{key}",
                    message=f"unknown key `{key}` in `{field}`",
                    hint=_suggest_key(str(key), ALLOWED_CONDITION_KEYS),
                )
            )

    bundle_id = condition.get("bundle")
    if not isinstance(bundle_id, str) or not bundle_id.strip():
        errors.append(
            ValidationError(
                code=CFG007,
                path=path_str,
                field=f"{field}.bundle",
                message=f"`{field}.bundle` is required",
                hint="expected a non-empty string",
            )
        )
    elif declared is not None and bundle_id not in declared:
        errors.append(
            ValidationError(
                code=CFG008,
                path=path_str,
                field=f"{field}.bundle",
                message=f"`{field}.bundle` references undeclared bundle `{bundle_id}`",
                hint=_suggest_key(bundle_id, declared) or "declare it under `bundles`",
            )
        )

    field_name = condition.get(FIELD_NAME_KEY)
    if not isinstance(field_name, str) or not field_name.strip():
        errors.append(
            ValidationError(
                code=CFG007,
                path=path_str,
                field=f"{field}.{FIELD_NAME_KEY}",
                message=f"`{field}.{FIELD_NAME_KEY}` is required",
                hint="expected a non-empty string",
            )
        )

    status = condition.get(FIELD_STATUS_KEY)
    if FIELD_STATUS_KEY in condition and (not isinstance(status, str) or status not in VALID_STATUSES):
        errors.append(
            ValidationError(
                code=CFG006,
                path=path_str,
                field=f"{field}.{FIELD_STATUS_KEY}",
                message=f"invalid value for `{FIELD_STATUS_KEY}`",
                hint=f"expected one of: {', '.join(sorted(VALID_STATUSES))}; got: {status!r}",
            )
        )

    value = condition.get(FIELD_VALUE_KEY)
    if value is not None and not isinstance(value, str):
        errors.append(
            ValidationError(
                code=CFG005,
                path=path_str,
                field=f"{field}.{FIELD_VALUE_KEY}",
                message=f"invalid type for `{FIELD_VALUE_KEY}`",
                hint="expected a string; quote numeric values",
            )
        )

    if "negate" in condition and not isinstance(condition["negate"], bool):
        errors.append(
            ValidationError(
                code=CFG005,
                path=path_str,
                field=f"{field}.negate",
                message="invalid type for `negate`",
                hint="expected a boolean",
            )
        )


def _suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
