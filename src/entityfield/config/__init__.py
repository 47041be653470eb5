"""Condition file loading and validation."""

from __future__ import annotations

from entityfield.config.loader import load_conditions
from entityfield.config.validator import _suggest_key, validate_config_file

__all__ = [
    "_suggest_key",
    "load_conditions",
    "validate_config_file",
]
