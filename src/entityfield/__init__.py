"""Entity-field condition evaluator."""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version

from entityfield.conditions import ConditionSet
from entityfield.config import load_conditions
from entityfield.evaluator import ConditionEvaluator, evaluate
from entityfield.fields import field_options
from entityfield.model import Bundle, FieldStatus, Rule
from entityfield.snapshot import build_snapshot

__all__ = [
    "Bundle",
    "ConditionEvaluator",
    "ConditionSet",
    "FieldStatus",
    "Rule",
    "__version__",
    "build_snapshot",
    "evaluate",
    "field_options",
    "load_conditions",
]

try:
    __version__ = version("entityfield")
except PackageNotFoundError:
    __version__ = "0.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
