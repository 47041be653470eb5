"""Core data models for entityfield."""

from .bundle import Bundle
from .rule import FieldStatus, Rule

__all__ = [
    "Bundle",
    "FieldStatus",
    "Rule",
]
