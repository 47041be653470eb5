"""Shared exception hierarchy for entityfield."""

from __future__ import annotations

from .base import EntityFieldError
from .config import ConfigurationError
from .snapshot import SnapshotError

__all__ = [
    "ConfigurationError",
    "EntityFieldError",
    "SnapshotError",
]
