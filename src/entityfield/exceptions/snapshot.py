"""Snapshot-related exceptions."""

from __future__ import annotations

from entityfield.exceptions.base import EntityFieldError


class SnapshotError(EntityFieldError, ValueError):
    """Raised when an entity record cannot be turned into a field snapshot."""
