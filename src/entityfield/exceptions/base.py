"""Base exception for entityfield."""

from __future__ import annotations


class EntityFieldError(Exception):
    """Root of every error raised by entityfield."""
