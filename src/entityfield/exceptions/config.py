"""Configuration-related exceptions."""

from __future__ import annotations

from entityfield.exceptions.base import EntityFieldError


class ConfigurationError(EntityFieldError, ValueError):
    """Raised when a rule or condition file is invalid."""
