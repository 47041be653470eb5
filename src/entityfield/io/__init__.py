"""Shared file I/O helpers."""

from .files import load_record

__all__ = ["load_record"]
