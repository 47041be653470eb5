"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "entityfield"
CLI_DESCRIPTION: str = f"{BRAND_NAME}: evaluate entity field conditions against entity records"
PASS_LABEL: str = "PASS"
FAIL_LABEL: str = "FAIL"
