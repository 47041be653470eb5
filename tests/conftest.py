"""Shared pytest fixtures for condition files and entity records."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml


def _write_yaml(path: Path, payload: Any) -> Path:
    path.write_text(yaml.safe_dump(payload, sort_keys=False), encoding="utf-8")
    return path


@pytest.fixture()
def article_config(tmp_path: Path) -> Path:
    """Write a condition file with one condition per status on the ``article`` bundle."""
    return _write_yaml(
        tmp_path / "entityfield.yaml",
        {
            "logic": "and",
            "bundles": {"article": {"label": "Article"}},
            "conditions": {
                "has_title": {"bundle": "article", "field_name": "title", "field_status": "all"},
                "no_summary": {"bundle": "article", "field_name": "summary", "field_status": "empty"},
                "is_red": {
                    "bundle": "article",
                    "field_name": "color",
                    "field_status": "match",
                    "field_value": "red",
                },
            },
        },
    )


@pytest.fixture()
def write_yaml(tmp_path: Path):  # type: ignore[no-untyped-def]
    """Return a helper writing *payload* as YAML to ``tmp_path / name``."""

    def _write(name: str, payload: Any) -> Path:
        return _write_yaml(tmp_path / name, payload)

    return _write
