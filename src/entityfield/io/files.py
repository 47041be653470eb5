"""Reading entity records from disk."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from entityfield.exceptions import SnapshotError


def load_record(path: Path) -> dict[str, Any]:
    """Load one entity record from a YAML or JSON file.

    An empty file is an entity with no fields.
    """
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise SnapshotError(f"Failed to read entity record {path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise SnapshotError(f"Entity record {path} is not valid UTF-8: {exc}") from exc
    except yaml.YAMLError as exc:
        raise SnapshotError(f"Invalid entity record {path}: {exc}") from exc

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise SnapshotError(f"Entity record {path} must contain a mapping")
    return raw
