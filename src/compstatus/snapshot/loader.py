"""Snapshot file loading.

A snapshot is a YAML or JSON export of an organization's framework
instances and tasks. Framework instances may list their controls directly
or, as the dashboard database stores them, behind requirement mappings.
"""

from __future__ import annotations

import json
from pathlib import Path

import yaml
from pydantic import ValidationError

from ..models.snapshot import Snapshot


class SnapshotError(ValueError):
    """Raised when a snapshot file is missing or malformed."""


def controls_from_requirement_maps(requirement_maps: list[dict] | None) -> list[dict]:
    """Flatten requirement mappings into a list of unique controls.

    Mappings without a control are skipped. A control mapped to several
    requirements is kept once, first mapping wins.
    """
    controls: list[dict] = []
    seen: set = set()
    for mapping in requirement_maps or []:
        control = mapping.get("control") if isinstance(mapping, dict) else None
        if not isinstance(control, dict) or control.get("id") is None:
            continue
        control_id = control["id"]
        if not isinstance(control_id, (str, int)):
            # Left for validation to reject
            controls.append(control)
            continue
        if str(control_id) not in seen:
            seen.add(str(control_id))
            controls.append(control)
    return controls


def normalize_snapshot_data(data: dict) -> dict:
    """Resolve requirement-mapped framework instances to plain controls."""
    normalized = dict(data)
    instances = []
    for instance in data.get("framework_instances") or []:
        if not isinstance(instance, dict):
            # Left for validation to reject
            instances.append(instance)
            continue
        instance = dict(instance)
        if instance.get("controls") is None and "requirements_mapped" in instance:
            instance["controls"] = controls_from_requirement_maps(instance.pop("requirements_mapped"))
        instances.append(instance)
    normalized["framework_instances"] = instances
    return normalized


def _parse_file(path: Path) -> object:
    try:
        content = path.read_text(encoding="utf-8-sig")  # utf-8-sig strips BOM
    except OSError as e:
        raise SnapshotError(f"Could not read snapshot {path.name}: {e.strerror or e}") from e
    if path.suffix.lower() == ".json":
        return json.loads(content)
    return yaml.safe_load(content)


def load_snapshot(path: Path) -> Snapshot:
    """Load and validate a snapshot file."""
    path = Path(path)
    if not path.exists():
        raise SnapshotError(f"Snapshot not found: {path}")

    try:
        data = _parse_file(path)
    except (yaml.YAMLError, json.JSONDecodeError, UnicodeDecodeError) as e:
        raise SnapshotError(f"Could not parse snapshot {path.name}: {e}") from e

    if not isinstance(data, dict):
        raise SnapshotError(f"Snapshot {path.name} must be a mapping at the top level")

    try:
        return Snapshot.model_validate(normalize_snapshot_data(data))
    except ValidationError as e:
        raise SnapshotError(
            f"Invalid snapshot {path.name}: {e.error_count()} validation error(s)\n{e}"
        ) from e
