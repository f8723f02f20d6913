"""3-layer configuration system for compstatus.

Loads and merges configuration from:
1. Default settings (built-in)
2. Project config (.compstatus/config.yaml)
3. CLI parameters (override)
"""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Optional

import yaml

DEFAULT_CONFIG: dict = {
    "organization": {
        "id": "",
    },
    "snapshot": {
        "path": "snapshot.yaml",
    },
    # framework instance id or framework name -> compliance score (0-100)
    "scores": {},
    "output": {
        "format": "markdown",
        "path": "",
    },
}


def deep_merge(base: dict, override: dict) -> dict:
    """Deep merge two dicts. Arrays are replaced, not merged."""
    result = {}
    for key in base:
        result[key] = base[key]
    for key, value in override.items():
        base_value = result.get(key)
        if isinstance(base_value, dict) and isinstance(value, dict):
            result[key] = deep_merge(base_value, value)
        else:
            result[key] = value
    return result


def load_project_config(project_path: Path) -> dict:
    """Load project configuration from .compstatus/config.yaml."""
    config_path = project_path / ".compstatus" / "config.yaml"
    if not config_path.exists():
        return {}
    try:
        content = config_path.read_text(encoding="utf-8-sig")
        data = yaml.safe_load(content) or {}
    except (OSError, yaml.YAMLError):
        return {}
    return data if isinstance(data, dict) else {}


def parse_score(value: object) -> float:
    """Parse a compliance score, rejecting anything outside 0..100."""
    try:
        score = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"Score must be a number, got {value!r}") from None
    if not 0 <= score <= 100:
        raise ValueError(f"Score must be between 0 and 100, got {value!r}")
    return score


def parse_score_overrides(values: Optional[list[str]]) -> dict[str, float]:
    """Parse KEY=VALUE pairs from the command line."""
    scores: dict[str, float] = {}
    for item in values or []:
        key, sep, raw = item.partition("=")
        key = key.strip()
        if not sep or not key:
            raise ValueError(f"Expected KEY=VALUE, got {item!r}")
        scores[key] = parse_score(raw.strip())
    return scores


def get_effective_scores(config: dict, overrides: Optional[dict[str, float]] = None) -> dict[str, float]:
    """Merge configured scores with command-line overrides."""
    configured = config.get("scores") or {}
    if not isinstance(configured, dict):
        raise ValueError("scores must be a mapping of framework to score")
    scores = {str(k): parse_score(v) for k, v in configured.items()}
    if overrides:
        scores.update(overrides)
    return scores


# Scores are validated separately by get_effective_scores
SETTINGS_SECTIONS = ("organization", "snapshot", "output")


def drop_malformed_sections(project_config: dict) -> dict:
    """Discard settings sections that hold a plain value instead of a mapping.

    `organization: org_acme` is dropped so the default `organization`
    table stays in effect.
    """
    return {
        key: value
        for key, value in project_config.items()
        if key not in SETTINGS_SECTIONS or isinstance(value, dict)
    }


def get_effective_config(
    project_path: Path,
    cli_overrides: Optional[dict] = None,
) -> dict:
    """Get the fully resolved configuration for a status run."""
    config = copy.deepcopy(DEFAULT_CONFIG)

    project_config = drop_malformed_sections(load_project_config(project_path))
    if project_config:
        config = deep_merge(config, project_config)

    if cli_overrides:
        config = deep_merge(config, cli_overrides)

    config["_project_path"] = str(project_path)

    return config
