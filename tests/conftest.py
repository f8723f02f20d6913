"""Shared fixtures for compstatus tests."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from compstatus.models.snapshot import Snapshot


@pytest.fixture
def tmp_project(tmp_path: Path) -> Path:
    """Create an empty project directory."""
    project = tmp_path / "test-project"
    project.mkdir()
    return project


@pytest.fixture
def initialized_project(tmp_project: Path) -> Path:
    """Create a project with .compstatus initialized."""
    cs_dir = tmp_project / ".compstatus"
    cs_dir.mkdir()
    (cs_dir / "reports").mkdir()
    (cs_dir / "config.yaml").write_text(
        'organization:\n  id: "org_acme"\n\nscores:\n  fi_soc2: 87\n',
        encoding="utf-8",
    )
    return tmp_project


@pytest.fixture
def sample_snapshot_data() -> dict:
    """Two frameworks sharing a control, plus one other tenant's data."""
    return {
        "organization_id": "org_acme",
        "framework_instances": [
            {
                "id": "fi_soc2",
                "framework": {"name": "SOC 2", "description": "Trust services criteria"},
                "controls": [
                    {
                        "id": "ctl_access",
                        "name": "Access Control",
                        "policies": [
                            {"id": "pol_access", "name": "Access Policy", "status": "published"},
                            {"id": "pol_password", "name": "Password Policy", "status": "draft"},
                        ],
                    },
                    {
                        "id": "ctl_logging",
                        "name": "Logging",
                        "policies": [
                            {"id": "pol_access", "name": "Access Policy", "status": "published"},
                        ],
                    },
                    {"id": "ctl_backup", "name": "Backups", "policies": []},
                ],
            },
            {
                "id": "fi_iso",
                "framework": {"name": "ISO 27001"},
                "controls": [
                    {
                        "id": "ctl_access",
                        "policies": [
                            {"id": "pol_access", "name": "Access Policy", "status": "published"},
                        ],
                    },
                ],
            },
            {
                "id": "fi_other",
                "organization_id": "org_other",
                "framework": {"name": "HIPAA"},
                "controls": [{"id": "ctl_other"}],
            },
        ],
        "tasks": [
            {"id": "tsk_1", "status": "done", "controls": [{"id": "ctl_access"}]},
            {"id": "tsk_2", "status": "todo", "controls": ["ctl_backup"]},
            {"id": "tsk_3", "status": "in_progress", "controls": ["ctl_unrelated"]},
            {"id": "tsk_4", "status": "done", "organization_id": "org_other", "controls": ["ctl_other"]},
        ],
    }


@pytest.fixture
def sample_snapshot(sample_snapshot_data: dict) -> Snapshot:
    return Snapshot.model_validate(sample_snapshot_data)


@pytest.fixture
def snapshot_file(initialized_project: Path, sample_snapshot_data: dict) -> Path:
    path = initialized_project / "snapshot.yaml"
    path.write_text(yaml.safe_dump(sample_snapshot_data, sort_keys=False), encoding="utf-8")
    return path
