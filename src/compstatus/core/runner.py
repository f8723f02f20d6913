"""Status run: config -> snapshot -> overview -> report.

Entry point behind `compstatus status`. Returns an exit code.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from rich.console import Console

from .. import __version__
from ..formatters.report import export_overview_json, generate_overview_report
from ..models.status import ScoreTone
from ..snapshot.loader import SnapshotError, load_snapshot
from .config import get_effective_config, get_effective_scores, parse_score_overrides
from .overview import build_framework_overview

console = Console()

EXIT_OK = 0
EXIT_USAGE = 11
EXIT_SNAPSHOT_MISSING = 12
EXIT_SNAPSHOT_INVALID = 13

TONE_COLORS = {
    ScoreTone.POSITIVE: "green",
    ScoreTone.WARNING: "yellow",
    ScoreTone.NEGATIVE: "red",
}


def initialize_project(project_path: Path) -> None:
    """Initialize .compstatus directory structure in a project."""
    cs_dir = project_path / ".compstatus"
    (cs_dir / "reports").mkdir(parents=True, exist_ok=True)

    config_path = cs_dir / "config.yaml"
    if not config_path.exists():
        config_path.write_text(
            "# compstatus project configuration\n"
            "\n"
            "organization:\n"
            '  id: ""\n'
            "\n"
            "snapshot:\n"
            "  path: snapshot.yaml\n"
            "\n"
            "# Compliance scores keyed by framework instance id or framework name\n"
            "scores: {}\n",
            encoding="utf-8",
        )

    console.print(f"  [green]Initialized[/green] .compstatus/ in {project_path.name}")


def _resolve(project_path: Path, value: str) -> Path:
    path = Path(value)
    return path if path.is_absolute() else project_path / path


def run_status(
    project_path: Path,
    snapshot: Optional[str] = None,
    organization_id: Optional[str] = None,
    output_format: Optional[str] = None,
    scores: Optional[list[str]] = None,
    output: Optional[str] = None,
) -> int:
    """Derive framework status for one organization and write the report."""
    project_path = Path(project_path).resolve()

    cli_overrides: dict = {}
    if snapshot:
        cli_overrides.setdefault("snapshot", {})["path"] = snapshot
    if organization_id:
        cli_overrides.setdefault("organization", {})["id"] = organization_id
    if output_format:
        cli_overrides.setdefault("output", {})["format"] = output_format
    if output:
        cli_overrides.setdefault("output", {})["path"] = output

    config = get_effective_config(project_path, cli_overrides=cli_overrides or None)

    try:
        effective_scores = get_effective_scores(config, parse_score_overrides(scores))
    except ValueError as e:
        console.print(f"  [red]ERROR[/red] {e}")
        return EXIT_USAGE

    snapshot_cfg = config.get("snapshot") or {}
    snapshot_path = _resolve(project_path, str(snapshot_cfg.get("path") or "snapshot.yaml"))
    if not snapshot_path.exists():
        console.print(f"  [red]ERROR[/red] Snapshot not found: {snapshot_path}")
        return EXIT_SNAPSHOT_MISSING

    try:
        loaded = load_snapshot(snapshot_path)
    except SnapshotError as e:
        console.print(f"  [red]ERROR[/red] {e}")
        return EXIT_SNAPSHOT_INVALID

    org_id = str((config.get("organization") or {}).get("id") or loaded.organization_id)

    console.print()
    console.print(f"  [bold cyan]COMPSTATUS[/bold cyan] v{__version__}")
    console.print(f"  Organization: [white]{org_id}[/white]")
    console.print(f"  Snapshot:     [white]{snapshot_path.name}[/white]")
    console.print()

    overview = build_framework_overview(loaded, org_id, effective_scores)

    if not overview.frameworks:
        console.print(f"  [yellow]WARN[/yellow] No framework instances for organization {org_id}")

    for fw in overview.frameworks:
        color = TONE_COLORS.get(fw.score_tone, "white")
        console.print(
            f"  [{color}]{fw.compliance_score:g}%[/{color}] {fw.framework_name}: {fw.status_label} "
            f"(policies {fw.published_policies}/{fw.total_policies}, "
            f"tasks {fw.done_tasks}/{fw.total_tasks}, "
            f"controls {fw.total_controls}, not started {fw.not_started_controls_count})"
        )

    output_cfg = config.get("output") or {}
    fmt = output_cfg.get("format") or "markdown"
    reports_dir = project_path / ".compstatus" / "reports"
    default_name = "framework-status.json" if fmt == "json" else "FRAMEWORK-STATUS.md"
    report_path = _resolve(project_path, str(output_cfg.get("path") or reports_dir / default_name))
    if fmt == "json":
        export_overview_json(overview, report_path)
    else:
        report_path.parent.mkdir(parents=True, exist_ok=True)
        report_path.write_text(generate_overview_report(overview), encoding="utf-8")

    console.print(f"\n  [green]OK[/green] Report: {report_path}")
    console.print()
    return EXIT_OK
