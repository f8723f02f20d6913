"""Framework overview report rendering (markdown and JSON)."""

from __future__ import annotations

import json
from pathlib import Path

from .. import __version__
from ..core.progress import format_ratio
from ..models.status import FrameworkOverview


def _format_score(score: float) -> str:
    return f"{int(score)}%" if float(score).is_integer() else f"{round(score, 1)}%"


def generate_overview_report(overview: FrameworkOverview) -> str:
    """Generate the FRAMEWORK-STATUS.md report."""
    timestamp = overview.generated_at.strftime("%Y-%m-%d %H:%M:%S")

    lines: list[str] = []
    lines.append("# Framework Compliance Status")
    lines.append("")
    lines.append(f"**Organization:** {overview.organization_id}")
    lines.append(f"**Date:** {timestamp}")
    lines.append(f"**Frameworks:** {len(overview.frameworks)}")
    lines.append("")

    if not overview.frameworks:
        lines.append("No frameworks adopted.")
        lines.append("")
    else:
        lines.append("## Summary")
        lines.append("")
        lines.append("| Framework | Score | Status | Policies | Tasks | Controls | Not Started |")
        lines.append("|-----------|-------|--------|----------|-------|----------|-------------|")
        for fw in overview.frameworks:
            lines.append(
                f"| {fw.framework_name} | {_format_score(fw.compliance_score)} | {fw.status_label} "
                f"| {format_ratio(fw.published_policies, fw.total_policies)} published "
                f"| {format_ratio(fw.done_tasks, fw.total_tasks)} done "
                f"| {fw.total_controls} total | {fw.not_started_controls_count} |"
            )
        lines.append("")

        lines.append("## Frameworks")
        lines.append("")
        for fw in overview.frameworks:
            lines.append(f"### {fw.framework_name} [{fw.status_label}]")
            if fw.framework_description:
                lines.append(f"\n{fw.framework_description}\n")
            lines.append(f"- **Score:** {_format_score(fw.compliance_score)} ({fw.score_tone.value})")
            lines.append(f"- **Policies:** {format_ratio(fw.published_policies, fw.total_policies)} published")
            lines.append(f"- **Tasks:** {format_ratio(fw.done_tasks, fw.total_tasks)} done")
            lines.append(
                f"- **Controls:** {fw.total_controls} total, "
                f"{fw.not_started_controls_count} not started, "
                f"{fw.in_progress_controls_count} in progress"
            )
            lines.append("")

    lines.append("---")
    lines.append(f"*Generated by compstatus v{__version__} at {timestamp}*")

    return "\n".join(lines)


def overview_to_dict(overview: FrameworkOverview) -> dict:
    """camelCase dict, the shape the dashboard cards consume."""
    return overview.model_dump(mode="json", by_alias=True)


def export_overview_json(overview: FrameworkOverview, output_path: Path) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(overview_to_dict(overview), indent=2, ensure_ascii=False),
        encoding="utf-8",
    )
    return output_path
