"""Framework status assembly.

Runs policy dedup, progress aggregation and classification for each
framework instance belonging to one organization.
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional

from ..models.snapshot import FrameworkInstance, Snapshot, Task
from ..models.status import FrameworkOverview, FrameworkStatus
from .classifier import count_not_started_controls, get_score_tone, get_status_badge
from .progress import aggregate_progress


def build_framework_status(
    framework_instance: FrameworkInstance,
    tasks: Iterable[Task],
    compliance_score: Optional[float] = None,
) -> FrameworkStatus:
    """Derive the display status of a single framework instance."""
    task_list = list(tasks)
    score = compliance_score if compliance_score is not None else 0

    progress = aggregate_progress(framework_instance, task_list)
    not_started = count_not_started_controls(framework_instance.controls, task_list)
    badge = get_status_badge(score)

    return FrameworkStatus(
        framework_instance_id=framework_instance.id,
        framework_name=framework_instance.framework.name,
        framework_description=framework_instance.framework.description,
        compliance_score=score,
        status_label=badge.label,
        status_severity=badge.severity,
        score_tone=get_score_tone(score),
        published_policies=progress.published_policies,
        total_policies=progress.total_policies,
        done_tasks=progress.done_tasks,
        total_tasks=progress.total_tasks,
        total_controls=progress.total_controls,
        not_started_controls_count=not_started,
        in_progress_controls_count=progress.total_controls - not_started,
    )


def lookup_score(scores: Optional[dict], framework_instance: FrameworkInstance) -> Optional[float]:
    """Find a score by framework instance id, then by framework name."""
    if not scores:
        return None
    if framework_instance.id in scores:
        return scores[framework_instance.id]
    return scores.get(framework_instance.framework.name)


def build_framework_overview(
    snapshot: Snapshot,
    organization_id: str,
    scores: Optional[dict] = None,
) -> FrameworkOverview:
    """Build one status per framework instance owned by organization_id.

    Entities without their own organization_id belong to the snapshot's
    organization.
    """

    def owner(entity) -> str:
        return entity.organization_id or snapshot.organization_id

    instances = [fi for fi in snapshot.framework_instances if owner(fi) == organization_id]
    tasks = [t for t in snapshot.tasks if owner(t) == organization_id]

    return FrameworkOverview(
        organization_id=organization_id,
        generated_at=datetime.now(),
        frameworks=[
            build_framework_status(fi, tasks, lookup_score(scores, fi))
            for fi in instances
        ],
    )
