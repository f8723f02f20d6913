"""Per-framework progress counts: policies published, tasks done, controls."""

from __future__ import annotations

from typing import Iterable

from ..models.snapshot import FrameworkInstance, PolicyStatus, Task, TaskStatus
from ..models.status import FrameworkProgress
from .policies import dedupe_policies


def format_ratio(numerator: int, total: int) -> str:
    """Render a count pair for display. Empty totals render as "0/0"."""
    return f"{numerator}/{total}"


def get_framework_tasks(framework_instance: FrameworkInstance, tasks: Iterable[Task]) -> list[Task]:
    """Tasks linked to at least one of the framework's controls."""
    control_ids = framework_instance.control_ids()
    return [t for t in tasks if t.control_ids() & control_ids]


def aggregate_progress(framework_instance: FrameworkInstance, tasks: Iterable[Task]) -> FrameworkProgress:
    """Count published policies, done tasks and controls for one framework."""
    policies = dedupe_policies(framework_instance.controls)
    framework_tasks = get_framework_tasks(framework_instance, tasks)

    return FrameworkProgress(
        published_policies=sum(1 for p in policies if p.status == PolicyStatus.PUBLISHED),
        total_policies=len(policies),
        done_tasks=sum(1 for t in framework_tasks if t.status == TaskStatus.DONE),
        total_tasks=len(framework_tasks),
        total_controls=len(framework_instance.controls),
    )
