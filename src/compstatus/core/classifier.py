"""Control readiness and score classification.

Two independent threshold sets live here:

- Badge bands (95/80/50) label a framework's overall compliance score.
- Tone bands (80/60) colour the inline percentage next to the progress bar.

Changing one set must not move the other.
"""

from __future__ import annotations

from typing import Iterable, Optional

from ..models.snapshot import Control, PolicyStatus, Task, TaskStatus
from ..models.status import BadgeSeverity, ControlReadiness, ScoreTone, StatusBadge

# (lower bound inclusive, label, severity), evaluated top-down
BADGE_BANDS: list[tuple[float, str, BadgeSeverity]] = [
    (95, "Compliant", BadgeSeverity.DEFAULT),
    (80, "Nearly Compliant", BadgeSeverity.SECONDARY),
    (50, "In Progress", BadgeSeverity.OUTLINE),
]
BADGE_FALLBACK = ("Needs Attention", BadgeSeverity.DESTRUCTIVE)

TONE_BANDS: list[tuple[float, ScoreTone]] = [
    (80, ScoreTone.POSITIVE),
    (60, ScoreTone.WARNING),
]
TONE_FALLBACK = ScoreTone.NEGATIVE


def get_control_tasks(control: Control, tasks: Iterable[Task]) -> list[Task]:
    """Tasks whose control associations include this control."""
    return [t for t in tasks if any(c.id == control.id for c in t.controls)]


def is_control_not_started(control: Control, tasks: Iterable[Task]) -> bool:
    """True when no work has begun on the control.

    Every attached policy is still a draft (or there are none) and every
    associated task is still todo (or there are none). Any published or
    in-review policy, or any task past todo, means work has started.
    """
    policies = control.policies or []
    control_tasks = get_control_tasks(control, tasks)

    policies_not_started = all(p.status == PolicyStatus.DRAFT for p in policies)
    tasks_not_started = all(t.status == TaskStatus.TODO for t in control_tasks)

    return policies_not_started and tasks_not_started


def classify_control(control: Control, tasks: Iterable[Task]) -> ControlReadiness:
    if is_control_not_started(control, tasks):
        return ControlReadiness.NOT_STARTED
    return ControlReadiness.IN_PROGRESS


def count_not_started_controls(controls: Iterable[Control], tasks: Iterable[Task]) -> int:
    task_list = list(tasks)
    return sum(1 for c in controls if is_control_not_started(c, task_list))


def get_status_badge(score: Optional[float] = None) -> StatusBadge:
    """Badge label and severity for an overall compliance score (0-100).

    A missing score counts as 0.
    """
    value = score if score is not None else 0
    for lower, label, severity in BADGE_BANDS:
        if value >= lower:
            return StatusBadge(label=label, severity=severity)
    label, severity = BADGE_FALLBACK
    return StatusBadge(label=label, severity=severity)


def get_score_tone(score: Optional[float] = None) -> ScoreTone:
    """Text tone for the inline percentage number."""
    value = score if score is not None else 0
    for lower, tone in TONE_BANDS:
        if value >= lower:
            return tone
    return TONE_FALLBACK
