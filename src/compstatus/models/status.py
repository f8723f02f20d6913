"""Derived status data models.

Serialized with camelCase aliases so the presentation layer receives the
field names it already reads (statusLabel, publishedPolicies, ...).
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BadgeSeverity(str, Enum):
    DEFAULT = "default"
    SECONDARY = "secondary"
    OUTLINE = "outline"
    DESTRUCTIVE = "destructive"


class ScoreTone(str, Enum):
    POSITIVE = "positive"
    WARNING = "warning"
    NEGATIVE = "negative"


class ControlReadiness(str, Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"


class StatusBadge(BaseModel):
    label: str
    severity: BadgeSeverity


class FrameworkProgress(BaseModel):
    """Raw progress counts for one framework instance. Never pre-divided."""

    published_policies: int = 0
    total_policies: int = 0
    done_tasks: int = 0
    total_tasks: int = 0
    total_controls: int = 0

    def policies_ratio(self) -> str:
        return f"{self.published_policies}/{self.total_policies}"

    def tasks_ratio(self) -> str:
        return f"{self.done_tasks}/{self.total_tasks}"


class FrameworkStatus(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    framework_instance_id: str
    framework_name: str
    framework_description: str = ""
    compliance_score: float = 0
    status_label: str
    status_severity: BadgeSeverity
    score_tone: ScoreTone
    published_policies: int = 0
    total_policies: int = 0
    done_tasks: int = 0
    total_tasks: int = 0
    total_controls: int = 0
    not_started_controls_count: int = 0
    in_progress_controls_count: int = 0


class FrameworkOverview(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    organization_id: str
    generated_at: datetime
    frameworks: list[FrameworkStatus] = []
