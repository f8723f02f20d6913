"""Snapshot data models.

Read-only inputs to the status derivation: framework instances with their
controls and policies, and the organization's tasks.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


class PolicyStatus(str, Enum):
    DRAFT = "draft"
    PUBLISHED = "published"
    NEEDS_REVIEW = "needs_review"


class TaskStatus(str, Enum):
    TODO = "todo"
    IN_PROGRESS = "in_progress"
    DONE = "done"
    NOT_RELEVANT = "not_relevant"


# Numeric ids in YAML exports are read as strings
INPUT_CONFIG = ConfigDict(coerce_numbers_to_str=True)


class PolicySummary(BaseModel):
    model_config = INPUT_CONFIG

    id: str
    name: str = ""
    status: PolicyStatus


class Control(BaseModel):
    """A compliance requirement and the policies attached to it."""

    model_config = INPUT_CONFIG

    id: str
    name: str = ""
    policies: list[PolicySummary] = []
    requirements_mapped: list[dict] = []

    @field_validator("policies", "requirements_mapped", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return [] if value is None else value


class FrameworkDetails(BaseModel):
    model_config = INPUT_CONFIG

    name: str
    description: str = ""


class FrameworkInstance(BaseModel):
    """One framework adopted by an organization."""

    model_config = INPUT_CONFIG

    id: str
    organization_id: Optional[str] = None
    framework: FrameworkDetails
    controls: list[Control] = []

    @field_validator("controls", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return [] if value is None else value

    def control_ids(self) -> set[str]:
        return {c.id for c in self.controls}


class TaskControlRef(BaseModel):
    model_config = INPUT_CONFIG

    id: str


class Task(BaseModel):
    model_config = INPUT_CONFIG

    id: str
    title: str = ""
    organization_id: Optional[str] = None
    status: TaskStatus
    controls: list[TaskControlRef] = []

    @field_validator("controls", mode="before")
    @classmethod
    def _coerce_controls(cls, value):
        if value is None:
            return []
        # Bare control ids are accepted in place of {id: ...}
        if isinstance(value, list):
            return [v if isinstance(v, dict) else {"id": v} for v in value]
        return value

    def control_ids(self) -> set[str]:
        return {c.id for c in self.controls}


class Snapshot(BaseModel):
    """Everything the derivation needs for one or more organizations."""

    model_config = INPUT_CONFIG

    organization_id: str
    framework_instances: list[FrameworkInstance] = []
    tasks: list[Task] = []

    @field_validator("framework_instances", "tasks", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return [] if value is None else value
