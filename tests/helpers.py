"""Model builders shared by the unit tests."""

from __future__ import annotations

from compstatus.models.snapshot import Control, FrameworkInstance, Task


def make_control(control_id: str, *policy_statuses: str) -> Control:
    return Control(
        id=control_id,
        policies=[
            {"id": f"{control_id}-pol-{i}", "name": f"Policy {i}", "status": s}
            for i, s in enumerate(policy_statuses)
        ],
    )


def make_task(task_id: str, status: str, *control_ids: str) -> Task:
    return Task(id=task_id, status=status, controls=list(control_ids))


def make_framework(instance_id: str, controls: list[Control], name: str = "Framework") -> FrameworkInstance:
    return FrameworkInstance(id=instance_id, framework={"name": name}, controls=controls)
