"""Policy deduplication across a framework's controls."""

from __future__ import annotations

from typing import Iterable

from ..models.snapshot import Control, PolicySummary


def dedupe_policies(controls: Iterable[Control]) -> list[PolicySummary]:
    """Collect the distinct policies referenced by any control.

    Policies are keyed by id alone. When the same id shows up under several
    controls the first occurrence is kept, even if a later one carries a
    different status.
    """
    unique: dict[str, PolicySummary] = {}
    for control in controls:
        for policy in control.policies or []:
            if policy.id not in unique:
                unique[policy.id] = policy
    return list(unique.values())
