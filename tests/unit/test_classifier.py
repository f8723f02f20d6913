"""Tests for core/classifier.py."""

from __future__ import annotations

import pytest

from compstatus.core.classifier import (
    classify_control,
    count_not_started_controls,
    get_control_tasks,
    get_score_tone,
    get_status_badge,
    is_control_not_started,
)
from compstatus.models.status import BadgeSeverity, ControlReadiness, ScoreTone
from helpers import make_control, make_task


class TestControlReadiness:
    def test_no_policies_no_tasks(self):
        assert is_control_not_started(make_control("c1"), []) is True

    def test_draft_policy_and_todo_task(self):
        control = make_control("c1", "draft")
        tasks = [make_task("t1", "todo", "c1")]
        assert is_control_not_started(control, tasks) is True

    @pytest.mark.parametrize("task_status", ["todo", "in_progress", "done"])
    def test_published_policy_is_in_progress(self, task_status):
        control = make_control("c1", "published")
        tasks = [make_task("t1", task_status, "c1")]
        assert classify_control(control, tasks) == ControlReadiness.IN_PROGRESS

    def test_needs_review_policy_is_in_progress(self):
        assert is_control_not_started(make_control("c1", "draft", "needs_review"), []) is False

    def test_task_past_todo_is_in_progress(self):
        control = make_control("c1", "draft")
        tasks = [make_task("t1", "todo", "c1"), make_task("t2", "in_progress", "c1")]
        assert classify_control(control, tasks) == ControlReadiness.IN_PROGRESS

    def test_done_task_without_policies_is_in_progress(self):
        tasks = [make_task("t1", "done", "c1")]
        assert is_control_not_started(make_control("c1"), tasks) is False

    def test_tasks_for_other_controls_ignored(self):
        control = make_control("c1", "draft")
        tasks = [make_task("t1", "done", "c2")]
        assert get_control_tasks(control, tasks) == []
        assert is_control_not_started(control, tasks) is True

    def test_every_control_gets_exactly_one_class(self):
        controls = [
            make_control("c1"),
            make_control("c2", "draft"),
            make_control("c3", "published"),
            make_control("c4", "needs_review", "draft"),
        ]
        tasks = [make_task("t1", "todo", "c1"), make_task("t2", "done", "c2")]
        classes = [classify_control(c, tasks) for c in controls]
        assert all(c in (ControlReadiness.NOT_STARTED, ControlReadiness.IN_PROGRESS) for c in classes)
        not_started = count_not_started_controls(controls, tasks)
        assert not_started == classes.count(ControlReadiness.NOT_STARTED) == 1

    def test_count_accepts_generator(self):
        controls = [make_control("c1"), make_control("c2")]
        tasks = (t for t in [make_task("t1", "todo", "c1"), make_task("t2", "done", "c2")])
        assert count_not_started_controls(controls, tasks) == 1


class TestStatusBadge:
    @pytest.mark.parametrize(
        "score, label, severity",
        [
            (100, "Compliant", BadgeSeverity.DEFAULT),
            (95, "Compliant", BadgeSeverity.DEFAULT),
            (94, "Nearly Compliant", BadgeSeverity.SECONDARY),
            (80, "Nearly Compliant", BadgeSeverity.SECONDARY),
            (79, "In Progress", BadgeSeverity.OUTLINE),
            (50, "In Progress", BadgeSeverity.OUTLINE),
            (49, "Needs Attention", BadgeSeverity.DESTRUCTIVE),
            (0, "Needs Attention", BadgeSeverity.DESTRUCTIVE),
        ],
    )
    def test_boundaries(self, score, label, severity):
        badge = get_status_badge(score)
        assert badge.label == label
        assert badge.severity == severity

    def test_missing_score_defaults_to_zero(self):
        assert get_status_badge().label == "Needs Attention"
        assert get_status_badge(None).label == "Needs Attention"

    def test_fractional_score_below_band(self):
        assert get_status_badge(94.9).label == "Nearly Compliant"

    def test_monotonic(self):
        rank = {"Needs Attention": 0, "In Progress": 1, "Nearly Compliant": 2, "Compliant": 3}
        ranks = [rank[get_status_badge(s).label] for s in range(0, 101)]
        assert ranks == sorted(ranks)


class TestScoreTone:
    @pytest.mark.parametrize(
        "score, tone",
        [
            (100, ScoreTone.POSITIVE),
            (80, ScoreTone.POSITIVE),
            (79, ScoreTone.WARNING),
            (60, ScoreTone.WARNING),
            (59, ScoreTone.NEGATIVE),
            (0, ScoreTone.NEGATIVE),
        ],
    )
    def test_boundaries(self, score, tone):
        assert get_score_tone(score) == tone

    def test_missing_score(self):
        assert get_score_tone() == ScoreTone.NEGATIVE

    def test_independent_of_badge_bands(self):
        # 85 is positive tone but not yet a Compliant badge
        assert get_score_tone(85) == ScoreTone.POSITIVE
        assert get_status_badge(85).label == "Nearly Compliant"
        # 65 is only a warning tone yet already In Progress
        assert get_score_tone(65) == ScoreTone.WARNING
        assert get_status_badge(65).label == "In Progress"
