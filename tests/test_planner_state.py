"""Tests for the session state container."""
import pytest

from planner_state import DraftTest, PlannerState, TestEntry


def test_draft_completeness_is_exact_empty_check():
    assert not DraftTest().is_complete()
    assert not DraftTest(name="Calc", date="2024-05-01").is_complete()
    assert DraftTest(name=" ", date=" ", study_guide=" ").is_complete()


def test_entries_are_immutable():
    entry = TestEntry(name="Calc101", date="2024-05-01", study_guide="derivatives...")
    with pytest.raises(AttributeError):
        entry.name = "Other"


def test_edit_draft_rejects_unknown_field(state):
    with pytest.raises(KeyError):
        state.edit_draft("grade", "A")


def test_credential_hidden_from_repr():
    state = PlannerState()
    state.set_credential("sk-secret")
    assert "sk-secret" not in repr(state)


def test_plan_clears_error(state):
    state.set_error("boom")
    state.set_plan("Day 1")
    assert state.study_plan == "Day 1"
    assert state.error is None


def test_error_does_not_touch_plan(state):
    state.set_plan("Day 1")
    state.set_error("boom")
    assert state.study_plan == "Day 1"
    assert state.error == "boom"


def test_snapshot_is_detached_from_later_adds(state):
    state.edit_draft("name", "Calc101")
    state.edit_draft("date", "2024-05-01")
    state.edit_draft("study_guide", "derivatives")
    state.commit_draft()
    tests, _ = state.snapshot()

    state.edit_draft("name", "Bio")
    state.edit_draft("date", "2024-06-01")
    state.edit_draft("study_guide", "cells")
    state.commit_draft()

    assert len(tests) == 1
    assert len(state.tests) == 2
