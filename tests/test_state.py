# tests/test_state.py

from __future__ import annotations

import pytest

from taskdeck.core.state import AppState, submit_draft
from taskdeck.tasks.task_models import EmptyTitleError
from taskdeck.tasks.task_store import TaskStore


def test_submit_draft_clears_buffer_on_success(state: AppState) -> None:
    state.draft_title = "  Plan sprint "
    assert state.can_submit()

    task = submit_draft(state)

    assert task is not None
    assert task.title == "Plan sprint"
    assert state.draft_title == ""
    assert not state.can_submit()


def test_submit_blank_draft_keeps_buffer(state: AppState) -> None:
    state.draft_title = "   "
    assert not state.can_submit()

    assert submit_draft(state) is None
    assert state.draft_title == "   "
    assert len(state.task_store.tasks()) == 3


def test_submit_blank_draft_strict_raises(settings) -> None:
    state = AppState(settings=settings, task_store=TaskStore(strict=True))
    with pytest.raises(EmptyTitleError):
        submit_draft(state)
