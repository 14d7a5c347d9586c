# src/taskdeck/core/state.py

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..tasks.task_models import Task, TaskFilter
from .ports import TaskRepo

logger = logging.getLogger(__name__)


@dataclass
class AppState:
    # Settings object (taskdeck.config.Settings or a test SimpleNamespace).
    settings: object

    task_store: TaskRepo
    task_filter: TaskFilter = TaskFilter.ALL

    # Pending text of the "add task" input.
    draft_title: str = ""

    def can_submit(self) -> bool:
        return bool(self.draft_title.strip())


def submit_draft(state: AppState) -> Task | None:
    """
    Submit the pending draft as a new task.

    The draft is cleared only when a task was actually created; a blank draft
    stays untouched. EmptyTitleError from a strict store propagates.
    """
    task = state.task_store.add(state.draft_title)
    if task is not None:
        state.draft_title = ""
        logger.debug("Draft submitted as task id=%s", task.id)
    return task
