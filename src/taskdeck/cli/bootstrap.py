# src/taskdeck/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- builds the TaskStore (seeded or empty, strict or lenient),
- wires everything into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_models import TaskFilter, seed_tasks
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    initial = seed_tasks() if getattr(settings, "seed_demo_tasks", True) else []
    store = TaskStore(initial, strict=bool(getattr(settings, "strict_titles", False)))

    task_filter = TaskFilter.parse(getattr(settings, "default_filter", TaskFilter.ALL))

    logger.debug("Initial state: tasks=%d filter=%s", len(initial), task_filter)
    return AppState(settings=settings, task_store=store, task_filter=task_filter)
