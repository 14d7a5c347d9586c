# tests/conftest.py

from __future__ import annotations

from types import SimpleNamespace

import pytest

from taskdeck.core.state import AppState
from taskdeck.tasks.task_models import TaskFilter, seed_tasks
from taskdeck.tasks.task_store import TaskStore

from .fakes import FixedClock, SequentialIds


@pytest.fixture()
def settings() -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than the real env-driven
    Settings, to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="taskdeck-test",
        log_level="DEBUG",
        seed_demo_tasks=True,
        strict_titles=False,
        default_filter=TaskFilter.ALL,
    )


@pytest.fixture()
def store() -> TaskStore:
    """Seeded store with deterministic ids ("100", "101", ...) and date."""
    return TaskStore(seed_tasks(), id_factory=SequentialIds(start=100), today=FixedClock())


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    return AppState(settings=settings, task_store=store)
