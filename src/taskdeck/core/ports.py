# src/taskdeck/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

Commands and connectors depend on these Protocols instead of TaskStore itself,
so another store (or a test fake) can be dropped in.
"""

from collections.abc import Callable
from typing import Protocol

from ..tasks.task_models import Progress, Task, TaskFilter

Snapshot = tuple[Task, ...]


class StoreObserver(Protocol):
    """Called with the fresh snapshot after every effective mutation."""
    def __call__(self, snapshot: Snapshot) -> None: ...


class TaskRepo(Protocol):
    # Mutations
    def add(self, title: str) -> Task | None: ...
    def toggle(self, task_id: str) -> Task | None: ...
    def delete(self, task_id: str) -> bool: ...

    # Derived reads
    def tasks(self) -> Snapshot: ...
    def get(self, task_id: str) -> Task | None: ...
    def visible(self, task_filter: TaskFilter | str = ...) -> list[Task]: ...
    def summary(self) -> Progress: ...

    # Change notification
    def subscribe(self, observer: StoreObserver) -> Callable[[], None]: ...
