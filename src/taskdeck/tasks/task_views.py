# src/taskdeck/tasks/task_views.py

"""
Derived, read-only views over a task sequence.

Both views are pure: they never keep state and are recomputed on every read,
so they always reflect the latest store snapshot.
"""

from __future__ import annotations

from collections.abc import Iterable

from .task_models import Progress, Task, TaskFilter

_EMPTY_MESSAGES: dict[TaskFilter, str] = {
    TaskFilter.ALL: "No tasks yet. Add your first task above!",
    TaskFilter.ACTIVE: "No active tasks. Great job!",
    TaskFilter.COMPLETED: "No completed tasks yet.",
}


def visible(tasks: Iterable[Task], task_filter: TaskFilter | str = TaskFilter.ALL) -> list[Task]:
    """Return tasks matching the filter, keeping their original order."""
    flt = TaskFilter.parse(task_filter)
    if flt is TaskFilter.ACTIVE:
        return [t for t in tasks if not t.completed]
    if flt is TaskFilter.COMPLETED:
        return [t for t in tasks if t.completed]
    return list(tasks)


def summary(tasks: Iterable[Task]) -> Progress:
    items = list(tasks)
    total = len(items)
    completed = sum(1 for t in items if t.completed)
    if total == 0:
        return Progress(completed=0, total=0, percentage=0)
    # Round half up on integers: floor((200 * c + t) / (2 * t)).
    percentage = (200 * completed + total) // (2 * total)
    return Progress(completed=completed, total=total, percentage=percentage)


def empty_message(task_filter: TaskFilter | str) -> str:
    return _EMPTY_MESSAGES[TaskFilter.parse(task_filter)]
