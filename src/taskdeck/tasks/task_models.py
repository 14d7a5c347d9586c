# src/taskdeck/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class TaskError(Exception):
    """Base error for task operations."""


class EmptyTitleError(TaskError, ValueError):
    """Raised by a strict store when a blank title is submitted."""


class TaskPriority(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class TaskFilter(StrEnum):
    """
    View selector for the task list.

    Notes:
    - "active" means not completed yet.
    - the selector never changes the store, it only narrows what is shown.
    """

    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"

    @classmethod
    def parse(cls, raw: str | TaskFilter) -> TaskFilter:
        if isinstance(raw, cls):
            return raw
        value = str(raw or "").strip().lower()
        try:
            return cls(value)
        except ValueError:
            choices = ", ".join(f.value for f in cls)
            raise ValueError(f"unknown filter {raw!r} (expected one of: {choices})") from None


@dataclass(frozen=True, slots=True)
class Task:
    id: str
    title: str
    created_at: str

    completed: bool = False
    priority: TaskPriority = TaskPriority.MEDIUM

    description: str | None = None
    due_date: str | None = None


@dataclass(frozen=True, slots=True)
class Progress:
    completed: int
    total: int
    percentage: int

    @property
    def ratio(self) -> float:
        # Unrounded, used for bar width.
        if self.total <= 0:
            return 0.0
        return self.completed / self.total

    def astuple(self) -> tuple[int, int, int]:
        return (self.completed, self.total, self.percentage)


def seed_tasks() -> list[Task]:
    """Demo tasks every fresh session starts with."""
    return [
        Task(
            id="1",
            title="Complete project proposal",
            description="Draft and finalize the Q4 project proposal for client review",
            completed=False,
            priority=TaskPriority.HIGH,
            due_date="2024-12-20",
            created_at="2024-12-15",
        ),
        Task(
            id="2",
            title="Review team feedback",
            description="Go through all team member feedback from last sprint",
            completed=True,
            priority=TaskPriority.MEDIUM,
            created_at="2024-12-14",
        ),
        Task(
            id="3",
            title="Update documentation",
            completed=False,
            priority=TaskPriority.LOW,
            due_date="2024-12-25",
            created_at="2024-12-13",
        ),
    ]
