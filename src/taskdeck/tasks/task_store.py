# src/taskdeck/tasks/task_store.py

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable, Iterator
from dataclasses import replace
from datetime import UTC, date, datetime

from ..core.ports import Snapshot, StoreObserver
from .task_models import EmptyTitleError, Progress, Task, TaskFilter, TaskPriority
from .task_views import summary, visible

logger = logging.getLogger(__name__)


def _default_id() -> str:
    return str(time.time_ns() // 1_000_000)


def _utc_today() -> date:
    return datetime.now(UTC).date()


class TaskStore:
    """
    In-memory task store.

    The collection is kept newest-first:
    - add() prepends
    - toggle() swaps in a new frozen Task with `completed` flipped
    - delete() removes by id

    Every failure mode (blank title, unknown id) is a silent no-op unless
    the store is strict, in which case a blank title raises EmptyTitleError.
    Unknown ids never raise.

    Observers get the new snapshot after each mutation that changed something.
    """

    def __init__(
        self,
        initial: Iterable[Task] | None = None,
        *,
        strict: bool = False,
        id_factory: Callable[[], str] | None = None,
        today: Callable[[], date] | None = None,
    ) -> None:
        self._tasks: list[Task] = []
        self._strict = strict
        self._id_factory = id_factory or _default_id
        self._today = today or _utc_today
        self._observers: list[StoreObserver] = []

        for task in initial or ():
            if task.id in self:
                raise ValueError(f"duplicate task id {task.id!r}")
            self._tasks.append(task)

        logger.info("TaskStore ready total=%s strict=%s", len(self._tasks), strict)

    @property
    def strict(self) -> bool:
        return self._strict

    # ---- low-level helpers ----

    def _index_of(self, task_id: str) -> int | None:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        return None

    def _new_id(self) -> str:
        candidate = str(self._id_factory())
        # Two adds in the same millisecond would collide; bump until free.
        while candidate in self:
            candidate = str(int(candidate) + 1) if candidate.isdigit() else f"{candidate}-1"
        return candidate

    def _notify(self) -> None:
        snap = self.tasks()
        for observer in list(self._observers):
            try:
                observer(snap)
            except Exception:
                logger.exception("Task store observer failed: %r", observer)

    # ---- public API ----

    def tasks(self) -> Snapshot:
        return tuple(self._tasks)

    def get(self, task_id: str) -> Task | None:
        idx = self._index_of(str(task_id))
        return self._tasks[idx] if idx is not None else None

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks())

    def __contains__(self, task_id: object) -> bool:
        return any(t.id == task_id for t in self._tasks)

    def subscribe(self, observer: StoreObserver) -> Callable[[], None]:
        """Register an observer; returns a callable that unregisters it."""
        self._observers.append(observer)

        def unsubscribe() -> None:
            self._observers = [o for o in self._observers if o is not observer]

        return unsubscribe

    def add(self, title: str) -> Task | None:
        clean = (title or "").strip()
        if not clean:
            if self._strict:
                raise EmptyTitleError("title is required")
            logger.debug("Ignored add with blank title")
            return None

        task = Task(
            id=self._new_id(),
            title=clean,
            completed=False,
            priority=TaskPriority.MEDIUM,
            created_at=self._today().isoformat(),
        )
        self._tasks.insert(0, task)
        logger.debug("Task added id=%s title=%r", task.id, task.title)
        self._notify()
        return task

    def toggle(self, task_id: str) -> Task | None:
        idx = self._index_of(str(task_id))
        if idx is None:
            logger.debug("Ignored toggle of unknown id=%s", task_id)
            return None

        task = replace(self._tasks[idx], completed=not self._tasks[idx].completed)
        self._tasks[idx] = task
        logger.debug("Task toggled id=%s completed=%s", task.id, task.completed)
        self._notify()
        return task

    def delete(self, task_id: str) -> bool:
        idx = self._index_of(str(task_id))
        if idx is None:
            logger.debug("Ignored delete of unknown id=%s", task_id)
            return False

        removed = self._tasks.pop(idx)
        logger.debug("Task deleted id=%s", removed.id)
        self._notify()
        return True

    def visible(self, task_filter: TaskFilter | str = TaskFilter.ALL) -> list[Task]:
        return visible(self._tasks, task_filter)

    def summary(self) -> Progress:
        return summary(self._tasks)
