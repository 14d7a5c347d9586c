# src/taskdeck/cli/render.py

"""Plain-text rendering of the task board for the console connector."""

from __future__ import annotations

from ..core.state import AppState
from ..tasks.task_models import Progress, Task
from ..tasks.task_views import empty_message

BAR_WIDTH = 20


def render_progress_line(progress: Progress) -> str:
    return f"{progress.completed} of {progress.total} tasks completed"


def render_progress_bar(progress: Progress, width: int = BAR_WIDTH) -> str:
    # Unrounded share, floored to whole cells.
    filled = min(width, int(progress.ratio * width))
    return f"Progress [{'#' * filled}{'.' * (width - filled)}] {progress.percentage}%"


def render_task(task: Task) -> list[str]:
    mark = "[x]" if task.completed else "[ ]"
    lines = [f"{mark} #{task.id} {task.title} ({task.priority})"]
    if task.description:
        lines.append(f"      {task.description}")
    meta = f"Created: {task.created_at}"
    if task.due_date:
        meta += f"  Due: {task.due_date}"
    lines.append(f"      {meta}")
    return lines


def render_board(state: AppState) -> str:
    store = state.task_store
    progress = store.summary()

    lines = [
        "Task Manager",
        render_progress_line(progress),
        f"Filter: {state.task_filter}",
        render_progress_bar(progress),
        "",
    ]

    tasks = store.visible(state.task_filter)
    if not tasks:
        lines.append(empty_message(state.task_filter))
    for task in tasks:
        lines.extend(render_task(task))

    return "\n".join(lines)
