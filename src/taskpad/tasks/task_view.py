# tasks/task_view.py

"""
Display-list derivation.

Everything here is a pure function of the task collection and the view
state: nothing is cached and nothing is mutated, so callers simply re-derive
after every intent.
"""

from __future__ import annotations

from collections.abc import Iterable

from .task_models import Task, TaskFilter, ViewState


def _matches_status(task: Task, status: TaskFilter) -> bool:
    if status == TaskFilter.ACTIVE:
        return not task.completed
    if status == TaskFilter.COMPLETED:
        return task.completed
    return True


def filter_tasks(
    tasks: Iterable[Task],
    *,
    status: TaskFilter = TaskFilter.ALL,
    search_text: str = "",
    newest_first: bool = True,
) -> list[Task]:
    """
    Status filter -> case-insensitive substring search -> stable sort by created_at.

    Tasks with equal timestamps keep their storage order (sorted() is stable and
    reverse=True preserves it as well).
    """
    needle = search_text.casefold()
    out = [
        t
        for t in tasks
        if _matches_status(t, status) and (not needle or needle in t.text.casefold())
    ]
    return sorted(out, key=lambda t: t.created_at, reverse=newest_first)


def derive_view(tasks: Iterable[Task], view: ViewState) -> list[Task]:
    return filter_tasks(
        tasks,
        status=view.filter,
        search_text=view.search_text,
        newest_first=view.sort_newest_first,
    )


def active_count(tasks: Iterable[Task]) -> int:
    return sum(1 for t in tasks if not t.completed)


def has_completed(tasks: Iterable[Task]) -> bool:
    return any(t.completed for t in tasks)
