# tests/factories.py

from __future__ import annotations

from tasktracker.models import Task


def make_task(
    task_id: int,
    *,
    title: str = "Task",
    description: str = "Description",
    completed: bool = False,
    priority: str = "medium",
    created_at: str = "2026-01-01T00:00:00.000Z",
) -> Task:
    return Task(
        id=task_id,
        title=title,
        description=description,
        completed=completed,
        priority=priority,
        created_at=created_at,
    )
