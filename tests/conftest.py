# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from tasktracker.app import create_app
from tasktracker.config import Settings
from tasktracker.core.task_store import TaskStore
from tasktracker.models import Task

from .factories import make_task


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """Settings pointed at a tmp tasks file so tests never read data/task.json."""
    return Settings(ENVIRONMENT="testing", TASKS_FILE=tmp_path / "task.json")


@pytest.fixture()
def seeded_tasks() -> list[Task]:
    """Two completed and three incomplete tasks with distinct createdAt values."""
    return [
        make_task(1, title="One", completed=True, priority="high", created_at="2026-01-01T10:00:00.000Z"),
        make_task(2, title="Two", completed=False, priority="low", created_at="2026-01-03T10:00:00.000Z"),
        make_task(3, title="Three", completed=True, priority="medium", created_at="2026-01-02T10:00:00.000Z"),
        make_task(4, title="Four", completed=False, priority="high", created_at="2026-01-05T10:00:00.000Z"),
        make_task(5, title="Five", completed=False, priority="medium", created_at="2026-01-04T10:00:00.000Z"),
    ]


@pytest.fixture()
def store(seeded_tasks: list[Task]) -> TaskStore:
    return TaskStore(seeded_tasks)


@pytest.fixture()
def client(settings: Settings, store: TaskStore):
    app = create_app(settings=settings, store=store)
    with TestClient(app) as c:
        yield c
