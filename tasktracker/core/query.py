#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Task Tracker - Query Engine
Фильтрация и сортировка списка задач
"""

from datetime import datetime, timezone
from typing import List, Optional

from tasktracker.core.errors import InvalidPriorityError
from tasktracker.models import DEFAULT_PRIORITY, Priority, Task

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

SORT_OLDEST = "oldest"


def filter_by_completed(tasks: List[Task], completed: Optional[str]) -> List[Task]:
    """
    Отфильтровать задачи по статусу выполнения.

    Только строка "true" означает True, любое другое значение
    (включая "false", "1", "yes") означает False.
    """
    if completed is None:
        return list(tasks)

    wanted = completed == "true"
    return [task for task in tasks if task.completed == wanted]


def parse_priority_level(level: str) -> str:
    """Привести уровень из пути к нижнему регистру и проверить его"""
    normalized = level.lower()
    if normalized not in Priority.values():
        raise InvalidPriorityError()
    return normalized


def filter_by_priority(tasks: List[Task], level: str) -> List[Task]:
    level = level.lower()
    return [
        task for task in tasks
        if (task.priority or DEFAULT_PRIORITY.value).lower() == level
    ]


def _created_timestamp(task: Task) -> datetime:
    raw = task.created_at
    if not raw:
        return EPOCH

    try:
        parsed = datetime.fromisoformat(raw.replace("Z", "+00:00"))
    except (TypeError, ValueError):
        return EPOCH

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def sort_by_created(tasks: List[Task], order: Optional[str] = None) -> List[Task]:
    """Сортировка по createdAt: новые первыми, при order="oldest" старые первыми"""
    return sorted(tasks, key=_created_timestamp, reverse=order != SORT_OLDEST)
