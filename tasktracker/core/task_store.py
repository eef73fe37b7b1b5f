#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Task Tracker - Task Store
Хранилище задач в памяти процесса с выдачей идентификаторов

Версия: 1.0.0
Дата: 2026-10-18
"""

import json
import logging
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from tasktracker.models import DEFAULT_PRIORITY, Task

logger = logging.getLogger(__name__)


def utc_now_iso() -> str:
    """Текущее время в ISO-8601 UTC с миллисекундами, например 2026-10-18T09:30:00.000Z"""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class TaskStore:
    """
    Упорядоченная коллекция задач в памяти.

    Все операции выполняются под одной блокировкой, поэтому два
    параллельных create никогда не получат одинаковый id.
    Наружу отдаются копии записей.
    """

    def __init__(self, tasks: Optional[Iterable[Task]] = None):
        self._lock = threading.RLock()
        self._tasks: List[Task] = [task.model_copy() for task in (tasks or [])]
        # Максимальный выданный id, чтобы id не переиспользовались после удаления
        self._last_id = max((task.id for task in self._tasks), default=0)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "TaskStore":
        """Создать хранилище с начальными задачами из JSON файла"""
        return cls(load_tasks(path))

    # ===== ЧТЕНИЕ =====

    def list(self) -> List[Task]:
        with self._lock:
            return [task.model_copy() for task in self._tasks]

    def get(self, task_id: int) -> Optional[Task]:
        with self._lock:
            index = self._find_index(task_id)
            if index is None:
                return None
            return self._tasks[index].model_copy()

    def count(self) -> int:
        with self._lock:
            return len(self._tasks)

    # ===== ЗАПИСЬ =====

    def create(self, fields: Dict[str, Any]) -> Task:
        """Добавить задачу, назначив ей id и createdAt"""
        with self._lock:
            current_max = max((task.id for task in self._tasks), default=0)
            new_id = max(current_max, self._last_id) + 1

            task = Task(
                id=new_id,
                title=fields["title"],
                description=fields["description"],
                completed=fields["completed"],
                priority=fields.get("priority") or DEFAULT_PRIORITY,
                created_at=utc_now_iso(),
            )
            self._tasks.append(task)
            self._last_id = new_id

        logger.info(f"📝 Создана задача id={task.id} priority={task.priority}")
        return task.model_copy()

    def update(self, task_id: int, fields: Dict[str, Any]) -> Optional[Task]:
        """Заменить поля задачи; id и createdAt сохраняются"""
        with self._lock:
            index = self._find_index(task_id)
            if index is None:
                return None

            existing = self._tasks[index]
            task = Task(
                id=existing.id,
                title=fields["title"],
                description=fields["description"],
                completed=fields["completed"],
                priority=fields.get("priority") or existing.priority or DEFAULT_PRIORITY,
                created_at=existing.created_at,
            )
            self._tasks[index] = task

        logger.info(f"✏️ Обновлена задача id={task.id}")
        return task.model_copy()

    def delete(self, task_id: int) -> bool:
        with self._lock:
            index = self._find_index(task_id)
            if index is None:
                return False
            del self._tasks[index]

        logger.info(f"🗑️ Удалена задача id={task_id}")
        return True

    def _find_index(self, task_id: int) -> Optional[int]:
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                return index
        return None


# ===== ЗАГРУЗКА НАЧАЛЬНЫХ ДАННЫХ =====

def _load_json(file_path: Path) -> Any:
    with open(file_path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_tasks(path: Union[str, Path]) -> List[Task]:
    """
    Загрузить начальные задачи из JSON файла вида {"tasks": [...]}.

    Отсутствующие priority и createdAt заполняются значениями по умолчанию.
    Любая ошибка чтения дает пустой список, запуск не прерывается.
    Записи, из которых нельзя собрать задачу, пропускаются.
    """
    file_path = Path(path)

    try:
        data = _load_json(file_path)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"❌ Ошибка загрузки начальных задач из {file_path}: {e}")
        return []

    records = data.get("tasks") if isinstance(data, dict) else None
    if not isinstance(records, list):
        logger.error(f"❌ В файле {file_path} нет списка tasks")
        return []

    tasks: List[Task] = []
    seen_ids = set()
    for record in records:
        if not isinstance(record, dict):
            logger.warning(f"⚠️ Пропущена запись задачи: {record!r}")
            continue

        priority = record.get("priority")
        if isinstance(priority, str) and priority:
            priority = priority.lower()

        record = {
            **record,
            "priority": priority or DEFAULT_PRIORITY.value,
            "createdAt": record.get("createdAt") or utc_now_iso(),
        }
        try:
            task = Task.model_validate(record)
        except PydanticValidationError as e:
            logger.warning(f"⚠️ Пропущена некорректная задача id={record.get('id')}: {e.error_count()} ошибок")
            continue

        if task.id in seen_ids:
            logger.warning(f"⚠️ Пропущена задача с повторным id={task.id}")
            continue
        seen_ids.add(task.id)
        tasks.append(task)

    logger.info(f"📊 Загружено задач: {len(tasks)} из {file_path}")
    return tasks
