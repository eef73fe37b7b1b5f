from fastapi import APIRouter, Depends, Query, Request
from typing import Any, List, Optional
import json
import logging
import re

from ..core.errors import NotFoundError, ValidationError
from ..core.query import filter_by_completed, filter_by_priority, parse_priority_level, sort_by_created
from ..core.task_store import TaskStore
from ..core.validator import validate_task
from ..dependencies import get_task_store
from ..models import ErrorResponse, MessageResponse, Task

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tasks", tags=["tasks"])

NOT_FOUND_RESPONSES = {404: {"model": ErrorResponse}}
BAD_REQUEST_RESPONSES = {400: {"model": ErrorResponse}}

TASK_ID_PATTERN = re.compile(r"\s*([+-]?[0-9]+)")


async def _read_payload(request: Request) -> Any:
    """Тело запроса как JSON; пустое или битое тело считается пустым объектом"""
    body = await request.body()
    if not body:
        return {}
    try:
        return json.loads(body)
    except (ValueError, UnicodeDecodeError):
        logger.debug("Тело запроса не является JSON")
        return {}


def _parse_task_id(raw_id: str) -> int:
    """Id из пути: ведущие ASCII цифры со знаком, остаток строки игнорируется ("3abc" -> 3)"""
    match = TASK_ID_PATTERN.match(raw_id)
    if match is None:
        raise NotFoundError()
    return int(match.group(1))


def _require_valid(payload: Any) -> None:
    validation = validate_task(payload, require_all_fields=True)
    if not validation.valid:
        raise ValidationError(validation.message)


@router.get("", response_model=List[Task])
async def get_all_tasks(
    store: TaskStore = Depends(get_task_store),
    completed: Optional[str] = Query(None),
    sort: Optional[str] = Query(None),
):
    """
    Получить список задач.

    completed=true|false фильтрует по статусу, sort=oldest меняет
    порядок на "старые первыми" (по умолчанию новые первыми).
    """
    tasks = filter_by_completed(store.list(), completed)
    return sort_by_created(tasks, sort)


@router.get(
    "/priority/{level}",
    response_model=List[Task],
    responses=BAD_REQUEST_RESPONSES,
)
async def get_tasks_by_priority(
    level: str,
    store: TaskStore = Depends(get_task_store),
):
    """Получить задачи с указанным приоритетом (без учета регистра)"""
    level = parse_priority_level(level)
    return filter_by_priority(store.list(), level)


@router.get("/{task_id}", response_model=Task, responses=NOT_FOUND_RESPONSES)
async def get_task(
    task_id: str,
    store: TaskStore = Depends(get_task_store),
):
    task = store.get(_parse_task_id(task_id))
    if task is None:
        raise NotFoundError()
    return task


@router.post(
    "",
    response_model=Task,
    status_code=201,
    responses=BAD_REQUEST_RESPONSES,
)
async def create_task(
    request: Request,
    store: TaskStore = Depends(get_task_store),
):
    """Создать задачу; priority по умолчанию medium"""
    payload = await _read_payload(request)
    _require_valid(payload)
    return store.create(payload)


@router.put(
    "/{task_id}",
    response_model=Task,
    responses={**NOT_FOUND_RESPONSES, **BAD_REQUEST_RESPONSES},
)
async def update_task(
    task_id: str,
    request: Request,
    store: TaskStore = Depends(get_task_store),
):
    """
    Полностью обновить задачу.

    Сначала проверяется существование задачи (404), затем тело запроса (400).
    """
    payload = await _read_payload(request)
    task_key = _parse_task_id(task_id)

    if store.get(task_key) is None:
        raise NotFoundError()

    _require_valid(payload)

    task = store.update(task_key, payload)
    if task is None:
        # Задачу удалили между проверкой и обновлением
        raise NotFoundError()
    return task


@router.delete("/{task_id}", response_model=MessageResponse, responses=NOT_FOUND_RESPONSES)
async def delete_task(
    task_id: str,
    store: TaskStore = Depends(get_task_store),
):
    if not store.delete(_parse_task_id(task_id)):
        raise NotFoundError()
    return MessageResponse(message="Task deleted successfully")
