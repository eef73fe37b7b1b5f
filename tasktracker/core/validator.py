#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Task Tracker - Validator
Проверка тела запроса на создание и обновление задачи.

Правила проверяются по порядку, возвращается первая ошибка:
title -> description -> completed -> priority.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from tasktracker.models import Priority

_MISSING = object()


@dataclass(frozen=True)
class ValidationResult:
    """Результат валидации: успех или конкретная причина отказа"""

    valid: bool
    message: Optional[str] = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(valid=True)

    @classmethod
    def fail(cls, message: str) -> "ValidationResult":
        return cls(valid=False, message=message)


def _is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and len(value.strip()) > 0


def _is_boolean(value: Any) -> bool:
    # 1/0 и строки "true"/"false" не считаются булевыми
    return isinstance(value, bool)


def _validate_priority(payload: Dict[str, Any]) -> Optional[str]:
    priority = payload.get("priority", _MISSING)
    if priority is _MISSING:
        return None
    if not isinstance(priority, str) or priority not in Priority.values():
        return "priority must be one of: low, medium, high"
    return None


def _validate_strict(payload: Dict[str, Any]) -> Optional[str]:
    if not _is_non_empty_string(payload.get("title")):
        return "title is required and must be a non-empty string"
    if not _is_non_empty_string(payload.get("description")):
        return "description is required and must be a non-empty string"
    if not _is_boolean(payload.get("completed")):
        return "completed is required and must be a boolean"
    return None


def _validate_partial(payload: Dict[str, Any]) -> Optional[str]:
    if "title" in payload and not _is_non_empty_string(payload["title"]):
        return "title must be a non-empty string"
    if "description" in payload and not _is_non_empty_string(payload["description"]):
        return "description must be a non-empty string"
    if "completed" in payload and not _is_boolean(payload["completed"]):
        return "completed must be a boolean"
    return None


def validate_task(payload: Any, require_all_fields: bool = True) -> ValidationResult:
    """
    Проверить тело запроса задачи.

    require_all_fields=True - строгий режим (создание и обновление),
    False - частичная проверка только переданных полей.
    Значение, не являющееся JSON объектом, проверяется как пустой объект.
    """
    if not isinstance(payload, dict):
        payload = {}

    if require_all_fields:
        message = _validate_strict(payload)
    else:
        message = _validate_partial(payload)

    if message is None:
        message = _validate_priority(payload)

    if message is not None:
        return ValidationResult.fail(message)
    return ValidationResult.ok()
