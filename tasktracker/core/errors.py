#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Task Tracker - Errors
Исключения сервиса задач с HTTP статусами
"""

TASK_NOT_FOUND = "Task not found"
INVALID_PRIORITY_LEVEL = "Invalid priority level. Must be one of: low, medium, high"


class TaskServiceError(Exception):
    """Базовое исключение сервиса задач"""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(TaskServiceError):
    """Ошибка валидации тела запроса"""

    status_code = 400


class NotFoundError(TaskServiceError):
    """Задача с указанным id не найдена"""

    status_code = 404

    def __init__(self, message: str = TASK_NOT_FOUND):
        super().__init__(message)


class InvalidPriorityError(TaskServiceError):
    """Неизвестный уровень приоритета в пути запроса"""

    status_code = 400

    def __init__(self, message: str = INVALID_PRIORITY_LEVEL):
        super().__init__(message)
