"""Ядро сервиса: хранилище, валидация и выборки задач"""

from .errors import InvalidPriorityError, NotFoundError, TaskServiceError, ValidationError
from .task_store import TaskStore, load_tasks
from .validator import ValidationResult, validate_task
