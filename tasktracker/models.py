#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Task Tracker - Models
Pydantic модели задач и ответов API

Версия: 1.0.0
Дата: 2026-10-18
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Priority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def values(cls) -> list:
        return [p.value for p in cls]


DEFAULT_PRIORITY = Priority.MEDIUM


class Task(BaseModel):
    """Задача трекера в том виде, в котором она хранится и отдается клиенту"""

    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    id: int
    title: str
    description: str
    completed: bool
    priority: Priority = DEFAULT_PRIORITY
    created_at: str = Field(..., alias="createdAt")  # ISO-8601 UTC


class ErrorResponse(BaseModel):
    error: str


class MessageResponse(BaseModel):
    message: str


class HealthCheck(BaseModel):
    status: str
    service: str
    version: str
    timestamp: float
    uptime_seconds: float
    tasks_count: Optional[int] = None
