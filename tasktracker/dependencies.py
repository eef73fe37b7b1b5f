#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Task Tracker - Dependencies
Провайдеры зависимостей для FastAPI роутов
"""

from fastapi import Request

from tasktracker.core.task_store import TaskStore


def get_task_store(request: Request) -> TaskStore:
    """Хранилище задач, которым владеет приложение"""
    return request.app.state.task_store
