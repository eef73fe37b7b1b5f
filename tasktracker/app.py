#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Task Tracker - FastAPI Application
HTTP сервис задач: создание, чтение, обновление и удаление задач
с фильтрацией по статусу и приоритету

Версия: 1.0.0
Дата: 2026-10-18
"""

import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from tasktracker.api import tasks
from tasktracker.config import Settings, get_settings, setup_logging
from tasktracker.core.errors import TaskServiceError
from tasktracker.core.task_store import TaskStore
from tasktracker.models import HealthCheck

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[TaskStore] = None,
) -> FastAPI:
    """
    Фабрика приложения.

    Если store не передан, начальные задачи загружаются из
    settings.TASKS_FILE при запуске приложения.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Управление жизненным циклом приложения"""
        logger.info(f"🚀 Запуск {settings.APP_NAME} v{settings.VERSION}...")

        if app.state.task_store is None:
            app.state.task_store = TaskStore.from_file(settings.TASKS_FILE)

        logger.info(f"📝 Задач в хранилище: {app.state.task_store.count()}")
        logger.info("✅ Сервис готов к работе")

        yield

        logger.info("🛑 Остановка сервиса")

    app = FastAPI(
        title=settings.APP_NAME,
        description="Сервис задач с фильтрацией по статусу и приоритету",
        version=settings.VERSION,
        docs_url=settings.docs_url,
        redoc_url=None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.task_store = store
    app.state.started_at = time.time()

    # ===== MIDDLEWARE =====

    @app.middleware("http")
    async def logging_middleware(request: Request, call_next):
        """Логирование запросов и времени обработки"""
        start_time = time.time()

        response = await call_next(request)

        process_time = time.time() - start_time
        logger.info(
            f"{request.method} {request.url.path} "
            f"- {response.status_code} "
            f"- {process_time:.3f}s"
        )
        response.headers["X-Process-Time"] = f"{process_time:.6f}"
        return response

    # ===== ОБРАБОТЧИКИ ОШИБОК =====

    @app.exception_handler(TaskServiceError)
    async def task_service_error_handler(request: Request, exc: TaskServiceError):
        """Ошибки сервиса задач отдаются как {"error": "..."}"""
        if exc.status_code >= 500:
            logger.error(f"❌ {request.method} {request.url.path}: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Ошибки маршрутизации (404, 405) в том же формате {"error": "..."}"""
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def internal_error_handler(request: Request, exc: Exception):
        """Обработчик непредвиденных ошибок"""
        logger.exception(f"Internal server error: {exc}")
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    # ===== РОУТЫ =====

    app.include_router(tasks.router)

    @app.get("/health", response_model=HealthCheck)
    async def health_check(request: Request):
        """Health check для мониторинга"""
        store = request.app.state.task_store
        return HealthCheck(
            status="healthy",
            service=settings.APP_NAME,
            version=settings.VERSION,
            timestamp=time.time(),
            uptime_seconds=time.time() - request.app.state.started_at,
            tasks_count=store.count() if store is not None else None,
        )

    return app


# ===== ЗАПУСК ПРИЛОЖЕНИЯ =====

def run_server(
    host: str = None,
    port: int = None,
    dev: bool = None,
    reload: bool = None,
):
    """Запуск сервиса задач"""
    settings = get_settings()
    setup_logging(settings)

    host = host or settings.HOST
    port = port or settings.PORT
    dev = dev if dev is not None else settings.DEBUG
    reload = reload if reload is not None else False

    logger.info(f"🌐 Запуск сервиса на http://{host}:{port}")
    logger.info(f"📊 Начальные задачи: {settings.TASKS_FILE}")
    logger.info(f"🔧 Режим отладки: {dev}")

    try:
        uvicorn.run(
            "tasktracker.app:create_app",
            factory=True,
            host=host,
            port=port,
            reload=reload,
            log_level="debug" if dev else "info",
            access_log=dev,
        )
    except KeyboardInterrupt:
        logger.info("👋 Сервис остановлен")


def main():
    import argparse

    settings = get_settings()

    parser = argparse.ArgumentParser(description="Запуск сервиса задач")
    parser.add_argument("--host", default=settings.HOST, help="Host для запуска")
    parser.add_argument("--port", type=int, default=settings.PORT, help="Port для запуска")
    parser.add_argument("--dev", action="store_true", help="Режим разработки")
    parser.add_argument("--reload", action="store_true", help="Автоперезагрузка")

    args = parser.parse_args()

    run_server(
        host=args.host,
        port=args.port,
        dev=args.dev,
        reload=args.reload,
    )


if __name__ == "__main__":
    main()
