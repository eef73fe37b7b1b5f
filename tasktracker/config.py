#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Task Tracker - Configuration
Настройки сервиса задач из переменных окружения и .env файла

Версия: 1.0.0
Дата: 2026-10-18
"""

import logging
import sys
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Настройки сервиса задач"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ===== ОСНОВНЫЕ НАСТРОЙКИ =====

    APP_NAME: str = Field(
        default="Task Tracker",
        description="Название приложения"
    )

    VERSION: str = Field(
        default="1.0.0",
        description="Версия сервиса"
    )

    ENVIRONMENT: str = Field(
        default="development",
        description="Среда выполнения (development/production/testing/staging)"
    )

    DEBUG: bool = Field(
        default=False,
        description="Режим отладки"
    )

    # ===== СЕТЕВЫЕ НАСТРОЙКИ =====

    HOST: str = Field(
        default="0.0.0.0",
        description="Хост для запуска сервиса"
    )

    PORT: int = Field(
        default=3000,
        description="Порт для запуска сервиса"
    )

    # ===== ДАННЫЕ =====

    TASKS_FILE: Path = Field(
        default=Path("data/task.json"),
        description="JSON файл с начальным списком задач"
    )

    # ===== ЛОГИРОВАНИЕ =====

    LOG_LEVEL: str = Field(
        default="INFO",
        description="Уровень логирования (DEBUG/INFO/WARNING/ERROR/CRITICAL)"
    )

    LOG_FORMAT: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Формат логов"
    )

    LOG_DATE_FORMAT: str = Field(
        default="%Y-%m-%d %H:%M:%S",
        description="Формат даты в логах"
    )

    LOG_FILE: Optional[Path] = Field(
        default=None,
        description="Файл логов (None - только консоль)"
    )

    # ===== ВАЛИДАТОРЫ =====

    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, v):
        """Валидация среды выполнения"""
        allowed_envs = ["development", "production", "testing", "staging"]
        if v.lower() not in allowed_envs:
            raise ValueError(f"ENVIRONMENT must be one of {allowed_envs}")
        return v.lower()

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v):
        """Валидация уровня логирования"""
        allowed_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in allowed_levels:
            raise ValueError(f"LOG_LEVEL must be one of {allowed_levels}")
        return v.upper()

    @field_validator("PORT")
    @classmethod
    def validate_port(cls, v):
        """Валидация порта"""
        if not 1 <= v <= 65535:
            raise ValueError("PORT must be between 1 and 65535")
        return v

    @model_validator(mode="after")
    def validate_production_settings(self):
        """В продакшене отладка всегда выключена"""
        if self.ENVIRONMENT == "production":
            self.DEBUG = False
        return self

    # ===== СВОЙСТВА =====

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    @property
    def docs_url(self) -> Optional[str]:
        return None if self.is_production else "/docs"


@lru_cache()
def get_settings() -> Settings:
    """Получить настройки (кэшируются на весь процесс)"""
    return Settings()


def setup_logging(settings: Settings) -> None:
    """Настройка системы логирования"""
    handlers = [logging.StreamHandler(sys.stdout)]

    if settings.LOG_FILE:
        settings.LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(settings.LOG_FILE, encoding="utf-8"))

    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL),
        format=settings.LOG_FORMAT,
        datefmt=settings.LOG_DATE_FORMAT,
        handlers=handlers,
        force=True,
    )

    # Отключаем избыточные логи
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
