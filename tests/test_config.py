# tests/test_config.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from tasktracker.config import Settings, setup_logging


def test_defaults() -> None:
    settings = Settings()
    assert settings.PORT == 3000
    assert settings.TASKS_FILE == Path("data/task.json")
    assert settings.docs_url == "/docs"


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("TASKS_FILE", "/tmp/other.json")

    settings = Settings()

    assert settings.PORT == 8080
    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.TASKS_FILE == Path("/tmp/other.json")


def test_production_disables_debug_and_docs() -> None:
    settings = Settings(ENVIRONMENT="Production", DEBUG=True)
    assert settings.ENVIRONMENT == "production"
    assert settings.DEBUG is False
    assert settings.docs_url is None


@pytest.mark.parametrize("kwargs", [{"PORT": 0}, {"LOG_LEVEL": "LOUD"}, {"ENVIRONMENT": "moon"}])
def test_invalid_values_rejected(kwargs: dict) -> None:
    with pytest.raises(ValidationError):
        Settings(**kwargs)


def test_setup_logging_writes_file(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "tasktracker.log"
    setup_logging(Settings(LOG_FILE=log_file, LOG_LEVEL="INFO"))

    root = logging.getLogger()
    try:
        logging.getLogger("tasktracker.test").info("hello")
        for handler in root.handlers:
            handler.flush()

        assert "hello" in log_file.read_text(encoding="utf-8")
    finally:
        for handler in list(root.handlers):
            if isinstance(handler, logging.FileHandler):
                root.removeHandler(handler)
                handler.close()
