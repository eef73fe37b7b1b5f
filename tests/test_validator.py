# tests/test_validator.py

from __future__ import annotations

import pytest

from tasktracker.core.validator import ValidationResult, validate_task

VALID = {"title": "A", "description": "B", "completed": False}


def test_valid_payload_is_accepted() -> None:
    result = validate_task(dict(VALID))
    assert result == ValidationResult(valid=True, message=None)


@pytest.mark.parametrize("priority", ["low", "medium", "high"])
def test_each_priority_is_accepted(priority: str) -> None:
    assert validate_task({**VALID, "priority": priority}).valid


@pytest.mark.parametrize(
    "payload, message",
    [
        ({}, "title is required and must be a non-empty string"),
        ({**VALID, "title": "   "}, "title is required and must be a non-empty string"),
        ({**VALID, "title": 42}, "title is required and must be a non-empty string"),
        ({**VALID, "description": ""}, "description is required and must be a non-empty string"),
        ({**VALID, "description": None}, "description is required and must be a non-empty string"),
        ({**VALID, "completed": "true"}, "completed is required and must be a boolean"),
        ({**VALID, "completed": 1}, "completed is required and must be a boolean"),
        ({"title": "A", "description": "B"}, "completed is required and must be a boolean"),
        ({**VALID, "priority": "HIGH"}, "priority must be one of: low, medium, high"),
        ({**VALID, "priority": "urgent"}, "priority must be one of: low, medium, high"),
        ({**VALID, "priority": None}, "priority must be one of: low, medium, high"),
    ],
)
def test_strict_mode_rejections(payload: dict, message: str) -> None:
    result = validate_task(payload)
    assert not result.valid
    assert result.message == message


def test_first_failure_wins() -> None:
    result = validate_task({"title": "", "description": "", "completed": "no", "priority": "x"})
    assert result.message == "title is required and must be a non-empty string"

    result = validate_task({"title": "ok", "description": "", "completed": "no", "priority": "x"})
    assert result.message == "description is required and must be a non-empty string"


@pytest.mark.parametrize("payload", [None, [], "text", 5])
def test_non_object_payload_is_treated_as_empty(payload) -> None:
    result = validate_task(payload)
    assert result.message == "title is required and must be a non-empty string"


def test_partial_mode_only_checks_present_fields() -> None:
    assert validate_task({}, require_all_fields=False).valid
    assert validate_task({"completed": True}, require_all_fields=False).valid

    result = validate_task({"title": " "}, require_all_fields=False)
    assert result.message == "title must be a non-empty string"

    result = validate_task({"description": 3}, require_all_fields=False)
    assert result.message == "description must be a non-empty string"

    result = validate_task({"completed": "false"}, require_all_fields=False)
    assert result.message == "completed must be a boolean"

    result = validate_task({"priority": "Low"}, require_all_fields=False)
    assert result.message == "priority must be one of: low, medium, high"
