"""
File: tests/unit/test_exceptions.py
Description: 校验错误整理与敏感字段单元测试

Created: 2026-10-18
"""

from app.core.config import Settings
from app.core.exceptions import collect_field_errors
from app.domains.users.schemas import UserCreate


def test_collect_field_errors_strips_location_prefix() -> None:
    errors = [
        {"loc": ("body", "username"), "msg": "too short"},
        {"loc": ("body", "tags", 0), "msg": "not a string"},
        {"loc": ("query", "id"), "msg": "missing"},
        {"loc": ("body",), "msg": "invalid json"},
    ]

    assert collect_field_errors(errors) == [
        {"field": "username", "message": "too short"},
        {"field": "tags.0", "message": "not a string"},
        {"field": "id", "message": "missing"},
        {"field": "body", "message": "invalid json"},
    ]


def test_password_hidden_in_repr() -> None:
    user_in = UserCreate(username="alice", password="S3cretPlain!!")

    assert "S3cretPlain!!" not in repr(user_in)
    assert "S3cretPlain!!" not in str(user_in.model_dump())
    assert user_in.password.get_secret_value() == "S3cretPlain!!"


def test_log_diagnose_disabled_by_default() -> None:
    """异常回溯默认不打印局部变量"""
    assert Settings.model_fields["LOG_DIAGNOSE"].default is False
