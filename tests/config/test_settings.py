"""Settings — verifies env overrides, validation, and the derived retry policy."""

import pytest
from pydantic import ValidationError

from employee_api.config import Settings, get_settings
from employee_api.core.retry import RetryPolicy


def test_defaults(monkeypatch):
    monkeypatch.delenv("EMPLOYEE_API_BASE_URL", raising=False)
    settings = Settings(_env_file=None)
    assert settings.employee_api_base_url == "http://localhost:8112/api/v1/employee"
    assert settings.upstream_timeout_seconds == 10.0
    assert settings.retry_operations == ["list", "get", "create", "delete"]
    assert settings.retry_policy() == RetryPolicy(
        max_attempts=5, initial_delay_ms=5000, multiplier=2.0, max_delay_ms=30_000,
    )


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("EMPLOYEE_API_BASE_URL", "http://mock:9000/api/v1/employee/")
    monkeypatch.setenv("RETRY_MAX_ATTEMPTS", "3")
    monkeypatch.setenv("RETRY_INITIAL_DELAY_MS", "250")
    monkeypatch.setenv("RETRY_OPERATIONS", '["list"]')
    settings = Settings(_env_file=None)
    assert settings.employee_api_base_url == "http://mock:9000/api/v1/employee"
    assert settings.retry_operations == ["list"]
    policy = settings.retry_policy()
    assert policy.max_attempts == 3
    assert policy.initial_delay_ms == 250


def test_unknown_retry_operation_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, retry_operations=["list", "patch"])


def test_timeout_must_be_positive():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, upstream_timeout_seconds=0)


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
