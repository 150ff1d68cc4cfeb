"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache): single instance per process
    - employee_api_base_url never ends with "/" (upstream paths are appended)
    - retry_operations only names operations the upstream client exposes

Design Decisions:
    - Defaults point at the local Mock employee API on port 8112
    - Retry is opt-in per upstream operation, all four enabled by default
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from employee_api.core.retry import RetryPolicy

UPSTREAM_OPERATIONS = ("list", "get", "create", "delete")


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Upstream Mock employee API
    employee_api_base_url: str = "http://localhost:8112/api/v1/employee"
    upstream_timeout_seconds: float = Field(10.0, gt=0)

    @field_validator("employee_api_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.strip().rstrip("/")

    # Rate-limit retry
    retry_max_attempts: int = Field(5, ge=1)
    retry_initial_delay_ms: int = Field(5000, ge=0)
    retry_multiplier: float = Field(2.0, ge=1.0)
    retry_max_delay_ms: int = Field(30_000, ge=0)
    retry_operations: list[str] = list(UPSTREAM_OPERATIONS)

    @field_validator("retry_operations")
    @classmethod
    def check_known_operations(cls, v: list[str]) -> list[str]:
        unknown = sorted(set(v) - set(UPSTREAM_OPERATIONS))
        if unknown:
            raise ValueError(f"unknown upstream operations: {', '.join(unknown)}")
        return v

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    def retry_policy(self) -> RetryPolicy:
        return RetryPolicy(
            max_attempts=self.retry_max_attempts,
            initial_delay_ms=self.retry_initial_delay_ms,
            multiplier=self.retry_multiplier,
            max_delay_ms=self.retry_max_delay_ms,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
