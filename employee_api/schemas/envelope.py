"""Response Envelope — the {data, status, error} wrapper shared with the upstream store.

Invariants:
    - status == success → error is None
    - status == error → data is None
    - to_body() omits null fields
"""

from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel, model_validator

T = TypeVar("T")


class Status(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


class Envelope(BaseModel, Generic[T]):
    """Generic response envelope."""
    data: T | None = None
    status: Status
    error: str | None = None

    @model_validator(mode="after")
    def check_status_consistency(self) -> "Envelope[T]":
        if self.status is Status.SUCCESS and self.error is not None:
            raise ValueError("error must be null when status is success")
        if self.status is Status.ERROR and self.data is not None:
            raise ValueError("data must be null when status is error")
        return self

    @classmethod
    def success(cls, data: T | None) -> "Envelope[T]":
        return cls(data=data, status=Status.SUCCESS)

    @classmethod
    def failure(cls, message: str) -> "Envelope[T]":
        return cls(status=Status.ERROR, error=message)

    def to_body(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
