"""Employee Schemas — Pydantic models for the employee record and its create/delete inputs.

Invariants:
    - Employee is immutable (frozen) and serializes with the upstream field names
      (employee_name, employee_salary, ...)
    - Any Employee field except id may be null in an upstream response; values are
      read as the upstream stores them (no range checks on read)
    - EmployeeInput.name/title: stripped, non-empty; salary and age non-negative
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Employee(BaseModel):
    """Employee record as owned by the upstream store."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str | None = Field(None, alias="employee_name")
    salary: int | None = Field(None, alias="employee_salary")
    age: int | None = Field(None, alias="employee_age")
    title: str | None = Field(None, alias="employee_title")
    email: str | None = Field(None, alias="employee_email")


class EmployeeInput(BaseModel):
    """Employee creation request. Upstream assigns id and email."""
    name: str = Field(min_length=1)
    salary: int = Field(ge=0)
    age: int = Field(ge=0)
    title: str = Field(min_length=1)

    @field_validator("name", "title")
    @classmethod
    def strip_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("cannot be empty or whitespace")
        return v


class DeleteEmployeeInput(BaseModel):
    """Upstream delete body; the upstream deletes by name."""
    name: str
