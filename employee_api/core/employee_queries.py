"""Employee Queries — pure aggregations over an in-memory employee list.

Invariants:
    - No I/O: callers pass the full list fetched from upstream
    - Source order is preserved wherever ordering is not the point (search, ties)
    - Employees missing the field an aggregation needs are skipped, never an error
"""

from collections.abc import Iterable, Sequence

from employee_api.schemas.employee import Employee

TOP_EARNERS_LIMIT = 10


def search_by_name(employees: Iterable[Employee], query: str) -> list[Employee]:
    """Case-insensitive substring match on name. Empty query matches every named employee."""
    needle = query.lower()
    return [
        e for e in employees
        if e.name is not None and needle in e.name.lower()
    ]


def highest_salary(employees: Iterable[Employee]) -> int:
    """Maximum non-null salary, 0 when there is none."""
    return max(
        (e.salary for e in employees if e.salary is not None),
        default=0,
    )


def top_earner_names(
    employees: Sequence[Employee], limit: int = TOP_EARNERS_LIMIT,
) -> list[str]:
    """Names of the `limit` highest earners, salary descending."""
    ranked = sorted(
        (e for e in employees if e.name is not None and e.salary is not None),
        key=lambda e: e.salary,
        reverse=True,
    )
    return [e.name for e in ranked[:limit]]
