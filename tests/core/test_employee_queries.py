"""Employee Queries — verifies search, highest salary, and top earners.

Tests:
    - Search is case-insensitive substring, keeps source order, skips null names
    - Highest salary ignores nulls, 0 on empty/all-null
    - Top earners: <= 10, salary descending, stable ties, skips incomplete records
"""

from employee_api.core.employee_queries import (
    highest_salary,
    search_by_name,
    top_earner_names,
)
from employee_api.schemas.employee import Employee


def _emp(employee_id: str, name: str | None, salary: int | None) -> Employee:
    return Employee(id=employee_id, name=name, salary=salary)


COLEMANS = [
    _emp("e1", "Coleman Feest", 75000),
    _emp("e2", "Mel Howell", 85000),
    _emp("e3", "John Coleman", 95000),
]


# -- search_by_name ------------------------------------------------------------

def test_search_matches_case_insensitively_in_source_order():
    result = search_by_name(COLEMANS, "coleman")
    assert [e.name for e in result] == ["Coleman Feest", "John Coleman"]


def test_search_uppercase_query():
    assert [e.id for e in search_by_name(COLEMANS, "HOWELL")] == ["e2"]


def test_search_no_match_returns_empty():
    assert search_by_name(COLEMANS, "nobody") == []


def test_search_empty_query_matches_all_named():
    employees = COLEMANS + [_emp("e4", None, 10)]
    assert [e.id for e in search_by_name(employees, "")] == ["e1", "e2", "e3"]


def test_search_skips_null_names():
    employees = [_emp("e1", None, 1), _emp("e2", "Coleman", 2)]
    assert [e.id for e in search_by_name(employees, "cole")] == ["e2"]


# -- highest_salary ------------------------------------------------------------

def test_highest_salary_example():
    assert highest_salary(COLEMANS) == 95000


def test_highest_salary_empty_list_is_zero():
    assert highest_salary([]) == 0


def test_highest_salary_all_null_is_zero():
    assert highest_salary([_emp("e1", "A", None), _emp("e2", "B", None)]) == 0


def test_highest_salary_ignores_nulls():
    assert highest_salary([_emp("e1", "A", None), _emp("e2", "B", 10)]) == 10


# -- top_earner_names ----------------------------------------------------------

def test_top_earners_example():
    assert top_earner_names(COLEMANS) == [
        "John Coleman", "Mel Howell", "Coleman Feest",
    ]


def test_top_earners_capped_at_ten():
    employees = [_emp(f"e{i}", f"Emp {i}", i * 1000) for i in range(15)]
    names = top_earner_names(employees)
    assert len(names) == 10
    assert names[0] == "Emp 14"
    assert names[-1] == "Emp 5"


def test_top_earners_ties_keep_source_order():
    employees = [
        _emp("e1", "First", 500),
        _emp("e2", "Top", 900),
        _emp("e3", "Second", 500),
        _emp("e4", "Third", 500),
    ]
    assert top_earner_names(employees) == ["Top", "First", "Second", "Third"]


def test_top_earners_skip_missing_name_or_salary():
    employees = [
        _emp("e1", None, 999_999),
        _emp("e2", "No Salary", None),
        _emp("e3", "Paid", 1),
    ]
    assert top_earner_names(employees) == ["Paid"]


def test_top_earners_custom_limit():
    assert top_earner_names(COLEMANS, limit=1) == ["John Coleman"]


def test_top_earners_empty():
    assert top_earner_names([]) == []
