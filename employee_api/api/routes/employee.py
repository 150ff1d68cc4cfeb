"""Employee Routes — thin HTTP surface over EmployeeService.

Invariants:
    - Fixed paths (highestSalary, topTenHighestEarningEmployeeNames) are declared
      before /{employee_id} so they are never read as an id
    - Missing employee (upstream 404, null data, or nothing deleted) → 404 envelope
    - DELETE answers the deleted name as text/plain
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from employee_api.api.dependencies import get_employee_service
from employee_api.core.errors import (
    EmployeeNotFoundError,
    ErrorContext,
    UpstreamResponseError,
)
from employee_api.schemas.employee import Employee, EmployeeInput
from employee_api.services.employee_service import EmployeeService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/employee", tags=["employee"])


@router.get("", response_model=list[Employee])
async def get_all_employees(
    service: EmployeeService = Depends(get_employee_service),
):
    logger.debug("GET /api/v1/employee - get_all_employees")
    return await service.list_employees()


@router.get("/search/{search_string}", response_model=list[Employee])
async def get_employees_by_name_search(
    search_string: str,
    service: EmployeeService = Depends(get_employee_service),
):
    logger.debug(f"GET /api/v1/employee/search/{search_string}")
    return await service.search_employees(search_string)


@router.get("/highestSalary", response_model=int)
async def get_highest_salary_of_employees(
    service: EmployeeService = Depends(get_employee_service),
):
    return await service.highest_salary()


@router.get("/topTenHighestEarningEmployeeNames", response_model=list[str])
async def get_top_ten_highest_earning_employee_names(
    service: EmployeeService = Depends(get_employee_service),
):
    return await service.top_earner_names()


@router.get("/{employee_id}", response_model=Employee)
async def get_employee_by_id(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),
):
    logger.debug(f"GET /api/v1/employee/{employee_id}")
    employee = await service.get_employee(employee_id)
    if employee is None:
        raise EmployeeNotFoundError(employee_id)
    return employee


@router.post("", response_model=Employee)
async def create_employee(
    body: EmployeeInput,
    service: EmployeeService = Depends(get_employee_service),
):
    employee = await service.create_employee(body)
    if employee is None:
        raise UpstreamResponseError(
            "create returned no employee",
            context=ErrorContext(operation="create"),
        )
    return employee


@router.delete("/{employee_id}", response_class=PlainTextResponse)
async def delete_employee_by_id(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),
):
    name = await service.delete_employee(employee_id)
    if name is None:
        raise EmployeeNotFoundError(employee_id)
    return PlainTextResponse(name)
