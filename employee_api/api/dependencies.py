"""FastAPI dependencies — hand the lifespan-owned upstream client to route handlers."""

from fastapi import Depends, Request

from employee_api.infrastructure.employee_client import EmployeeClient
from employee_api.services.employee_service import EmployeeService


def get_employee_client(request: Request) -> EmployeeClient:
    return request.app.state.employee_client


def get_employee_service(
    client: EmployeeClient = Depends(get_employee_client),
) -> EmployeeService:
    return EmployeeService(client)
