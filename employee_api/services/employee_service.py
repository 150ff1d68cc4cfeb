"""Employee Service — composes the upstream client with the in-memory queries.

Invariants:
    - Every aggregation runs over the full list fetched in the same call
    - delete_employee resolves the name by id first; a failed lookup fails the delete
    - delete_employee returns None (never raises) when upstream reports nothing deleted
"""

import logging

from employee_api.core.employee_queries import (
    highest_salary,
    search_by_name,
    top_earner_names,
)
from employee_api.infrastructure.employee_client import EmployeeClient
from employee_api.schemas.employee import Employee, EmployeeInput

logger = logging.getLogger(__name__)


class EmployeeService:
    """Employee operations exposed by the HTTP surface."""

    def __init__(self, client: EmployeeClient):
        self.client = client

    async def list_employees(self) -> list[Employee]:
        return await self.client.list_employees()

    async def search_employees(self, query: str) -> list[Employee]:
        logger.debug(f"Searching employees by name containing: {query}")
        matches = search_by_name(await self.client.list_employees(), query)
        logger.info(f"Found {len(matches)} employees matching search string: {query}")
        return matches

    async def get_employee(self, employee_id: str) -> Employee | None:
        return await self.client.get_employee(employee_id)

    async def highest_salary(self) -> int:
        logger.debug("Finding highest salary among all employees")
        salary = highest_salary(await self.client.list_employees())
        logger.info(f"Highest salary found: {salary}")
        return salary

    async def top_earner_names(self) -> list[str]:
        logger.debug("Finding top 10 highest earning employee names")
        names = top_earner_names(await self.client.list_employees())
        logger.info(f"Found {len(names)} top earning employees")
        return names

    async def create_employee(self, employee_input: EmployeeInput) -> Employee | None:
        return await self.client.create_employee(employee_input)

    async def delete_employee(self, employee_id: str) -> str | None:
        """Delete by id. Returns the deleted employee's name, or None."""
        logger.debug(
            f"Deleting employee with id: {employee_id}",
            extra={"employee_id": employee_id},
        )
        employee = await self.client.get_employee(employee_id)
        if employee is None or employee.name is None:
            logger.warning(f"No deletable employee for id: {employee_id}")
            return None

        if await self.client.delete_employee_by_name(employee.name):
            logger.info(f"Successfully deleted employee: {employee.name}")
            return employee.name

        logger.warning(f"Failed to delete employee: {employee.name}")
        return None
