"""App lifecycle — health probe and lifespan-owned upstream client."""

from employee_api import __version__
from employee_api.infrastructure.employee_client import EmployeeClient
from employee_api.main import app, lifespan


async def test_health(client, upstream):
    res = await client.get("/api/v1/health/")

    assert res.status_code == 200
    assert res.json() == {
        "status": "healthy", "service": "employee-api", "version": __version__,
    }
    assert upstream.requests == []


async def test_lifespan_creates_and_closes_upstream_client():
    async with lifespan(app):
        employee_client = app.state.employee_client
        assert isinstance(employee_client, EmployeeClient)
        assert str(employee_client.http_client.base_url).startswith(
            "http://upstream.test/api/v1/employee",
        )

    assert employee_client.http_client.is_closed
