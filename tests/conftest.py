"""Root conftest — scripted fake upstream, recorded sleeps, and the API test client.

Invariants:
    - No test reaches a real upstream: EmployeeClient runs on httpx.MockTransport
    - No test waits on back-off: sleep is replaced by a recorder
    - app.dependency_overrides cleared after every API test
"""

import os

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("EMPLOYEE_API_BASE_URL", "http://upstream.test/api/v1/employee")
os.environ.setdefault("LOG_FORMAT", "text")

from employee_api.api.dependencies import get_employee_client  # noqa: E402
from employee_api.core.retry import RetryPolicy  # noqa: E402
from employee_api.infrastructure.employee_client import EmployeeClient  # noqa: E402
from employee_api.main import app  # noqa: E402
from tests.upstream_fakes import UPSTREAM_URL, FakeUpstream, employee_json  # noqa: E402


@pytest.fixture
def coleman_employees():
    return [
        employee_json("e1", "Coleman Feest", 75000),
        employee_json("e2", "Mel Howell", 85000),
        employee_json("e3", "John Coleman", 95000),
    ]


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def sleeps():
    return []


@pytest.fixture
def fake_sleep(sleeps):
    async def _sleep(seconds: float) -> None:
        sleeps.append(seconds)
    return _sleep


@pytest.fixture
async def employee_client(upstream, fake_sleep):
    http_client = httpx.AsyncClient(
        transport=httpx.MockTransport(upstream.handler), base_url=UPSTREAM_URL,
    )
    client = EmployeeClient(http_client, RetryPolicy(), sleep=fake_sleep)
    yield client
    await client.aclose()


@pytest.fixture
async def client(employee_client):
    """FastAPI test client with the upstream client overridden."""
    app.dependency_overrides[get_employee_client] = lambda: employee_client

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
