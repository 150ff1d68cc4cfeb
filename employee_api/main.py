"""Employee API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map EmployeeApiError → envelope JSON responses
    - The upstream httpx client is created on startup and closed on shutdown
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from employee_api import __version__
from employee_api.api.error_handlers import register_error_handlers
from employee_api.api.routes import employee, health
from employee_api.config import get_settings
from employee_api.infrastructure.employee_client import create_employee_client
from employee_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.employee_client = create_employee_client(settings)
    logger.info(
        f"Employee API started, upstream {settings.employee_api_base_url}",
    )
    yield
    await app.state.employee_client.aclose()
    logger.info("Employee API shutting down")


app = FastAPI(title="Employee API", version=__version__, lifespan=lifespan)

app.include_router(health.router)
app.include_router(employee.router)

register_error_handlers(app)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("employee_api.main:app", host="127.0.0.1", port=8111)
