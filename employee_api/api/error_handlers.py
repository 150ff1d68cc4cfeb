"""Error Handlers — global exception handlers for the Employee API.

Invariants:
    - Every error response body is an envelope: {"status": "error", "error": str}
    - EmployeeApiError → its own http_status (404, 429, upstream status, 502-504)
    - RequestValidationError → 400 with the failing fields in the message
    - Exception (catch-all) → 500 with the exception's message

Design Decisions:
    - Three-layer handler: domain (EmployeeApiError), validation (Pydantic), catch-all
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from employee_api.core.errors import EmployeeApiError, ErrorSeverity
from employee_api.schemas.envelope import Envelope

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_employee_api_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_employee_api_error_handler(app: FastAPI) -> None:

    @app.exception_handler(EmployeeApiError)
    async def employee_api_error_handler(request: Request, exc: EmployeeApiError):
        """Handle all domain/upstream errors."""
        level = (
            logging.WARNING if exc.severity in (ErrorSeverity.INFO, ErrorSeverity.WARNING)
            else logging.ERROR
        )
        logger.log(
            level,
            f"{type(exc).__name__}: {exc.message}",
            extra={
                "error_code": exc.code,
                "status_code": exc.http_status,
                "path": request.url.path,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=Envelope.failure(_validation_message(exc)).to_body(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: 500 with the exception message."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=Envelope.failure(str(exc) or type(exc).__name__).to_body(),
        )


def _validation_message(exc: RequestValidationError) -> str:
    """'Invalid request data: body.name: Field required; ...'"""
    fields = "; ".join(
        f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}"
        for e in exc.errors()
    )
    return f"Invalid request data: {fields}" if fields else "Invalid request data"
