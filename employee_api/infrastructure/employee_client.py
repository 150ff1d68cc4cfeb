"""Upstream Employee Client — httpx wrapper around the Mock employee API with retry and error mapping.

Invariants:
    - One upstream HTTP call per operation attempt; envelope unwrapped before returning
    - 404 → EmployeeNotFoundError, 429 → RateLimitedError, other 4xx/5xx → UpstreamHTTPError
    - Timeout → UpstreamTimeoutError, other transport failure → UpstreamUnavailableError
    - A 2xx body that is not a valid envelope → UpstreamResponseError
    - Rate-limit retry applied only to operations listed in retry_operations
    - The httpx.AsyncClient is injected; main.py owns its lifecycle
    - Requests go to base_url + path with no trailing slash: list, create and
      delete hit the base URL itself
    - Upstream statuses outside 4xx/5xx (e.g. an unfollowed 3xx) → UpstreamResponseError
"""

import asyncio
import logging
from collections.abc import Iterable
from typing import Any, TypeVar
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from employee_api.config import UPSTREAM_OPERATIONS, Settings
from employee_api.core.errors import (
    EmployeeNotFoundError,
    ErrorContext,
    RateLimitedError,
    UpstreamHTTPError,
    UpstreamResponseError,
    UpstreamTimeoutError,
    UpstreamUnavailableError,
)
from employee_api.core.retry import RetryPolicy, Sleep, with_rate_limit_retry
from employee_api.schemas.employee import DeleteEmployeeInput, Employee, EmployeeInput
from employee_api.schemas.envelope import Envelope

logger = logging.getLogger(__name__)

T = TypeVar("T")


class EmployeeClient:
    """Calls the upstream employee store and unwraps its envelopes."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        retry_policy: RetryPolicy | None = None,
        retry_operations: Iterable[str] = UPSTREAM_OPERATIONS,
        sleep: Sleep = asyncio.sleep,
    ):
        self.http_client = http_client
        self.base_url = str(http_client.base_url).rstrip("/")
        self.retry_policy = retry_policy or RetryPolicy()
        self.retry_operations = frozenset(retry_operations)
        self._sleep = sleep

    async def list_employees(self) -> list[Employee]:
        logger.debug("Fetching all employees from upstream")
        envelope = await self._call(
            "list", "GET", "", Envelope[list[Employee]],
        )
        if envelope.data is None:
            logger.info("Received empty response from upstream")
            return []
        logger.info(f"Successfully fetched {len(envelope.data)} employees")
        return envelope.data

    async def get_employee(self, employee_id: str) -> Employee | None:
        logger.debug(
            f"Fetching employee by id: {employee_id}",
            extra={"employee_id": employee_id},
        )
        envelope = await self._call(
            "get", "GET", f"/{quote(employee_id, safe='')}",
            Envelope[Employee], employee_id=employee_id,
        )
        if envelope.data is not None:
            logger.info(f"Successfully fetched employee with id: {envelope.data.id}")
        return envelope.data

    async def create_employee(self, employee_input: EmployeeInput) -> Employee | None:
        logger.debug(f"Creating employee with name: {employee_input.name}")
        envelope = await self._call(
            "create", "POST", "", Envelope[Employee],
            json=employee_input.model_dump(),
        )
        if envelope.data is not None:
            logger.info(f"Successfully created employee with id: {envelope.data.id}")
        return envelope.data

    async def delete_employee_by_name(self, name: str) -> bool:
        logger.debug(f"Deleting employee by name: {name}")
        envelope = await self._call(
            "delete", "DELETE", "", Envelope[bool],
            json=DeleteEmployeeInput(name=name).model_dump(),
        )
        return bool(envelope.data)

    async def aclose(self) -> None:
        await self.http_client.aclose()

    async def _call(
        self,
        operation: str,
        method: str,
        path: str,
        envelope_type: type[Envelope[T]],
        json: dict[str, Any] | None = None,
        employee_id: str | None = None,
    ) -> Envelope[T]:
        """Send one request (with retry when enabled) and parse the envelope."""
        send = self._send
        if operation in self.retry_operations:
            send = with_rate_limit_retry(
                send, self.retry_policy, self._sleep, name=operation,
            )
        response = await send(operation, method, path, json, employee_id)
        return self._parse(response, envelope_type, operation)

    async def _send(
        self,
        operation: str,
        method: str,
        path: str,
        json: dict[str, Any] | None,
        employee_id: str | None,
    ) -> httpx.Response:
        context = ErrorContext(operation=operation, employee_id=employee_id)
        try:
            response = await self.http_client.request(
                method, self.base_url + path, json=json,
            )
        except httpx.TimeoutException as e:
            raise UpstreamTimeoutError(
                str(e) or type(e).__name__, context=context,
            ) from e
        except httpx.TransportError as e:
            raise UpstreamUnavailableError(
                str(e) or type(e).__name__, context=context,
            ) from e

        if response.is_success:
            return response
        if response.status_code == 404:
            raise EmployeeNotFoundError(employee_id, context=context)
        if response.status_code == 429:
            raise RateLimitedError(_error_message(response), context=context)
        if not 400 <= response.status_code < 600:
            raise UpstreamResponseError(
                f"unexpected status {_error_message(response)}", context=context,
            )
        raise UpstreamHTTPError(
            response.status_code, _error_message(response), context=context,
        )

    def _parse(
        self,
        response: httpx.Response,
        envelope_type: type[Envelope[T]],
        operation: str,
    ) -> Envelope[T]:
        try:
            return envelope_type.model_validate_json(response.content)
        except ValidationError as e:
            logger.error(
                f"Upstream returned an invalid envelope: {e.error_count()} error(s)",
                extra={"operation": operation, "status_code": response.status_code},
            )
            raise UpstreamResponseError(
                f"{operation} returned an invalid envelope",
                context=ErrorContext(operation=operation),
            ) from e


def _error_message(response: httpx.Response) -> str:
    """'<status> <reason>' plus the envelope's error string when there is one."""
    summary = f"{response.status_code} {response.reason_phrase}".strip()
    detail = None
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and isinstance(body.get("error"), str):
        detail = body["error"]
    elif response.text:
        detail = response.text[:300]
    return f"{summary}: {detail}" if detail else summary


def build_http_client(settings: Settings) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        base_url=settings.employee_api_base_url,
        timeout=settings.upstream_timeout_seconds,
        headers={"Accept": "application/json"},
    )


def create_employee_client(settings: Settings) -> EmployeeClient:
    """Build a client wired from settings: base URL, timeout, retry policy."""
    return EmployeeClient(
        build_http_client(settings),
        retry_policy=settings.retry_policy(),
        retry_operations=settings.retry_operations,
    )
