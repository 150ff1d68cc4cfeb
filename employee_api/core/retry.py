"""Rate-Limit Retry — bounded exponential back-off around a single upstream call.

Invariants:
    - Only RateLimitedError is retried; every other exception propagates on first raise
    - The wrapped operation is called at most policy.max_attempts times
    - Sleep before retry n (n >= 1) is min(initial * multiplier ** (n - 1), max_delay)
    - On exhaustion the last RateLimitedError propagates unchanged

Design Decisions:
    - Explicit wrapper function; the client picks which operations it wraps
    - sleep is injectable
"""

import asyncio
import functools
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import ParamSpec, TypeVar

from employee_api.core.errors import RateLimitedError

logger = logging.getLogger(__name__)

P = ParamSpec("P")
T = TypeVar("T")

Sleep = Callable[[float], Awaitable[None]]


@dataclass(frozen=True)
class RetryPolicy:
    """Back-off schedule for rate-limited upstream calls."""
    max_attempts: int = 5
    initial_delay_ms: int = 5000
    multiplier: float = 2.0
    max_delay_ms: int = 30_000

    def __post_init__(self):
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")
        if self.initial_delay_ms < 0 or self.max_delay_ms < 0:
            raise ValueError("delays must be >= 0")
        if self.multiplier < 1:
            raise ValueError("multiplier must be >= 1")

    def delay_ms(self, attempt: int) -> int:
        """Delay to wait after failed attempt number `attempt` (1-based)."""
        if attempt < 1:
            raise ValueError("attempt is 1-based")
        delay = self.initial_delay_ms * self.multiplier ** (attempt - 1)
        return int(min(delay, self.max_delay_ms))


def with_rate_limit_retry(
    operation: Callable[P, Awaitable[T]],
    policy: RetryPolicy,
    sleep: Sleep = asyncio.sleep,
    name: str | None = None,
) -> Callable[P, Awaitable[T]]:
    """Return `operation` wrapped with rate-limit retry per `policy`."""
    op_name = name or getattr(operation, "__name__", "upstream_call")

    @functools.wraps(operation)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        attempt = 1
        while True:
            try:
                return await operation(*args, **kwargs)
            except RateLimitedError as e:
                if attempt >= policy.max_attempts:
                    e.context.attempts = attempt
                    logger.error(
                        f"Rate limit persisted after {attempt} attempts",
                        extra={"operation": op_name, "attempt": attempt},
                    )
                    raise
                delay = policy.delay_ms(attempt)
                logger.warning(
                    f"Rate limited, retry after {delay}ms (attempt {attempt})",
                    extra={
                        "operation": op_name,
                        "attempt": attempt,
                        "delay_ms": delay,
                    },
                )
                await sleep(delay / 1000)
                attempt += 1

    return wrapper


def retry_on_rate_limit(
    policy: RetryPolicy, sleep: Sleep = asyncio.sleep,
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[T]]]:
    """Decorator form of with_rate_limit_retry."""
    def decorate(operation: Callable[P, Awaitable[T]]) -> Callable[P, Awaitable[T]]:
        return with_rate_limit_retry(operation, policy, sleep)
    return decorate
