"""Bounded retry for units of work that can lose a write race."""

from typing import Awaitable, Callable, TypeVar

import logfire
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from vidtalk.config import ConcurrencySettings
from vidtalk.domain.error import ConcurrencyConflictError, PersistenceError

T = TypeVar("T")


async def run_with_retry(
    operation: str,
    unit: Callable[[], Awaitable[T]],
    settings: ConcurrencySettings,
) -> T:
    """Run ``unit`` and retry it when it raises ConcurrencyConflictError.

    Every attempt must be a complete unit of work (it opens and closes its
    own transaction scope), so a retry starts from fresh reads.

    Args:
        operation: Name used in logs and the final error message
        unit: Zero-argument coroutine factory
        settings: Retry policy

    Returns:
        Whatever ``unit`` returns on its first successful attempt

    Raises:
        PersistenceError: If every attempt hit a conflict
    """
    try:
        async for attempt in AsyncRetrying(
            retry=retry_if_exception_type(ConcurrencyConflictError),
            stop=stop_after_attempt(settings.max_attempts),
            wait=wait_exponential(
                multiplier=settings.backoff_min_seconds,
                min=settings.backoff_min_seconds,
                max=settings.backoff_max_seconds,
            ),
            reraise=True,
        ):
            with attempt:
                attempt_num = attempt.retry_state.attempt_number
                if attempt_num > 1:
                    logfire.warn(
                        "Retrying unit of work after conflict",
                        operation=operation,
                        attempt=attempt_num,
                    )
                return await unit()
    except ConcurrencyConflictError as e:
        logfire.error(
            "Unit of work kept conflicting, giving up",
            operation=operation,
            attempts=settings.max_attempts,
            error=str(e),
        )
        raise PersistenceError(
            f"{operation} could not be completed due to concurrent updates"
        ) from e

    raise PersistenceError(f"{operation} did not run")  # pragma: no cover
