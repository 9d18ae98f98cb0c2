"""
Retry wrapper for outbound Gemini calls
"""
import asyncio
from typing import Awaitable, Callable, TypeVar
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    stop_after_attempt,
    wait_incrementing,
)

from medstudy.core.exceptions import ValidationError
from medstudy.core.logging import metrics_logger

T = TypeVar('T')

DEFAULT_RETRIES = 2
DEFAULT_BASE_DELAY = 1.5


def build_retrying(
    retries: int = DEFAULT_RETRIES,
    base_delay: float = DEFAULT_BASE_DELAY,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    operation_name: str = "gemini",
) -> AsyncRetrying:
    """Retry policy: `retries` extra attempts, waiting base_delay * attempt between them.

    The wait grows linearly (1.5s, 3.0s, ...), there is no jitter and every
    exception is retried. The last failure is re-raised unchanged.
    """
    if retries < 0:
        raise ValidationError("retries must be >= 0", {"retries": retries})

    def _log_retry(retry_state: RetryCallState) -> None:
        metrics_logger.log_retry(
            operation_name,
            attempt=retry_state.attempt_number,
            delay=retry_state.next_action.sleep if retry_state.next_action else 0.0,
            error=str(retry_state.outcome.exception()) if retry_state.outcome else "",
        )

    return AsyncRetrying(
        stop=stop_after_attempt(retries + 1),
        wait=wait_incrementing(start=base_delay, increment=base_delay),
        retry=retry_if_exception_type(Exception),
        before_sleep=_log_retry,
        reraise=True,
        sleep=sleep,
    )


async def with_retry(
    operation: Callable[[], Awaitable[T]],
    retries: int = DEFAULT_RETRIES,
    *,
    base_delay: float = DEFAULT_BASE_DELAY,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    operation_name: str = "gemini",
) -> T:
    """Run a zero-argument coroutine function under the retry policy."""
    retrying = build_retrying(
        retries=retries,
        base_delay=base_delay,
        sleep=sleep,
        operation_name=operation_name,
    )
    async for attempt in retrying:
        with attempt:
            result = await operation()
    return result
