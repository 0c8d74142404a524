"""
Caller-side retry with exponential backoff.

Endpoints never retry on their own. A caller that wants retries wraps the
endpoint call in ``with_retry``, which re-issues it only while the raised
``CallError`` is marked retryable (started, rate limited, server error) and
honours ``Retry-After`` on rate limits. Every other error, including
transport errors, propagates on the first attempt.

    transfer = await with_retry(get_transfer, client, transfer_id)
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional, TypeVar

from moov.engine.errors import CallError, RateLimitError

logger = logging.getLogger("moov.retry")

T = TypeVar("T")

MAX_RETRIES = 5
BASE_DELAY = 1.0
MAX_DELAY = 30.0


async def with_retry(
    func: Callable[..., Awaitable[T]],
    *args: Any,
    max_retries: int = MAX_RETRIES,
    base_delay: float = BASE_DELAY,
    **kwargs: Any,
) -> T:
    """
    Await ``func(*args, **kwargs)``, retrying retryable call errors.

    Args:
        func: Async endpoint function.
        max_retries: Maximum number of retry attempts after the first call.
        base_delay: First backoff delay in seconds; doubles per attempt.

    Returns:
        The result of the first successful attempt.

    Raises:
        CallError: A non-retryable error, or the last error once retries
            are exhausted.
    """
    delay = base_delay
    last_error: Optional[CallError] = None

    for attempt in range(max_retries + 1):
        try:
            return await func(*args, **kwargs)
        except CallError as e:
            last_error = e
            if not e.retryable:
                raise

            if attempt >= max_retries:
                logger.error("Exhausted %d retries for %s: %s", max_retries, _name(func), e)
                raise

            sleep_for = min(delay, MAX_DELAY)
            if isinstance(e, RateLimitError) and e.retry_after is not None:
                sleep_for = min(e.retry_after, MAX_DELAY)

            logger.warning(
                "Retryable %s on attempt %d/%d of %s: %s; sleeping %.1fs",
                e.status.label,
                attempt + 1,
                max_retries + 1,
                _name(func),
                e,
                sleep_for,
            )
            await asyncio.sleep(sleep_for)
            delay = min(delay * 2, MAX_DELAY)

    raise last_error or ValueError(f"max_retries must be >= 0, got {max_retries}")


def _name(func: Callable[..., Any]) -> str:
    return getattr(func, "__name__", repr(func))
