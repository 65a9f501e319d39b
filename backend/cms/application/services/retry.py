"""Retry helper for flaky remote calls. Not wired into ApiClient."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

from cms.config import get_settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def retry_request(
    request_fn: Callable[[], Awaitable[T]],
    max_attempts: int | None = None,
    delay: float | None = None,
) -> T:
    """Call ``request_fn`` until it succeeds, waiting ``delay * attempt`` seconds between tries.

    ``max_attempts`` and ``delay`` default to ``retry_attempts`` / ``retry_delay``
    from Settings. The last error is re-raised once the attempts are exhausted.
    """
    settings = get_settings()
    max_attempts = settings.retry_attempts if max_attempts is None else max_attempts
    delay = settings.retry_delay if delay is None else delay

    for attempt in range(1, max_attempts + 1):
        try:
            return await request_fn()
        except Exception as exc:
            if attempt >= max_attempts:
                raise
            logger.warning("Attempt %d/%d failed: %s, retrying", attempt, max_attempts, exc)
            await asyncio.sleep(delay * attempt)
    raise ValueError("max_attempts must be at least 1")
