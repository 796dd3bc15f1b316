"""Shared utilities for job collectors."""
import asyncio
import logging
import random
from typing import Any

import aiohttp

logger = logging.getLogger(__name__)

# Base of the exponential backoff, in seconds; up to 1s of jitter is added.
BACKOFF_BASE = 2


def _is_retryable(status: int) -> bool:
    """Rate limiting and server errors are worth another attempt."""
    return status == 429 or status >= 500


def _retry_delay(attempt: int) -> float:
    return BACKOFF_BASE ** attempt + random.uniform(0, 1)


async def http_get_json(
    session: aiohttp.ClientSession,
    url: str,
    *,
    retries: int = 3,
    **kwargs,
) -> dict | list | None:
    """
    GET ``url`` and return its parsed JSON body.

    429/5xx responses, timeouts and connection errors are retried with
    exponential backoff. Any other non-200 status, or running out of
    attempts, gives None; collectors treat that as "no postings".
    """
    failure = None
    for attempt in range(1, retries + 1):
        try:
            async with session.get(url, **kwargs) as resp:
                if resp.status == 200:
                    return await resp.json()
                if not _is_retryable(resp.status):
                    logger.debug("GET %s -> HTTP %d, not retrying", url, resp.status)
                    return None
                failure = f"HTTP {resp.status}"
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            failure = str(e) or type(e).__name__

        if attempt < retries:
            delay = _retry_delay(attempt - 1)
            logger.warning(
                "GET %s failed (%s), attempt %d/%d, retrying in %.1fs",
                url, failure, attempt, retries, delay,
            )
            await asyncio.sleep(delay)

    logger.error("GET %s gave up after %d attempts: %s", url, retries, failure)
    return None


def first_present(data: dict, *keys: str, default: Any = None) -> Any:
    """
    Return the first value in ``data`` under any of ``keys`` that is not None.

    Job boards disagree on field names (``company_name`` vs ``company``,
    ``tags`` vs ``job_tags``), so normalizers probe several in order.

    Args:
        data: Raw payload record
        keys: Candidate field names, most preferred first
        default: Value returned when no key holds a value

    Returns:
        The first non-None value, or ``default``
    """
    for key in keys:
        value = data.get(key)
        if value is not None:
            return value
    return default
