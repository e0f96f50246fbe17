"""Async retry helper with exponential backoff."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

T = TypeVar("T")


def backoff_delay(attempt: int, base_delay: float = 1.0) -> float:
    """Delay in seconds after failed attempt ``attempt`` (1-based).

    Doubles on every attempt with no upper bound: 1s, 2s, 4s, ...
    """
    if attempt < 1:
        raise ValueError(f"attempt must be >= 1, got {attempt}")
    return base_delay * (2 ** (attempt - 1))


async def retry_async(
    func: Callable[[], Awaitable[T]],
    *,
    max_attempts: int = 3,
    base_delay: float = 1.0,
    retry_on: tuple[type[BaseException], ...] = (Exception,),
    on_retry: Callable[[int, BaseException, float], None] | None = None,
    sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
) -> T:
    """Await ``func()`` until it succeeds or ``max_attempts`` are used up.

    Args:
        func: Zero-argument coroutine factory, called once per attempt
        max_attempts: Total number of attempts, including the first
        base_delay: Delay after the first failure; doubled after each failure
        retry_on: Exception types that trigger another attempt
        on_retry: Optional callback ``(attempt, error, delay)`` invoked before sleeping
        sleep: Awaitable sleep function (injectable for tests)

    Returns:
        The first successful result

    Raises:
        ValueError: If max_attempts < 1
        Exception: The error from the final attempt once all attempts failed
    """
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")

    attempt = 1
    while True:
        try:
            return await func()
        except retry_on as exc:
            if attempt >= max_attempts:
                raise
            delay = backoff_delay(attempt, base_delay)
            if on_retry is not None:
                on_retry(attempt, exc, delay)
            await sleep(delay)
            attempt += 1
