# pagecheck/utils/timing.py
from __future__ import annotations

import asyncio
import functools
import inspect
import time
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional, TypeVar, Union

from pagecheck.core.errors import CheckTimedOut
from pagecheck.utils.logger import get_logger

T = TypeVar("T")

Condition = Callable[[], Union[Any, Awaitable[Any]]]


# ---------------- Monotonic time helpers ----------------

def now_ms() -> int:
    """Monotonic time in milliseconds."""
    return time.monotonic_ns() // 1_000_000


async def async_sleep_ms(ms: int) -> None:
    """Async sleep for `ms` milliseconds."""
    if ms <= 0:
        return
    await asyncio.sleep(ms / 1000.0)


# ---------------- Stopwatch ----------------

@dataclass
class Stopwatch:
    """Simple stopwatch usable as a context manager."""
    start_ms: Optional[int] = None

    def start(self) -> "Stopwatch":
        self.start_ms = now_ms()
        return self

    def elapsed_ms(self) -> int:
        if self.start_ms is None:
            return 0
        return max(0, now_ms() - self.start_ms)

    def __enter__(self) -> "Stopwatch":
        return self.start()

    def __exit__(self, exc_type, exc, tb) -> None:
        return None


# ---------------- poll_until ----------------

async def poll_until(
    condition: Condition,
    timeout_ms: int,
    interval_ms: int = 50,
    description: Optional[str] = None,
) -> Any:
    """
    Call `condition()` until it returns a truthy value without raising, or
    until `timeout_ms` elapses. `condition` may be sync or async and is
    expected to perform fresh reads on every call.

    Returns the condition's truthy result.

    Raises:
        CheckTimedOut carrying the message of the last failed attempt,
        chained to that failure.
    """
    log = get_logger(__name__)
    deadline = now_ms() + max(0, timeout_ms)
    attempts = 0

    while True:
        attempts += 1
        try:
            result = condition()
            if inspect.isawaitable(result):
                result = await result
            if result:
                return result
            last_exc: Exception = AssertionError(
                f"condition returned {result!r}{(' - ' + description) if description else ''}"
            )
        except Exception as exc:
            last_exc = exc

        if now_ms() >= deadline:
            log.debug(f"poll_until gave up after {attempts} attempt(s) / {timeout_ms} ms: {last_exc!r}")
            message = str(last_exc) or f"condition not met within {timeout_ms} ms"
            raise CheckTimedOut(message) from last_exc
        await async_sleep_ms(max(1, interval_ms))


# ---------------- measure decorator ----------------

def measure(label: str = "", level: str = "DEBUG") -> Callable[[Callable[..., T]], Callable[..., T]]:
    """
    Decorator to log the execution time of a function or coroutine function.
    Example:
        @measure("hidden check")
        async def check_hidden_state(self, hidden): ...
    """
    level = level.upper()
    log = get_logger(__name__)
    log_fn = getattr(log, level.lower(), log.debug)

    def _report(name: str, sw: Stopwatch) -> None:
        ms = sw.elapsed_ms()
        human = f"{ms} ms" if ms < 1000 else f"{ms/1000:.3f} s"
        log_fn(f"{name} took {human}")

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        name = label or func.__name__

        if inspect.iscoroutinefunction(func):
            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                with Stopwatch() as sw:
                    try:
                        return await func(*args, **kwargs)
                    finally:
                        _report(name, sw)
            return async_wrapper  # type: ignore[return-value]

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            with Stopwatch() as sw:
                try:
                    return func(*args, **kwargs)
                finally:
                    _report(name, sw)
        return wrapper
    return decorator
