"""
Timing helpers for awaiting a coroutine and measuring its wall-clock duration.
"""

import time
from dataclasses import dataclass
from typing import Awaitable, Callable, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class TimedResult(Generic[T]):
    result: T
    duration_ms: float


async def measure_time_async(fn: Callable[[], Awaitable[T]]) -> TimedResult[T]:
    """
    Await ``fn()`` and return its result with the elapsed time in milliseconds.

    Exceptions raised by ``fn`` propagate unchanged; no duration is reported.
    """
    start = time.perf_counter()
    result = await fn()
    return TimedResult(result=result, duration_ms=(time.perf_counter() - start) * 1000)


def elapsed_ms(start_time: float) -> int:
    """Whole milliseconds since a ``time.perf_counter()`` reading, never negative."""
    return max(0, int((time.perf_counter() - start_time) * 1000))
