"""
In-process error counters.

Counts failure responses per error code. Values live for the lifetime of the
worker process and are exposed through the service's metrics endpoint.
"""

import threading
from collections import Counter
from typing import Dict


class ErrorMetrics:
    def __init__(self):
        self._counts: Counter = Counter()
        self._lock = threading.Lock()

    def record_error(self, code: str) -> None:
        with self._lock:
            self._counts[code] += 1

    def snapshot(self) -> Dict[str, int]:
        with self._lock:
            return dict(self._counts)

    def reset(self) -> None:
        with self._lock:
            self._counts.clear()


error_metrics = ErrorMetrics()


def record_error(code: str) -> None:
    """Record one failure for ``code`` on the process-wide counter."""
    error_metrics.record_error(code)
