"""Minimal in-process metrics recorder (not suitable for multi-process aggregation)."""

from __future__ import annotations

from collections import Counter
from threading import Lock
from typing import Dict

MAX_RECENT_DURATIONS = 500


class MetricsRecorder:
    def __init__(self, max_durations: int = MAX_RECENT_DURATIONS) -> None:
        self._max_durations = max_durations
        self._lock = Lock()
        self._requests = 0
        self._request_durations_ms: Dict[str, float] = {}
        self._operation_success: Counter[str] = Counter()
        self._operation_error: Counter[str] = Counter()

    def incr_request(self) -> None:
        with self._lock:
            self._requests += 1

    def record_duration(self, request_id: str, duration_ms: float) -> None:
        with self._lock:
            self._request_durations_ms[request_id] = duration_ms
            # Oldest entries go first; dicts keep insertion order.
            while len(self._request_durations_ms) > self._max_durations:
                del self._request_durations_ms[next(iter(self._request_durations_ms))]

    def record_operation(self, operation: str, *, success: bool) -> None:
        with self._lock:
            if success:
                self._operation_success[operation] += 1
            else:
                self._operation_error[operation] += 1

    def snapshot(self) -> Dict[str, object]:
        with self._lock:
            return {
                "requests": self._requests,
                "operation_success": dict(self._operation_success),
                "operation_error": dict(self._operation_error),
                "recent_request_durations_ms": dict(self._request_durations_ms),
            }

    def reset(self) -> None:
        with self._lock:
            self._requests = 0
            self._request_durations_ms.clear()
            self._operation_success.clear()
            self._operation_error.clear()


default_metrics = MetricsRecorder()
