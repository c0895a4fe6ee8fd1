"""Minimal in-process metrics recorder (not suitable for multi-process aggregation)."""

from __future__ import annotations

from collections import Counter
from threading import Lock
from typing import Dict


class MetricsRecorder:
    def __init__(self) -> None:
        self._lock = Lock()
        self._requests = 0
        self._request_durations_ms: Dict[str, float] = {}
        self._endpoint_success: Counter[str] = Counter()
        self._endpoint_error: Counter[str] = Counter()
        self._validation_errors: Counter[str] = Counter()

    def incr_request(self) -> None:
        with self._lock:
            self._requests += 1

    def record_duration(self, endpoint: str, duration_ms: float) -> None:
        with self._lock:
            self._request_durations_ms[endpoint] = duration_ms

    def record_endpoint(self, endpoint: str, *, success: bool) -> None:
        with self._lock:
            if success:
                self._endpoint_success[endpoint] += 1
            else:
                self._endpoint_error[endpoint] += 1

    def incr_validation_error(self, endpoint: str) -> None:
        with self._lock:
            self._validation_errors[endpoint] += 1

    def snapshot(self) -> Dict[str, object]:
        with self._lock:
            return {
                "requests": self._requests,
                "endpoint_success": dict(self._endpoint_success),
                "endpoint_error": dict(self._endpoint_error),
                "validation_errors": dict(self._validation_errors),
                "recent_request_durations_ms": dict(self._request_durations_ms),
            }

    def reset(self) -> None:
        with self._lock:
            self._requests = 0
            self._request_durations_ms.clear()
            self._endpoint_success.clear()
            self._endpoint_error.clear()
            self._validation_errors.clear()


default_metrics = MetricsRecorder()
