"""In-process counters for RPC traffic, one process only."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from threading import Lock
from typing import Dict


@dataclass(slots=True)
class _DurationStats:
    count: int = 0
    total_ms: float = 0.0
    last_ms: float = 0.0
    max_ms: float = 0.0

    def add(self, duration_ms: float) -> None:
        self.count += 1
        self.total_ms += duration_ms
        self.last_ms = duration_ms
        self.max_ms = max(self.max_ms, duration_ms)

    def as_dict(self) -> Dict[str, float]:
        return {
            "count": self.count,
            "last": self.last_ms,
            "avg": self.total_ms / self.count,
            "max": self.max_ms,
        }


class MetricsRecorder:
    """
    Counts requests, transport failures and decode outcomes per action.

    Round-trip times are aggregated per action (count, last, average and
    maximum, in milliseconds). Only requests that got an HTTP response are
    timed.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._requests = 0
        self._transport_failures = 0
        self._durations: Dict[str, _DurationStats] = {}
        self._action_success: Counter[str] = Counter()
        self._action_error: Counter[str] = Counter()

    def incr_request(self) -> None:
        with self._lock:
            self._requests += 1

    def record_duration(self, action: str, duration_ms: float) -> None:
        with self._lock:
            self._durations.setdefault(action, _DurationStats()).add(duration_ms)

    def incr_transport_failure(self) -> None:
        with self._lock:
            self._transport_failures += 1

    def record_action(self, action: str, *, success: bool) -> None:
        outcome = self._action_success if success else self._action_error
        with self._lock:
            outcome[action] += 1

    def snapshot(self) -> Dict[str, object]:
        with self._lock:
            return {
                "requests": self._requests,
                "transport_failures": self._transport_failures,
                "action_success": dict(self._action_success),
                "action_error": dict(self._action_error),
                "request_durations_ms": {
                    action: stats.as_dict() for action, stats in self._durations.items()
                },
            }

    def reset(self) -> None:
        with self._lock:
            self._requests = 0
            self._transport_failures = 0
            self._durations.clear()
            self._action_success.clear()
            self._action_error.clear()


default_metrics = MetricsRecorder()
