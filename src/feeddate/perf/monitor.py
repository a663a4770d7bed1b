"""Call-duration tracking for the date operations.

Usage::

    from feeddate.perf.monitor import performance_monitor

    result = performance_monitor.measure("parseRSSDate", lambda: parse(text))
    print(performance_monitor.stats("parseRSSDate"))
    # {'count': 12.0, 'min': 0.01, 'max': 0.09, 'mean': 0.02,
    #  'p50': 0.02, 'p90': 0.05, 'p99': 0.09,
    #  'throughput': 0.2}
"""
from __future__ import annotations

import logging
import math
import threading
import time
from collections import deque
from dataclasses import dataclass
from typing import Callable, TypeVar

from ..config import settings

logger = logging.getLogger(__name__)

T = TypeVar("T")

OPERATIONS = ("parseRSSDate", "formatArticleDate", "filterByTimeWindow", "filterRecentArticles")


def _percentile(sorted_values: list[float], p: float) -> float:
    """Nearest-rank percentile for a pre-sorted list."""
    if not sorted_values:
        return 0.0
    n = len(sorted_values)
    rank = math.ceil(p / 100 * n) - 1
    return sorted_values[max(0, min(rank, n - 1))]


@dataclass(frozen=True)
class Metric:
    operation: str
    duration_ms: float
    recorded_at: float
    item_count: int | None = None


class PerformanceMonitor:
    """Keep the most recent measurements and summarise them on demand.

    Args:
        max_metrics: Size of the ring buffer (oldest measurements drop off).
        clock:       Wall-clock source in seconds, used to stamp measurements.
    """

    def __init__(
        self,
        max_metrics: int | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        size = settings.metrics_buffer_size if max_metrics is None else max_metrics
        self._metrics: deque[Metric] = deque(maxlen=size)
        self._clock = clock
        self._lock = threading.Lock()

    def record(
        self,
        operation: str,
        duration_ms: float,
        item_count: int | None = None,
    ) -> None:
        metric = Metric(operation, duration_ms, self._clock(), item_count)
        with self._lock:
            self._metrics.append(metric)

    def measure(
        self,
        operation: str,
        fn: Callable[[], T],
        item_count: int | None = None,
    ) -> T:
        """Run fn, record its duration, and return its result.

        A failing call is recorded as ``<operation>_error`` and re-raised.
        """
        start = time.perf_counter()
        try:
            result = fn()
        except Exception:
            self.record(f"{operation}_error", _elapsed_ms(start), item_count)
            raise
        self.record(operation, _elapsed_ms(start), item_count)
        return result

    def stats(self, operation: str, window_ms: float = 60_000) -> dict[str, float]:
        """Summary of measurements for operation within the last window_ms."""
        now = self._clock()
        with self._lock:
            relevant = [
                m for m in self._metrics
                if m.operation == operation and (now - m.recorded_at) * 1000 <= window_ms
            ]
        durations = sorted(m.duration_ms for m in relevant)
        result: dict[str, float] = {
            "count": float(len(durations)),
            "min": durations[0] if durations else 0.0,
            "max": durations[-1] if durations else 0.0,
            "mean": sum(durations) / len(durations) if durations else 0.0,
        }
        for p in (50, 90, 99):
            result[f"p{p}"] = _percentile(durations, p)
        result["throughput"] = len(relevant) / (window_ms / 1000) if window_ms else 0.0
        return result

    def summary(self, window_ms: float = 300_000) -> dict[str, dict[str, float]]:
        """Stats for each boundary operation plus the overall failure share."""
        per_op = {op: self.stats(op, window_ms) for op in OPERATIONS}
        ok = sum(s["count"] for s in per_op.values())
        errors = sum(self.stats(f"{op}_error", window_ms)["count"] for op in OPERATIONS)
        total = ok + errors
        per_op["overall"] = {
            "count": total,
            "errors": errors,
            "error_pct": errors / total * 100 if total else 0.0,
        }
        return per_op

    def log_summary(self, window_ms: float = 300_000) -> None:
        for op, s in self.summary(window_ms).items():
            if op == "overall":
                logger.info("Failed calls: %d of %d (%.1f%%)", s["errors"], s["count"], s["error_pct"])
            else:
                logger.info(
                    "%s: %d calls, mean %.3f ms, p99 %.3f ms",
                    op, s["count"], s["mean"], s["p99"],
                )

    def clear(self) -> None:
        with self._lock:
            self._metrics.clear()

    def __len__(self) -> int:
        return len(self._metrics)


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000


# Module-level singleton — shared across the application
performance_monitor = PerformanceMonitor()
