"""Timing of splay tree operations and simulation phases."""

import time
import functools
import statistics
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterator, List, Optional


@dataclass
class OperationMetrics:
    """Every recorded duration of one operation, in seconds."""
    times: List[float] = field(default_factory=list)

    @property
    def call_count(self) -> int:
        return len(self.times)

    @property
    def total_time(self) -> float:
        return sum(self.times)

    @property
    def avg_time(self) -> float:
        return self.total_time / self.call_count if self.times else 0.0

    @property
    def median_time(self) -> float:
        return statistics.median(self.times) if self.times else 0.0

    @property
    def max_time(self) -> float:
        return max(self.times, default=0.0)

    def __str__(self) -> str:
        return (f"Calls: {self.call_count}, Total: {self.total_time:.6f}s, "
                f"Avg: {self.avg_time:.6f}s, Max: {self.max_time:.6f}s")


class PerformanceTracker:
    """
    Process-wide collector of operation timings.

    Starts disabled: engine operations then pay one attribute check per call.
    The benchmark script enables it around the runs it wants broken down.
    """

    _instance = None

    @classmethod
    def get_instance(cls) -> 'PerformanceTracker':
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def __init__(self):
        self.metrics: Dict[str, OperationMetrics] = {}
        self.enabled = False

    def record(self, name: str, elapsed: float) -> None:
        if self.enabled:
            self.metrics.setdefault(name, OperationMetrics()).times.append(elapsed)

    def reset(self) -> None:
        self.metrics = {}

    def enable(self) -> None:
        self.enabled = True

    def disable(self) -> None:
        self.enabled = False

    def report(self, sort_by: str = 'total_time') -> str:
        """Fixed-width table of all recorded operations, largest `sort_by` first."""
        if not self.metrics:
            return "No performance data collected."

        rows = sorted(self.metrics.items(), key=lambda kv: getattr(kv[1], sort_by), reverse=True)
        header = f"{'Operation':<28} {'Calls':>9} {'Total (s)':>11} {'Avg (µs)':>10} {'Median (µs)':>12}"
        lines = ["Performance Metrics:", header, "-" * len(header)]
        for name, m in rows:
            lines.append(f"{name:<28} {m.call_count:>9} {m.total_time:>11.6f} "
                         f"{m.avg_time * 1e6:>10.2f} {m.median_time * 1e6:>12.2f}")
        return "\n".join(lines)


@contextmanager
def measure(name: str) -> Iterator[None]:
    """Record the duration of the enclosed block under `name`."""
    tracker = PerformanceTracker.get_instance()
    if not tracker.enabled:
        yield
        return
    start = time.perf_counter()
    try:
        yield
    finally:
        tracker.record(name, time.perf_counter() - start)


def track_performance(method: Optional[Callable] = None, *, tag: Optional[str] = None) -> Callable:
    """
    Decorator recording each call's duration under `tag`, or under the
    function's qualified name. Usable bare or as ``@track_performance(tag=...)``.
    """
    def decorator(func):
        name = tag or func.__qualname__

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            tracker = PerformanceTracker.get_instance()
            if not tracker.enabled:
                return func(*args, **kwargs)
            start = time.perf_counter()
            try:
                return func(*args, **kwargs)
            finally:
                tracker.record(name, time.perf_counter() - start)
        return wrapper

    if method is None:
        return decorator
    return decorator(method)
