"""Operation counters and timers for the kernel service."""

import time
from contextlib import contextmanager
from typing import Any, Dict


class MetricsCollector:
    """Counts service operations and records how long the last one took."""

    def __init__(self):
        self.counters: Dict[str, int] = {}
        self.timers: Dict[str, float] = {}

    def increment_counter(self, name: str, delta: int = 1):
        self.counters[name] = self.counters.get(name, 0) + delta

    @contextmanager
    def timed(self, name: str):
        """Record the wall time of the enclosed block under ``name``."""
        start = time.perf_counter()
        try:
            yield
        finally:
            self.timers[name] = time.perf_counter() - start

    def get_all_metrics(self) -> Dict[str, Any]:
        return {
            "counters": self.counters.copy(),
            "timers": self.timers.copy(),
        }

    def reset(self):
        self.counters.clear()
        self.timers.clear()

    def summary_stats(self) -> Dict[str, Any]:
        return {
            "total_counters": len(self.counters),
            "counter_sum": sum(self.counters.values()),
            "timer_total": sum(self.timers.values()),
        }
