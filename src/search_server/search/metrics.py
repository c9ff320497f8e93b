"""Query metrics collection for the search server."""

from collections import defaultdict, deque
from dataclasses import dataclass
import time


@dataclass
class QueryMetrics:
    """Metrics for a single query evaluation."""

    latency_ms: float
    result_count: int
    matched_count: int
    query_terms: int


class MetricsCollector:
    """Lightweight rolling-window collector for query metrics."""

    def __init__(self, window_size: int = 1000, slow_query_ms: float = 10.0):
        self.window_size = window_size
        self.slow_query_ms = slow_query_ms
        self._metrics = deque(maxlen=window_size)
        self._counters = defaultdict(int)

    @staticmethod
    def start_timer() -> float:
        return time.perf_counter()

    @staticmethod
    def elapsed_ms(started: float) -> float:
        return (time.perf_counter() - started) * 1000

    def increment(self, counter: str, amount: int = 1):
        self._counters[counter] += amount

    def counter(self, name: str) -> int:
        return self._counters.get(name, 0)

    def record_query(self, metrics: QueryMetrics):
        """Record query metrics."""
        self._metrics.append(metrics)
        self._counters["total_queries"] += 1

        if metrics.latency_ms > self.slow_query_ms:
            self._counters["slow_queries"] += 1
        if metrics.result_count == 0:
            self._counters["empty_results"] += 1

    def get_stats(self) -> dict:
        """Get current query statistics."""
        stats: dict = {"documents_added": self._counters["documents_added"]}
        if not self._metrics:
            return stats

        latencies = sorted(m.latency_ms for m in self._metrics)
        result_counts = [m.result_count for m in self._metrics]
        matched_counts = [m.matched_count for m in self._metrics]
        query_terms = [m.query_terms for m in self._metrics]
        total = self._counters["total_queries"]

        stats.update(
            {
                "count": len(self._metrics),
                "latency": {
                    "mean": sum(latencies) / len(latencies),
                    "p95": latencies[int(len(latencies) * 0.95)],
                    "p99": latencies[int(len(latencies) * 0.99)],
                    "max": latencies[-1],
                },
                "results": {
                    "mean": sum(result_counts) / len(result_counts),
                    "matched_mean": sum(matched_counts) / len(matched_counts),
                    "empty_rate": self._counters["empty_results"] / total,
                },
                "query_terms": {
                    "mean": sum(query_terms) / len(query_terms),
                    "max": max(query_terms),
                },
                "performance": {
                    "slow_rate": self._counters["slow_queries"] / total,
                    "total_queries": total,
                },
            }
        )
        return stats

    def reset(self):
        """Reset all metrics."""
        self._metrics.clear()
        self._counters.clear()
