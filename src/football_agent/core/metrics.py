"""
In-memory metrics for /metrics endpoint (rough p50/p95).
Per-process only. Sync handlers run in a threadpool, so updates take a lock.
"""

import threading
from collections import Counter, deque
from typing import Deque, Dict, List, Union

MAX_LATENCY_SAMPLES = 1000


def _percentile(values: List[int], p: float) -> int:
    if not values:
        return 0
    idx = max(0, min(len(values) - 1, int(len(values) * p)))
    return sorted(values)[idx]


class _Metrics:
    def __init__(self, max_samples: int = MAX_LATENCY_SAMPLES) -> None:
        self.total_requests = 0
        self.total_errors = 0
        self.upstream_failures = 0
        self.intents: Counter = Counter()
        self._latencies: Deque[int] = deque(maxlen=max_samples)
        self._lock = threading.Lock()

    def increment_requests(self) -> None:
        with self._lock:
            self.total_requests += 1

    def increment_errors(self) -> None:
        with self._lock:
            self.total_errors += 1

    def increment_upstream_failures(self) -> None:
        with self._lock:
            self.upstream_failures += 1

    def record_intent(self, intent: str) -> None:
        with self._lock:
            self.intents[intent] += 1

    def record_latency(self, ms: int) -> None:
        with self._lock:
            self._latencies.append(ms)

    def snapshot(self) -> Dict[str, Union[int, Dict[str, int]]]:
        with self._lock:
            lat = list(self._latencies)
            counts = {
                "total_requests": self.total_requests,
                "total_errors": self.total_errors,
                "upstream_failures": self.upstream_failures,
                "intents": dict(self.intents),
            }
        return {
            **counts,
            "p50_ms": _percentile(lat, 0.50),
            "p95_ms": _percentile(lat, 0.95),
        }


metrics = _Metrics()
