"""Tests for metrics collector."""

import threading

from football_agent.core.metrics import _Metrics, _percentile


def test_percentile_empty_list():
    """Test percentile with empty list."""
    assert _percentile([], 0.5) == 0


def test_percentile_single_value():
    """Test percentile with single value."""
    assert _percentile([100], 0.5) == 100


def test_percentile_multiple_values():
    """Test percentile calculation."""
    values = [10, 20, 30, 40, 50, 60, 70, 80, 90, 100]
    assert _percentile(values, 0.50) in [50, 60]
    assert _percentile(values, 0.95) in [90, 100]


def test_metrics_counters():
    """Test request, error and upstream counters."""
    m = _Metrics()
    m.increment_requests()
    m.increment_errors()
    m.increment_upstream_failures()
    assert (m.total_requests, m.total_errors, m.upstream_failures) == (1, 1, 1)


def test_metrics_latency_window_is_capped():
    """Test only the most recent samples are kept."""
    m = _Metrics(max_samples=3)
    for ms in (1, 2, 3, 4, 5):
        m.record_latency(ms)
    assert list(m._latencies) == [3, 4, 5]


def test_metrics_snapshot():
    """Test metrics snapshot format."""
    m = _Metrics()
    m.increment_requests()
    m.record_latency(100)
    m.record_latency(200)
    m.record_intent("standings")
    m.record_intent("standings")
    m.record_intent("general")

    snapshot = m.snapshot()
    assert snapshot["total_requests"] == 1
    assert snapshot["total_errors"] == 0
    assert snapshot["upstream_failures"] == 0
    assert snapshot["intents"] == {"standings": 2, "general": 1}
    assert snapshot["p50_ms"] == 200
    assert "p95_ms" in snapshot


def test_metrics_concurrent_updates():
    """Test counters stay exact under concurrent updates."""
    m = _Metrics()

    def work():
        for _ in range(1000):
            m.increment_requests()
            m.increment_upstream_failures()
            m.record_intent("live_score")

    threads = [threading.Thread(target=work) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    snapshot = m.snapshot()
    assert snapshot["total_requests"] == 8000
    assert snapshot["upstream_failures"] == 8000
    assert snapshot["intents"] == {"live_score": 8000}
