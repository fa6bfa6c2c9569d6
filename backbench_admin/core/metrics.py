"""Prometheus metrics for the Backbench admin service.

Metrics are organized into two categories:

Business Metrics (for Operations dashboards):
- backbench_student_lookup_total: Student detail lookups by outcome
- backbench_admin_login_total: Admin login attempts by outcome
- backbench_student_status_update_total: Moderation writes by new status

Technical Metrics (for Engineering/SRE):
- backbench_stats_latency_seconds: Dashboard stats computation latency
- backbench_stats_cache_total: Stats cache hits and misses
- backbench_store_latency_seconds: Data store operation latency
- backbench_store_failures_total: Data store failures by operation and type
- backbench_http_requests_total: HTTP requests by endpoint/status
"""

import time
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


# =============================================================================
# Business Metrics (Operations dashboards)
# =============================================================================

student_lookup_total = Counter(
    "backbench_student_lookup_total",
    "Total number of admin student detail lookups",
    ["outcome"],  # found, not_found, invalid
)

admin_login_total = Counter(
    "backbench_admin_login_total",
    "Total number of admin login attempts",
    ["outcome"],  # success, invalid_secret, misconfigured
)

student_status_update_total = Counter(
    "backbench_student_status_update_total",
    "Total number of student status changes made by admins",
    ["status"],
)


# =============================================================================
# Technical Metrics (Engineering/SRE dashboards)
# =============================================================================

stats_latency = Histogram(
    "backbench_stats_latency_seconds",
    "Dashboard stats computation latency in seconds",
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
)

stats_cache_total = Counter(
    "backbench_stats_cache_total",
    "Dashboard stats cache lookups",
    ["result"],  # hit, miss
)

store_latency = Histogram(
    "backbench_store_latency_seconds",
    "Data store operation latency in seconds",
    ["operation"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
)

store_failures = Counter(
    "backbench_store_failures_total",
    "Total number of data store failures",
    ["operation", "error_type"],  # timeout, error
)

http_requests_total = Counter(
    "backbench_http_requests_total",
    "Total HTTP requests by endpoint and status",
    ["method", "endpoint", "status"],
)

http_request_latency = Histogram(
    "backbench_http_request_latency_seconds",
    "HTTP request latency by endpoint",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


# =============================================================================
# Helper Functions
# =============================================================================

def record_student_lookup(outcome: str) -> None:
    """Record the outcome of a student detail lookup."""
    student_lookup_total.labels(outcome=outcome).inc()


def record_admin_login(outcome: str) -> None:
    """Record the outcome of an admin login attempt."""
    admin_login_total.labels(outcome=outcome).inc()


def record_student_status_update(status: str) -> None:
    """Record a student status change."""
    student_status_update_total.labels(status=status).inc()


def record_stats_cache(hit: bool) -> None:
    """Record a stats cache lookup."""
    stats_cache_total.labels(result="hit" if hit else "miss").inc()


def record_store_failure(operation: str, error_type: str) -> None:
    """Record a data store failure."""
    store_failures.labels(operation=operation, error_type=error_type).inc()


@contextmanager
def track_stats_latency() -> Generator[None, None, None]:
    """Context manager to track dashboard stats latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        stats_latency.observe(duration)


@contextmanager
def track_store_latency(operation: str) -> Generator[None, None, None]:
    """Context manager to track a data store operation's latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        store_latency.labels(operation=operation).observe(duration)


def record_http_request(method: str, endpoint: str, status: int, duration: float) -> None:
    """Record an HTTP request."""
    http_requests_total.labels(method=method, endpoint=endpoint, status=str(status)).inc()
    http_request_latency.labels(method=method, endpoint=endpoint).observe(duration)


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    """Get the content type for metrics response."""
    return CONTENT_TYPE_LATEST
