"""Prometheus metric definitions shared across the service."""
from __future__ import annotations

from prometheus_client import CollectorRegistry, Counter, Gauge, Histogram

from hello_service.uptime import uptime_seconds

REGISTRY = CollectorRegistry()

http_requests_total = Counter(
    "http_requests_total",
    "Total number of HTTP requests",
    ["method", "route", "status_code"],
    registry=REGISTRY,
)

http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "route", "status_code"],
    buckets=(0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5),
    registry=REGISTRY,
)

process_cpu_percentage = Gauge(
    "process_cpu_percentage",
    "Process CPU usage percentage across all cores",
    registry=REGISTRY,
)

process_memory_rss_bytes = Gauge(
    "process_memory_rss_bytes",
    "Resident set size of the process in bytes",
    registry=REGISTRY,
)

process_threads = Gauge(
    "process_threads",
    "Number of OS threads in the process",
    registry=REGISTRY,
)

process_uptime_seconds = Gauge(
    "process_uptime_seconds",
    "Seconds since the process started",
    registry=REGISTRY,
)
process_uptime_seconds.set_function(uptime_seconds)

__all__ = [
    "REGISTRY",
    "http_requests_total",
    "http_request_duration_seconds",
    "process_cpu_percentage",
    "process_memory_rss_bytes",
    "process_threads",
    "process_uptime_seconds",
]
