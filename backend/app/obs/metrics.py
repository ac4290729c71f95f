"""Central registry for Prometheus metrics used across the backend."""

from __future__ import annotations

from prometheus_client import Counter, Histogram


REQUEST_COUNTER = Counter(
	"lcprofile_http_requests_total",
	"Total HTTP requests processed",
	["route", "method", "status"],
)

REQUEST_LATENCY = Histogram(
	"lcprofile_http_request_duration_seconds",
	"HTTP request latency in seconds",
	["route", "method"],
	buckets=(0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.0, 5.0),
)

UPSTREAM_CALLS = Counter(
	"lcprofile_upstream_calls_total",
	"LeetCode GraphQL calls by outcome",
	["outcome"],
)

UPSTREAM_LATENCY = Histogram(
	"lcprofile_upstream_duration_seconds",
	"LeetCode GraphQL call latency in seconds",
	buckets=(0.05, 0.1, 0.25, 0.5, 1.0, 2.0, 5.0, 10.0),
)

PROFILE_FETCHES = Counter(
	"lcprofile_profile_fetch_total",
	"Profile aggregation results",
	["result"],
)


def observe_request(route: str, method: str, status: int, elapsed_seconds: float) -> None:
	REQUEST_COUNTER.labels(route=route, method=method, status=str(status)).inc()
	REQUEST_LATENCY.labels(route=route, method=method).observe(elapsed_seconds)


def observe_upstream_call(outcome: str, elapsed_seconds: float) -> None:
	UPSTREAM_CALLS.labels(outcome=outcome).inc()
	UPSTREAM_LATENCY.observe(elapsed_seconds)


def inc_profile_fetch(result: str) -> None:
	PROFILE_FETCHES.labels(result=result).inc()
