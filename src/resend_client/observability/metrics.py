# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Request outcome metrics for the resend client.

This module provides:
1. OutcomeMetrics - Dataclass counting executed requests by outcome kind
2. PrometheusRequestMetrics - Optional Prometheus metrics for observability

Usage:
    metrics = OutcomeMetrics()
    metrics.record(OUTCOME_SUCCESS, duration_seconds=0.12)
    stats = metrics.get_stats()

Prometheus metrics are only available when the ``prometheus`` extra is
installed:
    pip install resend-client[prometheus]
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

logger = logging.getLogger(__name__)

METRIC_PREFIX = "resend_client"

# Outcome kinds, one per APIOutcome variant
OUTCOME_SUCCESS = "success"
OUTCOME_API_ERROR = "api_error"
OUTCOME_PARSE_ERROR = "parse_error"
OUTCOME_TRANSPORT_FAILURE = "transport_failure"

OUTCOME_KINDS = (
    OUTCOME_SUCCESS,
    OUTCOME_API_ERROR,
    OUTCOME_PARSE_ERROR,
    OUTCOME_TRANSPORT_FAILURE,
)

# Seconds; API calls are short round trips
LATENCY_BUCKETS = [0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0]

# Type declarations for optional prometheus_client imports
if TYPE_CHECKING:
    from prometheus_client import Counter as CounterType, Histogram as HistogramType
else:
    CounterType = object
    HistogramType = object

# Try to import prometheus_client for optional Prometheus metrics
try:
    from prometheus_client import Counter as _Counter, Histogram as _Histogram

    Counter: type[CounterType] | None = _Counter
    Histogram: type[HistogramType] | None = _Histogram
    PROMETHEUS_AVAILABLE = True
except ImportError:
    Counter = None
    Histogram = None
    PROMETHEUS_AVAILABLE = False


@dataclass
class OutcomeMetrics:
    """
    In-process counters for executed requests.

    Thread Safety:
        Counter updates are guarded by a lock so the metrics object can be
        shared between executors running on different threads.

    Example:
        >>> metrics = OutcomeMetrics()
        >>> metrics.record("success", duration_seconds=0.2)
        >>> metrics.total_requests
        1
    """

    successes: int = 0
    api_errors: int = 0
    parse_errors: int = 0
    transport_failures: int = 0
    total_duration_seconds: float = 0.0

    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    @property
    def total_requests(self) -> int:
        return (
            self.successes
            + self.api_errors
            + self.parse_errors
            + self.transport_failures
        )

    def get_success_rate(self) -> float:
        """
        Proportion of requests that ended in Success.

        Returns 1.0 when nothing has been recorded yet.
        """
        total = self.total_requests
        return self.successes / total if total > 0 else 1.0

    def record(self, outcome: str, duration_seconds: float = 0.0) -> None:
        """
        Record one executed request.

        Args:
            outcome: One of OUTCOME_KINDS
            duration_seconds: Wall-clock duration of the round trip

        Raises:
            ValueError: If outcome is not a known outcome kind
        """
        with self._lock:
            if outcome == OUTCOME_SUCCESS:
                self.successes += 1
            elif outcome == OUTCOME_API_ERROR:
                self.api_errors += 1
            elif outcome == OUTCOME_PARSE_ERROR:
                self.parse_errors += 1
            elif outcome == OUTCOME_TRANSPORT_FAILURE:
                self.transport_failures += 1
            else:
                raise ValueError(f"Unknown outcome kind: {outcome!r}")
            self.total_duration_seconds += duration_seconds

    def get_stats(self) -> dict[str, Any]:
        """Return a JSON-serializable snapshot of the counters."""
        with self._lock:
            return {
                "total_requests": self.total_requests,
                "successes": self.successes,
                "api_errors": self.api_errors,
                "parse_errors": self.parse_errors,
                "transport_failures": self.transport_failures,
                "success_rate": self.get_success_rate(),
                "total_duration_seconds": self.total_duration_seconds,
            }

    def reset(self) -> None:
        """Reset all counters to zero."""
        with self._lock:
            self.successes = 0
            self.api_errors = 0
            self.parse_errors = 0
            self.transport_failures = 0
            self.total_duration_seconds = 0.0


class PrometheusRequestMetrics:
    """
    Prometheus metrics for executed requests.

    Requires prometheus_client; raises ImportError otherwise.
    """

    def __init__(self, registry: Any = None) -> None:
        """
        Initialize Prometheus metrics.

        Args:
            registry: Optional Prometheus registry. Uses the default if None.

        Raises:
            ImportError: If prometheus_client is not installed
        """
        if not PROMETHEUS_AVAILABLE or Counter is None or Histogram is None:
            raise ImportError(
                "prometheus_client is not available. "
                "Install with: pip install resend-client[prometheus]"
            )

        if registry is None:
            from prometheus_client import REGISTRY

            registry = REGISTRY

        self.requests_total = Counter(
            f"{METRIC_PREFIX}_requests_total",
            "Executed API requests by outcome",
            ["method", "outcome"],  # outcome: success, api_error, parse_error, transport_failure
            registry=registry,
        )

        self.request_duration_seconds = Histogram(
            f"{METRIC_PREFIX}_request_duration_seconds",
            "Duration of API requests",
            ["method"],
            buckets=LATENCY_BUCKETS,
            registry=registry,
        )

        logger.info("Prometheus request metrics initialized")

    def observe(self, method: str, outcome: str, duration_seconds: float) -> None:
        """
        Observe one executed request.

        Args:
            method: HTTP method
            outcome: One of OUTCOME_KINDS
            duration_seconds: Wall-clock duration of the round trip
        """
        self.requests_total.labels(method=method, outcome=outcome).inc()
        self.request_duration_seconds.labels(method=method).observe(duration_seconds)


# Module-level singleton for Prometheus metrics (optional)
_prometheus_request_metrics: PrometheusRequestMetrics | None = None
_prometheus_lock = threading.Lock()


def get_prometheus_request_metrics() -> PrometheusRequestMetrics | None:
    """
    Get or create the Prometheus request metrics singleton.

    Uses double-checked locking so concurrent first calls cannot register the
    same metric names twice.

    Returns:
        PrometheusRequestMetrics instance if prometheus_client is available,
        None otherwise.
    """
    global _prometheus_request_metrics

    if not PROMETHEUS_AVAILABLE:
        return None

    if _prometheus_request_metrics is None:
        with _prometheus_lock:
            if _prometheus_request_metrics is None:
                try:
                    _prometheus_request_metrics = PrometheusRequestMetrics()
                except Exception as e:
                    logger.warning(
                        f"Failed to initialize Prometheus request metrics: {e}"
                    )
                    return None

    return _prometheus_request_metrics


def reset_prometheus_request_metrics() -> None:
    """Reset the Prometheus request metrics singleton (mainly for testing)."""
    global _prometheus_request_metrics
    _prometheus_request_metrics = None


__all__ = [
    "LATENCY_BUCKETS",
    "METRIC_PREFIX",
    "OUTCOME_API_ERROR",
    "OUTCOME_KINDS",
    "OUTCOME_PARSE_ERROR",
    "OUTCOME_SUCCESS",
    "OUTCOME_TRANSPORT_FAILURE",
    "PROMETHEUS_AVAILABLE",
    "OutcomeMetrics",
    "PrometheusRequestMetrics",
    "get_prometheus_request_metrics",
    "reset_prometheus_request_metrics",
]
