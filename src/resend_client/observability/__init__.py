# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Observability for the resend client.

Classes:
    OutcomeMetrics: In-process counters of executed requests by outcome kind.
    PrometheusRequestMetrics: Optional Prometheus metrics for executed requests.

Functions:
    get_prometheus_request_metrics: Get or create the Prometheus metrics singleton.
    reset_prometheus_request_metrics: Reset the Prometheus metrics singleton.

Constants:
    PROMETHEUS_AVAILABLE: Whether prometheus_client is available.
    OUTCOME_*: Outcome kind labels.
"""

from .metrics import (
    LATENCY_BUCKETS,
    METRIC_PREFIX,
    OUTCOME_API_ERROR,
    OUTCOME_KINDS,
    OUTCOME_PARSE_ERROR,
    OUTCOME_SUCCESS,
    OUTCOME_TRANSPORT_FAILURE,
    PROMETHEUS_AVAILABLE,
    OutcomeMetrics,
    PrometheusRequestMetrics,
    get_prometheus_request_metrics,
    reset_prometheus_request_metrics,
)

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
