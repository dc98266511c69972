# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Response executor.

Sends a built request and classifies what came back into one of the four
APIOutcome variants. Nothing in here raises for remote misbehaviour: a
dropped connection, an error status, or a body of the wrong shape all come
back as values.

Classification:

    no response                         -> TransportFailure(transport error)
    status < 400, body parses as T      -> Success
    status < 400, body does not parse   -> ParseError
    status >= 400, body is an API error -> ApiError
    status >= 400, anything else        -> TransportFailure(status error)

The body text is read once and feeds whichever single parse attempt the
status selects. Both parses run in pydantic's strict mode: a field of the
wrong JSON type (``"yes"`` for a bool, ``"404"`` for an int) fails the parse
instead of being coerced.
"""

import logging
import time
from functools import lru_cache
from typing import Any, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from ..observability.metrics import (
    OUTCOME_API_ERROR,
    OUTCOME_PARSE_ERROR,
    OUTCOME_SUCCESS,
    OUTCOME_TRANSPORT_FAILURE,
    OutcomeMetrics,
    PrometheusRequestMetrics,
    get_prometheus_request_metrics,
)
from ..types.outcome import (
    APIOutcome,
    ApiError,
    ErrorResponse,
    ParseError,
    Success,
    TransportFailure,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


@lru_cache(maxsize=128)
def _type_adapter(response_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(response_type)


def _status_error(response: httpx.Response) -> httpx.HTTPStatusError:
    """Build the status-level error for an error response."""
    kind = "Client error" if response.status_code < 500 else "Server error"
    message = (
        f"{kind} '{response.status_code} {response.reason_phrase}' "
        f"for url '{response.request.url}'"
    )
    return httpx.HTTPStatusError(message, request=response.request, response=response)


def _outcome_kind(outcome: APIOutcome[Any]) -> str:
    if isinstance(outcome, Success):
        return OUTCOME_SUCCESS
    if isinstance(outcome, ApiError):
        return OUTCOME_API_ERROR
    if isinstance(outcome, ParseError):
        return OUTCOME_PARSE_ERROR
    return OUTCOME_TRANSPORT_FAILURE


class ResponseExecutor:
    """
    Executes requests over an httpx.AsyncClient.

    The executor holds no per-call state, so one instance can serve any
    number of concurrent calls. Connection pooling and timeouts are whatever
    the HTTP client is configured with; no retries are attempted.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        metrics: OutcomeMetrics | None = None,
        prometheus_metrics: PrometheusRequestMetrics | None = None,
        enable_prometheus: bool = True,
    ):
        """
        Initialize the executor.

        Args:
            http_client: Client used to send requests
            metrics: Outcome counters; a fresh OutcomeMetrics if None
            prometheus_metrics: Prometheus metrics; the module singleton is
                used if None and enable_prometheus is True
            enable_prometheus: Set False to skip Prometheus entirely
        """
        self.http_client = http_client
        self.metrics = metrics if metrics is not None else OutcomeMetrics()
        if prometheus_metrics is None and enable_prometheus:
            prometheus_metrics = get_prometheus_request_metrics()
        self._prometheus = prometheus_metrics

    async def execute(
        self, request: httpx.Request, response_type: type[T]
    ) -> APIOutcome[T]:
        """
        Send a request and classify the result.

        Args:
            request: A request produced by RequestBuilder
            response_type: Type the success body is parsed into; anything a
                pydantic TypeAdapter accepts

        Returns:
            Exactly one of Success, ApiError, ParseError, TransportFailure
        """
        start = time.monotonic()
        outcome = await self._execute(request, response_type)
        self._record(request.method, outcome, time.monotonic() - start)
        return outcome

    async def _execute(
        self, request: httpx.Request, response_type: type[T]
    ) -> APIOutcome[T]:
        try:
            response = await self.http_client.send(request)
        except httpx.RequestError as e:
            # Covers connect, DNS, TLS, timeouts and failures while reading the body
            logger.warning(f"{request.method} {request.url} failed: {e!r}")
            return TransportFailure(e)

        body = response.text
        logger.debug(f"{request.method} {request.url} -> {response.status_code}")

        if response.status_code >= 400:
            try:
                error = ErrorResponse.model_validate_json(body, strict=True)
            except ValidationError:
                logger.warning(
                    f"{request.method} {request.url} returned "
                    f"{response.status_code} without a structured error body"
                )
                return TransportFailure(_status_error(response))
            logger.warning(
                f"{request.method} {request.url} returned API error "
                f"{error.name} ({error.status_code}): {error.message}"
            )
            return ApiError.from_response(error)

        try:
            value = _type_adapter(response_type).validate_json(body, strict=True)
        except ValidationError as e:
            logger.warning(
                f"{request.method} {request.url} returned a body that does not "
                f"match {getattr(response_type, '__name__', response_type)}: "
                f"{e.error_count()} validation error(s)"
            )
            return ParseError(e, body)
        return Success(value)

    def _record(
        self, method: str, outcome: APIOutcome[Any], duration_seconds: float
    ) -> None:
        kind = _outcome_kind(outcome)
        self.metrics.record(kind, duration_seconds)
        if self._prometheus is not None:
            try:
                self._prometheus.observe(method, kind, duration_seconds)
            except Exception as e:
                logger.debug(f"Prometheus update failed: {e}")


__all__ = ["ResponseExecutor"]
