# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Request client: one configuration, one builder, one executor.

Every resource service holds its own ReqClient and calls it once per
operation.
"""

import logging
from typing import Any, TypeVar

import httpx
from typing_extensions import Self

from ..config import ClientConfig
from ..observability.metrics import OutcomeMetrics
from ..types.outcome import APIOutcome
from .builder import RequestBuilder
from .executor import ResponseExecutor

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ReqClient:
    """
    Builds and executes requests for a single configuration.

    Example:
        async with ReqClient(ClientConfig(api_key="re_123")) as req_client:
            request = req_client.build("GET", "/domains")
            outcome = await req_client.execute(request, ListDomainsResponse)
    """

    def __init__(
        self,
        config: ClientConfig,
        http_client: httpx.AsyncClient | None = None,
        metrics: OutcomeMetrics | None = None,
        enable_prometheus: bool = True,
    ):
        """
        Initialize the request client.

        Args:
            config: Configuration owned by this client
            http_client: Shared HTTP client. If None, a client is created and
                closed by ``aclose()``.
            metrics: Outcome counters passed to the executor
            enable_prometheus: Forwarded to the executor
        """
        self.config = config
        self._owns_http_client = http_client is None
        self.http_client = http_client if http_client is not None else httpx.AsyncClient()
        self.builder = RequestBuilder(config)
        self.executor = ResponseExecutor(
            self.http_client, metrics=metrics, enable_prometheus=enable_prometheus
        )

    @classmethod
    def from_api_key(cls, api_key: str, **kwargs: Any) -> "ReqClient":
        return cls(ClientConfig(api_key=api_key), **kwargs)

    @property
    def base_url(self) -> str:
        return self.config.base_url

    @base_url.setter
    def base_url(self, value: str) -> None:
        # Test-only: redirects subsequent requests, e.g. to a mock server
        self.config.base_url = value

    @property
    def metrics(self) -> OutcomeMetrics:
        return self.executor.metrics

    def build(self, method: str, path: str) -> httpx.Request:
        """Build a request without a body. See RequestBuilder.build."""
        return self.builder.build(method, path)

    def build_with_body(
        self, method: str, path: str, payload: Any | None = None
    ) -> httpx.Request:
        """Build a request with an optional JSON body. See RequestBuilder.build_with_body."""
        return self.builder.build_with_body(method, path, payload)

    async def execute(
        self, request: httpx.Request, response_type: type[T]
    ) -> APIOutcome[T]:
        """Execute a request. See ResponseExecutor.execute."""
        return await self.executor.execute(request, response_type)

    async def aclose(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_http_client:
            await self.http_client.aclose()
            logger.debug("Closed owned HTTP client")

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        await self.aclose()


__all__ = ["ReqClient"]
