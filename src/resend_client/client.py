# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Client facade.

Bundles a raw request client with the email and domain services. Every
member gets its own copy of the configuration; they share one HTTP client
and one set of outcome counters.
"""

import logging
from typing import Any

import httpx
from typing_extensions import Self

from .config import DEFAULT_BASE_URL, ClientConfig
from .observability.metrics import OutcomeMetrics
from .reqlib.client import ReqClient
from .services.domains import DomainService
from .services.emails import EmailService

logger = logging.getLogger(__name__)


class Client:
    """
    Entry point of the library.

    Attributes:
        raw_client: Request client for endpoints without a service
        emails: Email operations
        domains: Domain operations
        metrics: Outcome counters shared by all members

    Example:
        async with Client("re_123") as client:
            outcome = await client.emails.send(
                SendEmailRequest(
                    subject="Hello",
                    from_="me@example.com",
                    to=["you@example.com"],
                    text="Hi",
                )
            )
            if isinstance(outcome, Success):
                print(outcome.value.id)
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        headers: dict[str, str] | None = None,
        http_client: httpx.AsyncClient | None = None,
        enable_prometheus: bool = True,
    ):
        config = ClientConfig(
            api_key=api_key, base_url=base_url, headers=dict(headers or {})
        )
        self._init_from_config(config, http_client, enable_prometheus)

    def _init_from_config(
        self,
        config: ClientConfig,
        http_client: httpx.AsyncClient | None,
        enable_prometheus: bool,
    ) -> None:
        self._owns_http_client = http_client is None
        self.http_client = http_client if http_client is not None else httpx.AsyncClient()
        self.metrics = OutcomeMetrics()

        def req_client() -> ReqClient:
            return ReqClient(
                config.copy(),
                http_client=self.http_client,
                metrics=self.metrics,
                enable_prometheus=enable_prometheus,
            )

        self.raw_client = req_client()
        self.emails = EmailService(req_client())
        self.domains = DomainService(req_client())
        logger.debug(f"Client initialized for {config.base_url}")

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        http_client: httpx.AsyncClient | None = None,
        enable_prometheus: bool = True,
    ) -> "Client":
        """Build a client from an existing configuration (copied per member)."""
        client = cls.__new__(cls)
        client._init_from_config(config, http_client, enable_prometheus)
        return client

    @classmethod
    def from_env(cls, **kwargs: Any) -> "Client":
        """Build a client from RESEND_API_KEY and RESEND_BASE_URL."""
        http_client = kwargs.pop("http_client", None)
        enable_prometheus = kwargs.pop("enable_prometheus", True)
        return cls.from_config(
            ClientConfig.from_env(**kwargs),
            http_client=http_client,
            enable_prometheus=enable_prometheus,
        )

    async def aclose(self) -> None:
        """Close the shared HTTP client if this instance created it."""
        if self._owns_http_client:
            await self.http_client.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        await self.aclose()


__all__ = ["Client"]
