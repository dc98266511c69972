# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Protocol for the request client used by resource services."""

from typing import Any, Protocol, TypeVar, runtime_checkable

import httpx

from ..types.outcome import APIOutcome

T = TypeVar("T")


@runtime_checkable
class RequestClientProtocol(Protocol):
    """
    The whole surface a resource service may call.

    ReqClient implements it; tests and alternative transports can supply
    anything else with the same three methods.
    """

    def build(self, method: str, path: str) -> httpx.Request:
        """Build a request without a body."""
        ...

    def build_with_body(
        self, method: str, path: str, payload: Any | None = None
    ) -> httpx.Request:
        """Build a request with an optional JSON body."""
        ...

    async def execute(
        self, request: httpx.Request, response_type: type[T]
    ) -> APIOutcome[T]:
        """Send the request and classify the outcome."""
        ...
