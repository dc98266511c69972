"""
Shared fixtures for the resend client unit tests.

HTTP traffic goes through httpx.MockTransport backed by MockServer, which
records every request and answers from canned routes. Request clients are
pointed at MOCK_BASE_URL through their settable base URL, the same way a
test would redirect them to a local mock server.
"""

from collections.abc import AsyncIterator, Callable
from typing import Any

import httpx
import pytest
import pytest_asyncio

from resend_client.config import ClientConfig
from resend_client.reqlib.client import ReqClient

MOCK_BASE_URL = "http://mock-server:4010"
API_KEY = "api-key"


class MockServer:
    """Callable handler for httpx.MockTransport with per-route responses."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._routes: dict[tuple[str, str], Callable[[httpx.Request], httpx.Response]] = {}

    def mock(
        self,
        method: str,
        path: str,
        status_code: int = 200,
        json: Any = None,
        text: str | None = None,
    ) -> None:
        """Answer ``method path`` with a fixed status and JSON or text body."""

        def respond(request: httpx.Request) -> httpx.Response:
            if text is not None:
                return httpx.Response(status_code, text=text)
            return httpx.Response(status_code, json=json)

        self._routes[(method, path)] = respond

    def mock_raw(
        self,
        method: str,
        path: str,
        responder: Callable[[httpx.Request], httpx.Response],
    ) -> None:
        """Answer ``method path`` with a custom responder (which may raise)."""
        self._routes[(method, path)] = responder

    def calls(self, method: str, path: str) -> list[httpx.Request]:
        return [
            r for r in self.requests if r.method == method and r.url.path == path
        ]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        responder = self._routes.get((request.method, request.url.path))
        if responder is None:
            return httpx.Response(404, text="no mock for this route")
        return responder(request)


@pytest.fixture
def mock_server() -> MockServer:
    return MockServer()


@pytest_asyncio.fixture
async def http_client(mock_server: MockServer) -> AsyncIterator[httpx.AsyncClient]:
    async with httpx.AsyncClient(transport=httpx.MockTransport(mock_server)) as client:
        yield client


@pytest.fixture
def req_client(http_client: httpx.AsyncClient) -> ReqClient:
    """A ReqClient redirected to the mock server, Prometheus disabled."""
    client = ReqClient(
        ClientConfig(api_key=API_KEY),
        http_client=http_client,
        enable_prometheus=False,
    )
    client.base_url = MOCK_BASE_URL
    return client
