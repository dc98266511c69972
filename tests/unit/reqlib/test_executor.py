"""
Unit tests for ResponseExecutor outcome classification.

Each test drives a request through httpx.MockTransport and checks which of
the four outcome variants comes back.
"""

import asyncio

import httpx
import pytest
from pydantic import BaseModel, ValidationError

from resend_client.observability.metrics import OutcomeMetrics
from resend_client.reqlib.executor import ResponseExecutor
from resend_client.types.emails import SendEmailResponse
from resend_client.types.outcome import (
    ApiError,
    ParseError,
    Success,
    TransportFailure,
)


class Item(BaseModel):
    id: str
    count: int


class _FailingStream(httpx.AsyncByteStream):
    """Response stream that breaks while the body is being read."""

    async def __aiter__(self):
        raise httpx.ReadError("connection reset while reading body")
        yield b""  # pragma: no cover


class TestSuccessPath:
    """Tests for non-error statuses."""

    @pytest.mark.asyncio
    async def test_matching_body_is_success(self, req_client, mock_server):
        mock_server.mock("GET", "/items/1", json={"id": "1", "count": 3})

        outcome = await req_client.execute(req_client.build("GET", "/items/1"), Item)

        assert isinstance(outcome, Success)
        assert outcome.ok is True
        assert outcome.value == Item(id="1", count=3)

    @pytest.mark.asyncio
    async def test_success_round_trips(self, req_client, mock_server):
        body = '{"id":"mock-id"}'
        mock_server.mock("POST", "/emails", text=body)

        outcome = await req_client.execute(
            req_client.build_with_body("POST", "/emails", {"to": ["a@b.c"]}),
            SendEmailResponse,
        )

        assert isinstance(outcome, Success)
        assert outcome.value.to_json() == body

    @pytest.mark.asyncio
    async def test_list_response_type(self, req_client, mock_server):
        mock_server.mock("GET", "/items", json=[{"id": "1", "count": 1}])

        outcome = await req_client.execute(req_client.build("GET", "/items"), list[Item])

        assert isinstance(outcome, Success)
        assert outcome.value == [Item(id="1", count=1)]

    @pytest.mark.asyncio
    async def test_schema_mismatch_is_parse_error(self, req_client, mock_server):
        mock_server.mock("GET", "/items/1", text='{"id":"1","count":"many"}')

        outcome = await req_client.execute(req_client.build("GET", "/items/1"), Item)

        assert isinstance(outcome, ParseError)
        assert outcome.ok is False
        assert isinstance(outcome.error, ValidationError)
        assert outcome.body == '{"id":"1","count":"many"}'

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "body",
        [
            '{"id":"1","count":"3"}',
            '{"id":1,"count":3}',
            '{"id":"1","count":3.0}',
        ],
    )
    async def test_wrong_field_types_not_coerced(self, req_client, mock_server, body):
        mock_server.mock("GET", "/items/1", text=body)

        outcome = await req_client.execute(req_client.build("GET", "/items/1"), Item)

        assert isinstance(outcome, ParseError)
        assert outcome.body == body

    @pytest.mark.asyncio
    async def test_invalid_json_is_parse_error(self, req_client, mock_server):
        mock_server.mock("GET", "/items/1", text="<html>maintenance</html>")

        outcome = await req_client.execute(req_client.build("GET", "/items/1"), Item)

        assert isinstance(outcome, ParseError)
        assert outcome.body == "<html>maintenance</html>"

    @pytest.mark.asyncio
    async def test_error_shaped_body_with_success_status_is_parse_error(
        self, req_client, mock_server
    ):
        """A success status never produces ApiError, whatever the body."""
        mock_server.mock(
            "GET",
            "/items/1",
            json={"name": "not_found", "status_code": 404, "message": "gone"},
        )

        outcome = await req_client.execute(req_client.build("GET", "/items/1"), Item)

        assert isinstance(outcome, ParseError)

    @pytest.mark.asyncio
    async def test_empty_body_is_parse_error(self, req_client, mock_server):
        mock_server.mock("DELETE", "/items/1", text="")

        outcome = await req_client.execute(req_client.build("DELETE", "/items/1"), Item)

        assert isinstance(outcome, ParseError)


class TestErrorPath:
    """Tests for statuses >= 400."""

    @pytest.mark.asyncio
    async def test_structured_error_is_api_error(self, req_client, mock_server):
        mock_server.mock(
            "POST",
            "/emails",
            status_code=422,
            json={
                "name": "validation_error",
                "status_code": 422,
                "message": "The `to` field is missing.",
            },
        )

        outcome = await req_client.execute(
            req_client.build_with_body("POST", "/emails", {}), SendEmailResponse
        )

        assert outcome == ApiError(
            name="validation_error",
            status_code=422,
            message="The `to` field is missing.",
        )
        assert outcome.ok is False

    @pytest.mark.asyncio
    async def test_api_error_status_code_comes_from_body(self, req_client, mock_server):
        mock_server.mock(
            "GET",
            "/items/1",
            status_code=400,
            json={"name": "restricted_api_key", "status_code": 401, "message": "no"},
        )

        outcome = await req_client.execute(req_client.build("GET", "/items/1"), Item)

        assert isinstance(outcome, ApiError)
        assert outcome.status_code == 401

    @pytest.mark.asyncio
    async def test_unstructured_error_is_transport_failure(
        self, req_client, mock_server
    ):
        mock_server.mock("GET", "/items/1", status_code=502, text="Bad Gateway")

        outcome = await req_client.execute(req_client.build("GET", "/items/1"), Item)

        assert isinstance(outcome, TransportFailure)
        assert outcome.ok is False
        assert isinstance(outcome.error, httpx.HTTPStatusError)
        assert outcome.status_code == 502

    @pytest.mark.asyncio
    async def test_partial_error_body_is_transport_failure(
        self, req_client, mock_server
    ):
        """The status error wins over the parse error of the error body."""
        mock_server.mock(
            "GET", "/items/1", status_code=404, json={"message": "not found"}
        )

        outcome = await req_client.execute(req_client.build("GET", "/items/1"), Item)

        assert isinstance(outcome, TransportFailure)
        assert not isinstance(outcome.error, ValidationError)
        assert outcome.error.response.status_code == 404
        assert "404" in str(outcome.error)

    @pytest.mark.asyncio
    async def test_error_body_with_string_status_is_transport_failure(
        self, req_client, mock_server
    ):
        """An error body is only an ApiError when every field has its JSON type."""
        mock_server.mock(
            "GET",
            "/items/1",
            status_code=404,
            json={"name": "not_found", "status_code": "404", "message": "m"},
        )

        outcome = await req_client.execute(req_client.build("GET", "/items/1"), Item)

        assert isinstance(outcome, TransportFailure)
        assert outcome.status_code == 404

    @pytest.mark.asyncio
    async def test_body_matching_target_type_still_error(
        self, req_client, mock_server
    ):
        """An error status never produces Success, whatever the body."""
        mock_server.mock("GET", "/items/1", status_code=500, json={"id": "1", "count": 1})

        outcome = await req_client.execute(req_client.build("GET", "/items/1"), Item)

        assert isinstance(outcome, TransportFailure)
        assert outcome.status_code == 500


class TestTransportFailures:
    """Tests for requests that never produce a response."""

    @pytest.mark.asyncio
    async def test_connection_refused(self, req_client, mock_server):
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Connection refused", request=request)

        mock_server.mock_raw("GET", "/items/1", refuse)

        outcome = await req_client.execute(req_client.build("GET", "/items/1"), Item)

        assert isinstance(outcome, TransportFailure)
        assert isinstance(outcome.error, httpx.ConnectError)
        assert outcome.status_code is None

    @pytest.mark.asyncio
    async def test_timeout(self, req_client, mock_server):
        def time_out(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        mock_server.mock_raw("GET", "/items/1", time_out)

        outcome = await req_client.execute(req_client.build("GET", "/items/1"), Item)

        assert isinstance(outcome, TransportFailure)
        assert isinstance(outcome.error, httpx.TimeoutException)

    @pytest.mark.asyncio
    async def test_body_read_failure(self, req_client, mock_server):
        mock_server.mock_raw(
            "GET",
            "/items/1",
            lambda request: httpx.Response(200, stream=_FailingStream()),
        )

        outcome = await req_client.execute(req_client.build("GET", "/items/1"), Item)

        assert isinstance(outcome, TransportFailure)
        assert isinstance(outcome.error, httpx.ReadError)


class TestExecutorMetrics:
    """Tests for outcome counting."""

    @pytest.mark.asyncio
    async def test_each_outcome_counted(self, http_client, mock_server):
        metrics = OutcomeMetrics()
        executor = ResponseExecutor(
            http_client, metrics=metrics, enable_prometheus=False
        )
        mock_server.mock("GET", "/ok", json={"id": "1", "count": 1})
        mock_server.mock("GET", "/bad-body", json={})
        mock_server.mock(
            "GET",
            "/api-error",
            status_code=403,
            json={"name": "forbidden", "status_code": 403, "message": "no"},
        )
        mock_server.mock("GET", "/broken", status_code=500, text="oops")

        for path in ("/ok", "/bad-body", "/api-error", "/broken"):
            request = httpx.Request("GET", f"http://mock-server:4010{path}")
            await executor.execute(request, Item)

        assert metrics.successes == 1
        assert metrics.parse_errors == 1
        assert metrics.api_errors == 1
        assert metrics.transport_failures == 1
        assert metrics.total_requests == 4

    @pytest.mark.asyncio
    async def test_default_metrics_created(self, http_client):
        executor = ResponseExecutor(http_client, enable_prometheus=False)
        assert isinstance(executor.metrics, OutcomeMetrics)
        assert executor.metrics.total_requests == 0


class TestConcurrentExecution:
    """Tests for independent concurrent calls."""

    @pytest.mark.asyncio
    async def test_concurrent_calls_are_independent(self, req_client, mock_server):
        for i in range(5):
            mock_server.mock("GET", f"/items/{i}", json={"id": str(i), "count": i})

        outcomes = await asyncio.gather(
            *(
                req_client.execute(req_client.build("GET", f"/items/{i}"), Item)
                for i in range(5)
            )
        )

        assert [o.value.id for o in outcomes] == ["0", "1", "2", "3", "4"]
        assert len(mock_server.requests) == 5
