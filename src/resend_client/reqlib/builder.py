# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Request builder.

Turns a method, a path and an optional payload into a fully addressed,
authenticated ``httpx.Request``. Nothing here touches the network; every
failure is raised as a RequestConstructionError before a request exists.
"""

import logging
import re
from typing import Any

import httpx
from pydantic import BaseModel
from pydantic_core import PydanticSerializationError, to_json

from ..config import ClientConfig
from ..exceptions import InvalidHeaderError, InvalidPathError, SerializationError

logger = logging.getLogger(__name__)

CONTENT_TYPE = "application/json"

# RFC 9110 token characters
_HEADER_NAME_RE = re.compile(r"^[!#$%&'*+\-.^_`|~0-9A-Za-z]+$")
# Visible ASCII, space and horizontal tab
_HEADER_VALUE_RE = re.compile(r"^[\t\x20-\x7e]*$")


def _set_header(headers: httpx.Headers, name: str, value: str) -> None:
    """Validate and set a header, replacing any existing one of that name."""
    if not isinstance(name, str) or not _HEADER_NAME_RE.match(name):
        raise InvalidHeaderError(f"Invalid header name: {name!r}", header_name=name)
    # The value may be the API key, so it never appears in the message
    if not isinstance(value, str) or not _HEADER_VALUE_RE.match(value):
        raise InvalidHeaderError(
            f"Header {name!r} has a value that cannot appear in an HTTP request",
            header_name=name,
        )
    headers[name] = value


def _drop_none(value: Any) -> Any:
    """Remove ``None`` entries from mappings, recursing into lists and dicts."""
    if isinstance(value, dict):
        return {k: _drop_none(v) for k, v in value.items() if v is not None}
    if isinstance(value, (list, tuple)):
        # A null list element is a value, not an absent field
        return [_drop_none(v) for v in value]
    return value


def serialize_payload(payload: Any) -> str:
    """
    Serialize a request payload to compact JSON.

    Pydantic models are dumped by alias and ``None`` fields are omitted, so
    unset optional fields never reach the wire. Other values go through
    pydantic-core's JSON serializer with the same rules: ``None`` values in
    dicts are dropped at every level, models nested inside them are dumped
    by alias without ``None`` fields.

    Raises:
        SerializationError: If the payload cannot be represented as JSON
    """
    try:
        if isinstance(payload, BaseModel):
            return payload.model_dump_json(by_alias=True, exclude_none=True)
        return to_json(
            _drop_none(payload), by_alias=True, exclude_none=True
        ).decode("utf-8")
    except (PydanticSerializationError, TypeError, ValueError) as e:
        raise SerializationError(
            f"Cannot serialize {type(payload).__name__} payload to JSON: {e}",
            payload_type=type(payload).__name__,
        ) from e


class RequestBuilder:
    """
    Builds outbound requests from a client configuration.

    The configuration is read at build time, so changes to it (such as a
    redirected base URL in tests) apply to every request built afterwards.

    Header precedence, lowest to highest:
        1. config.headers, except Content-Type, which is set only with a body
        2. Accept: application/json
        3. User-Agent: config.user_agent
        4. Authorization: Bearer <config.api_key>
    """

    def __init__(self, config: ClientConfig):
        self.config = config

    def resolve_url(self, path: str) -> httpx.URL:
        """
        Replace the base URL's path with ``path``, dropping query and fragment.

        Raises:
            InvalidPathError: If the path cannot appear in a URL, e.g. it
                contains control characters
        """
        if not path.startswith("/"):
            path = "/" + path
        base = httpx.URL(self.config.base_url)
        try:
            return base.copy_with(path=path, query=None, fragment=None)
        except httpx.InvalidURL as e:
            raise InvalidPathError(f"Invalid request path {path!r}: {e}", path=path) from e

    def _headers(self) -> httpx.Headers:
        headers = httpx.Headers()
        for name, value in self.config.headers.items():
            _set_header(headers, name, value)
        # Content-Type describes a body, so only build_with_body sets it
        headers.pop("Content-Type", None)
        _set_header(headers, "Accept", CONTENT_TYPE)
        _set_header(headers, "User-Agent", self.config.user_agent)
        _set_header(headers, "Authorization", f"Bearer {self.config.api_key}")
        return headers

    def build(self, method: str, path: str) -> httpx.Request:
        """
        Build a request without a body.

        Args:
            method: HTTP method, e.g. "GET"
            path: Request path, e.g. "/domains/abc"

        Returns:
            An httpx.Request ready to be executed

        Raises:
            InvalidHeaderError: If the API key or a header is not valid in HTTP
            InvalidPathError: If the path cannot appear in a URL
        """
        return httpx.Request(method.upper(), self.resolve_url(path), headers=self._headers())

    def build_with_body(
        self, method: str, path: str, payload: Any | None = None
    ) -> httpx.Request:
        """
        Build a request with an optional JSON body.

        When payload is None the result is identical to ``build()``: no body
        and no Content-Type header.

        Raises:
            InvalidHeaderError: If the API key or a header is not valid in HTTP
            InvalidPathError: If the path cannot appear in a URL
            SerializationError: If the payload cannot be represented as JSON
        """
        if payload is None:
            return self.build(method, path)

        headers = self._headers()
        body = serialize_payload(payload)
        headers["Content-Type"] = CONTENT_TYPE
        logger.debug(f"Built {method.upper()} {path} with JSON body")
        return httpx.Request(
            method.upper(), self.resolve_url(path), headers=headers, content=body
        )


__all__ = ["CONTENT_TYPE", "RequestBuilder", "serialize_payload"]
