# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Outcome types returned by the response executor.

Every executed request produces exactly one of four variants:

* Success: the API answered with a non-error status and a body of the
  expected shape.
* ApiError: the API answered with an error status and a structured error body.
* ParseError: the API answered with a non-error status, but the body did not
  match the expected shape.
* TransportFailure: no response was received, or the API answered with an
  error status and a body that is not a structured error.

The variants are plain frozen dataclasses, so callers can branch on them
with ``match``:

    match await client.emails.send(request):
        case Success(value):
            print(value.id)
        case ApiError(name=name, message=message):
            print(f"{name}: {message}")
        case ParseError() | TransportFailure():
            ...
"""

from dataclasses import dataclass, field
from typing import Generic, TypeVar, Union

import httpx
from pydantic import BaseModel, ValidationError

T = TypeVar("T")


class ErrorResponse(BaseModel):
    """Structured error body sent by the API with error statuses."""

    name: str
    status_code: int
    message: str


@dataclass(frozen=True)
class Success(Generic[T]):
    """The response parsed as the requested type."""

    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class ApiError:
    """The API reported a failure with a structured error body.

    Attributes:
        name: Machine-readable error name (e.g. ``validation_error``)
        status_code: Status code as reported in the error body
        message: Human-readable description
    """

    name: str
    status_code: int
    message: str

    @property
    def ok(self) -> bool:
        return False

    @classmethod
    def from_response(cls, response: ErrorResponse) -> "ApiError":
        return cls(
            name=response.name,
            status_code=response.status_code,
            message=response.message,
        )


@dataclass(frozen=True)
class ParseError:
    """A success response whose body did not match the expected schema.

    Attributes:
        error: The validation error raised while parsing
        body: The raw response text, kept for diagnostics
    """

    error: ValidationError
    body: str = field(default="", repr=False)

    @property
    def ok(self) -> bool:
        return False


@dataclass(frozen=True)
class TransportFailure:
    """The request failed below the API level.

    ``error`` is an ``httpx.HTTPStatusError`` when an error status came back
    with an unstructured body, otherwise the ``httpx.TransportError`` that
    prevented a response.
    """

    error: httpx.HTTPError

    @property
    def ok(self) -> bool:
        return False

    @property
    def status_code(self) -> int | None:
        """HTTP status of the failed response, or None if none was received."""
        if isinstance(self.error, httpx.HTTPStatusError):
            return self.error.response.status_code
        return None


APIOutcome = Union[Success[T], ApiError, ParseError, TransportFailure]


__all__ = [
    "APIOutcome",
    "ApiError",
    "ErrorResponse",
    "ParseError",
    "Success",
    "TransportFailure",
]
