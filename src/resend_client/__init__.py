# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Resend Client - Typed async client for the Resend transactional email API.

Every API call returns an outcome value instead of raising, so the four
ways a call can end are explicit in the type:

    - Success: the expected response body
    - ApiError: a structured error reported by the API
    - ParseError: a success status with a body of the wrong shape
    - TransportFailure: no response, or an error status without a
      structured error body

Quick Start:
    >>> from resend_client import Client, SendEmailRequest, Success
    >>>
    >>> async with Client("re_123") as client:
    ...     outcome = await client.emails.send(
    ...         SendEmailRequest(
    ...             subject="Hello",
    ...             from_="me@example.com",
    ...             to=["you@example.com"],
    ...         )
    ...     )
    ...     if isinstance(outcome, Success):
    ...         print(outcome.value.id)

Main Exports:
    - Client: Facade with email and domain services
    - ReqClient, RequestBuilder, ResponseExecutor: The request pipeline
    - ClientConfig: Configuration options
    - APIOutcome and its variants: Call results

Note: Prometheus metrics require the 'prometheus' extra. Install with:
    pip install resend-client[prometheus]

Version: 0.1.0
"""

from .config import VERSION

__version__ = VERSION

from .client import Client
from .config import DEFAULT_BASE_URL, USER_AGENT, ClientConfig
from .exceptions import (
    ConfigurationError,
    InvalidHeaderError,
    InvalidPathError,
    RequestConstructionError,
    ResendClientError,
    SerializationError,
)
from .protocols import RequestClientProtocol
from .reqlib import ReqClient, RequestBuilder, ResponseExecutor
from .services import DomainService, EmailService
from .types import (
    APIOutcome,
    ApiError,
    Attachment,
    CreateDomainRequest,
    CreateDomainResponse,
    DeleteDomainResponse,
    DnsRecord,
    DnsRecordType,
    DomainDetails,
    DomainStatus,
    DomainSummary,
    Email,
    EmailDnsRecord,
    ErrorResponse,
    ListDomainsResponse,
    ParseError,
    SendEmailRequest,
    SendEmailResponse,
    Success,
    Tag,
    TransportFailure,
    VerifyDomainResponse,
)

__all__ = [
    "DEFAULT_BASE_URL",
    "USER_AGENT",
    # Outcome
    "APIOutcome",
    "ApiError",
    # Email types
    "Attachment",
    # Facade
    "Client",
    # Configuration
    "ClientConfig",
    "ConfigurationError",
    # Domain types
    "CreateDomainRequest",
    "CreateDomainResponse",
    "DeleteDomainResponse",
    "DnsRecord",
    "DnsRecordType",
    "DomainDetails",
    "DomainService",
    "DomainStatus",
    "DomainSummary",
    "Email",
    "EmailDnsRecord",
    # Services
    "EmailService",
    "ErrorResponse",
    "InvalidHeaderError",
    "InvalidPathError",
    "ListDomainsResponse",
    "ParseError",
    # Pipeline
    "ReqClient",
    "RequestBuilder",
    # Protocols
    "RequestClientProtocol",
    "RequestConstructionError",
    # Exceptions
    "ResendClientError",
    "ResponseExecutor",
    "SendEmailRequest",
    "SendEmailResponse",
    "SerializationError",
    "Success",
    "Tag",
    "TransportFailure",
    "VerifyDomainResponse",
]
