# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Type definitions: outcome variants and API schemas."""

from .base import ResendModel
from .domains import (
    CreateDomainRequest,
    CreateDomainResponse,
    DeleteDomainResponse,
    DnsRecord,
    DnsRecordType,
    DomainDetails,
    DomainStatus,
    DomainSummary,
    EmailDnsRecord,
    ListDomainsResponse,
    VerifyDomainResponse,
)
from .emails import (
    Attachment,
    Email,
    SendEmailRequest,
    SendEmailResponse,
    Tag,
)
from .outcome import (
    APIOutcome,
    ApiError,
    ErrorResponse,
    ParseError,
    Success,
    TransportFailure,
)

__all__ = [
    # Outcome
    "APIOutcome",
    "ApiError",
    # Emails
    "Attachment",
    # Domains
    "CreateDomainRequest",
    "CreateDomainResponse",
    "DeleteDomainResponse",
    "DnsRecord",
    "DnsRecordType",
    "DomainDetails",
    "DomainStatus",
    "DomainSummary",
    "Email",
    "EmailDnsRecord",
    "ErrorResponse",
    "ListDomainsResponse",
    "ParseError",
    "ResendModel",
    "SendEmailRequest",
    "SendEmailResponse",
    "Success",
    "Tag",
    "TransportFailure",
    "VerifyDomainResponse",
]
