# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Domain schemas and enumerations.

Field names follow the API's snake_case convention, with one exception:
the create response reports its DNS provider as ``dnsProvider``. That field
keeps its wire name through an explicit alias.
"""

from enum import Enum

from pydantic import Field

from .base import ResendModel


class DnsRecordType(str, Enum):
    """DNS record type the domain owner must publish."""

    MX = "MX"
    CNAME = "CNAME"
    TXT = "TXT"


class EmailDnsRecord(str, Enum):
    """Email authentication mechanism a DNS record belongs to."""

    SPF = "SPF"
    DKIM = "DKIM"


class DomainStatus(str, Enum):
    """Verification status of a domain or of one of its DNS records."""

    PENDING = "pending"
    VERIFIED = "verified"
    FAILED = "failed"
    TEMPORARY_FAILURE = "temporary_failure"
    NOT_STARTED = "not_started"


class CreateDomainRequest(ResendModel):
    """Body of ``POST /domains``."""

    name: str
    region: str | None = None


class DnsRecord(ResendModel):
    """A DNS record required to verify a domain."""

    record: EmailDnsRecord
    type: DnsRecordType
    name: str
    ttl: str
    status: DomainStatus
    value: str
    priority: int | None = None


class CreateDomainResponse(ResendModel):
    """Response of ``POST /domains``."""

    id: str
    name: str
    created_at: str
    status: DomainStatus
    region: str
    dns_provider: str = Field(alias="dnsProvider")


class DomainDetails(ResendModel):
    """Response of ``GET /domains/{id}``."""

    id: str
    object: str
    name: str
    created_at: str
    status: DomainStatus
    region: str
    records: list[DnsRecord]


class DomainSummary(ResendModel):
    """Entry of ``ListDomainsResponse.data``."""

    id: str
    name: str
    created_at: str
    status: DomainStatus
    region: str


class ListDomainsResponse(ResendModel):
    """Response of ``GET /domains``."""

    data: list[DomainSummary]


class VerifyDomainResponse(ResendModel):
    """Response of ``POST /domains/{id}/verify``."""

    id: str
    object: str


class DeleteDomainResponse(ResendModel):
    """Response of ``DELETE /domains/{id}``."""

    id: str
    object: str
    deleted: bool


__all__ = [
    "CreateDomainRequest",
    "CreateDomainResponse",
    "DeleteDomainResponse",
    "DnsRecord",
    "DnsRecordType",
    "DomainDetails",
    "DomainStatus",
    "DomainSummary",
    "EmailDnsRecord",
    "ListDomainsResponse",
    "VerifyDomainResponse",
]
