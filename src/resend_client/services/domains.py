# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Domain service: create, verify, get, list and delete sending domains."""

from ..types.domains import (
    CreateDomainRequest,
    CreateDomainResponse,
    DeleteDomainResponse,
    DomainDetails,
    ListDomainsResponse,
    VerifyDomainResponse,
)
from ..types.outcome import APIOutcome
from .base import ResourceService


class DomainService(ResourceService):
    """Client for ``/domains`` endpoints."""

    async def create(
        self, params: CreateDomainRequest
    ) -> APIOutcome[CreateDomainResponse]:
        """Register a new domain (``POST /domains``)."""
        request = self.req_client.build_with_body("POST", "/domains", params)
        return await self.req_client.execute(request, CreateDomainResponse)

    async def verify(self, domain_id: str) -> APIOutcome[VerifyDomainResponse]:
        """Start verification of a domain (``POST /domains/{id}/verify``)."""
        request = self.req_client.build("POST", f"/domains/{domain_id}/verify")
        return await self.req_client.execute(request, VerifyDomainResponse)

    async def get(self, domain_id: str) -> APIOutcome[DomainDetails]:
        """Retrieve a domain with its DNS records (``GET /domains/{id}``)."""
        request = self.req_client.build("GET", f"/domains/{domain_id}")
        return await self.req_client.execute(request, DomainDetails)

    async def list(self) -> APIOutcome[ListDomainsResponse]:
        """List all domains (``GET /domains``)."""
        request = self.req_client.build("GET", "/domains")
        return await self.req_client.execute(request, ListDomainsResponse)

    async def delete(self, domain_id: str) -> APIOutcome[DeleteDomainResponse]:
        """Remove a domain (``DELETE /domains/{id}``)."""
        request = self.req_client.build("DELETE", f"/domains/{domain_id}")
        return await self.req_client.execute(request, DeleteDomainResponse)


__all__ = ["DomainService"]
