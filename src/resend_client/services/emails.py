# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Email service: send and retrieve emails."""

from ..types.emails import Email, SendEmailRequest, SendEmailResponse
from ..types.outcome import APIOutcome
from .base import ResourceService


class EmailService(ResourceService):
    """Client for ``/emails`` endpoints."""

    async def send(self, params: SendEmailRequest) -> APIOutcome[SendEmailResponse]:
        """Send an email (``POST /emails``)."""
        request = self.req_client.build_with_body("POST", "/emails", params)
        return await self.req_client.execute(request, SendEmailResponse)

    async def get(self, email_id: str) -> APIOutcome[Email]:
        """Retrieve a sent email (``GET /emails/{id}``)."""
        request = self.req_client.build("GET", f"/emails/{email_id}")
        return await self.req_client.execute(request, Email)


__all__ = ["EmailService"]
