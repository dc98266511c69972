# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Email schemas.

Request models leave optional fields as None when unset; the request builder
drops None fields from the JSON body, so absent options never reach the wire
as ``null``.
"""

from pydantic import Field, field_serializer

from .base import ResendModel


class Tag(ResendModel):
    """Custom name/value tag attached to a sent email."""

    name: str
    value: str


class Attachment(ResendModel):
    """
    File attached to a sent email.

    Attributes:
        content: Raw file content, sent as a JSON array of byte values
        filename: Name shown to the recipient
        path: Remote location of the file, as an alternative to content
    """

    content: bytes
    filename: str
    path: str | None = None

    @field_serializer("content")
    def _serialize_content(self, content: bytes) -> list[int]:
        return list(content)


class SendEmailRequest(ResendModel):
    """Body of ``POST /emails``."""

    subject: str
    from_: str = Field(alias="from")
    to: list[str]
    cc: list[str] | None = None
    bcc: list[str] | None = None
    reply_to: str | None = None
    html: str | None = None
    text: str | None = None
    tags: list[Tag] | None = None
    attachments: list[Attachment] | None = None
    headers: dict[str, str] | None = None


class SendEmailResponse(ResendModel):
    """Response of ``POST /emails``."""

    id: str


class Email(ResendModel):
    """Response of ``GET /emails/{id}``."""

    id: str
    object: str
    from_: str = Field(alias="from")
    to: list[str]
    created_at: str
    subject: str
    html: str | None = None
    text: str | None = None
    bcc: list[str | None] | None = None
    cc: list[str | None] | None = None
    reply_to: list[str | None] | None = None
    last_event: str


__all__ = [
    "Attachment",
    "Email",
    "SendEmailRequest",
    "SendEmailResponse",
    "Tag",
]
