"""
Unit tests for the email and domain schemas.

Focus on wire names, enum values and the serialization of optional fields.
"""

import json

import pytest
from pydantic import ValidationError

from resend_client.types.domains import (
    CreateDomainResponse,
    DnsRecordType,
    DomainStatus,
    EmailDnsRecord,
)
from resend_client.types.emails import Attachment, Email, SendEmailRequest


class TestEnums:
    def test_domain_status_values(self):
        assert [s.value for s in DomainStatus] == [
            "pending",
            "verified",
            "failed",
            "temporary_failure",
            "not_started",
        ]

    def test_record_type_values(self):
        assert [t.value for t in DnsRecordType] == ["MX", "CNAME", "TXT"]

    def test_email_record_values(self):
        assert [r.value for r in EmailDnsRecord] == ["SPF", "DKIM"]


class TestWireNames:
    def test_dns_provider_alias(self):
        response = CreateDomainResponse.model_validate(
            {
                "id": "1",
                "name": "domain.com",
                "created_at": "2023-11-19T10:00:00.000Z",
                "status": "pending",
                "region": "us-east-1",
                "dnsProvider": "unknown",
            }
        )

        assert response.dns_provider == "unknown"
        data = json.loads(response.to_json())
        assert "dnsProvider" in data
        assert "dns_provider" not in data

    def test_other_fields_stay_snake_case(self):
        response = CreateDomainResponse(
            id="1",
            name="domain.com",
            created_at="2023-11-19T10:00:00.000Z",
            status=DomainStatus.PENDING,
            region="us-east-1",
            dns_provider="unknown",
        )
        assert "created_at" in json.loads(response.to_json())

    def test_from_alias(self):
        request = SendEmailRequest.model_validate(
            {"subject": "s", "from": "a@b.c", "to": ["d@e.f"]}
        )
        assert request.from_ == "a@b.c"


class TestResponseSerialization:
    def test_response_keeps_null_fields(self):
        email = Email(
            id="id",
            object="email",
            from_="from@domain.com",
            to=["to@domain.com"],
            created_at="2023-11-19T10:00:00.000Z",
            subject="My subject",
            last_event="delivered",
        )
        data = json.loads(email.to_json())

        assert data["html"] is None
        assert data["reply_to"] is None
        assert data["from"] == "from@domain.com"


class TestValidation:
    def test_to_must_be_a_list(self):
        with pytest.raises(ValidationError):
            SendEmailRequest(subject="s", from_="a@b.c", to="d@e.f")

    def test_attachment_content_bytes(self):
        attachment = Attachment(content=b"hello", filename="hello.txt")
        assert json.loads(attachment.to_json())["content"] == list(b"hello")
