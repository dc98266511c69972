# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Resource services.

Exported classes:
    ResourceService: Base class holding the request client.
    EmailService: ``/emails`` operations.
    DomainService: ``/domains`` operations.
"""

from .base import ResourceService
from .domains import DomainService
from .emails import EmailService

__all__ = ["DomainService", "EmailService", "ResourceService"]
