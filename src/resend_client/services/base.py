# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Base class for resource services."""

from ..protocols.client import RequestClientProtocol


class ResourceService:
    """
    Thin wrapper mapping resource operations onto the request client.

    Each operation builds exactly one request and executes it once.

    Attributes:
        req_client: The request client this service owns
    """

    def __init__(self, req_client: RequestClientProtocol):
        self.req_client = req_client


__all__ = ["ResourceService"]
