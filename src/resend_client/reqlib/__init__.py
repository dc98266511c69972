# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Generic request/response pipeline.

Exported classes:
    RequestBuilder: Builds authenticated requests with optional JSON bodies.
    ResponseExecutor: Sends requests and classifies outcomes.
    ReqClient: A configuration paired with a builder and an executor.
"""

from .builder import CONTENT_TYPE, RequestBuilder, serialize_payload
from .client import ReqClient
from .executor import ResponseExecutor

__all__ = [
    "CONTENT_TYPE",
    "ReqClient",
    "RequestBuilder",
    "ResponseExecutor",
    "serialize_payload",
]
