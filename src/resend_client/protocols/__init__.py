# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Protocol definitions for pluggable components.

Available protocols:
- RequestClientProtocol: Interface resource services use to build and
  execute requests
"""

from .client import RequestClientProtocol

__all__ = ["RequestClientProtocol"]
