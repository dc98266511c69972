# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Client configuration for the resend client library.

This module provides the configuration class owned by each request client,
along with the library-wide defaults (base URL, user agent, version).
"""

import os
from dataclasses import dataclass, field, replace
from typing import Any

import httpx

from .exceptions import ConfigurationError

VERSION = "0.1.0"
DEFAULT_BASE_URL = "https://api.resend.com"
USER_AGENT = f"resend-client/{VERSION}"

API_KEY_ENV = "RESEND_API_KEY"
BASE_URL_ENV = "RESEND_BASE_URL"


@dataclass
class ClientConfig:
    """
    Configuration for a single request client.

    Each ReqClient owns exactly one ClientConfig. The Client facade hands every
    resource service its own copy, so changing one service's base URL never
    affects another.
    """

    api_key: str = field(repr=False)
    """Secret API key. Cannot be changed after construction."""

    base_url: str = DEFAULT_BASE_URL
    """Base URL of the API. Only scheme, host and port are used.

    Settable so tests can redirect traffic to a mock server; production code
    should leave it alone after construction.
    """

    user_agent: str = USER_AGENT
    """Value of the User-Agent header, ``<product>/<version>``."""

    headers: dict[str, str] = field(default_factory=dict)
    """Extra headers sent with every request. Accept, User-Agent and
    Authorization always override entries with the same name."""

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.api_key:
            raise ConfigurationError("api_key must not be empty")
        _validate_base_url(self.base_url)

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "api_key" and "api_key" in self.__dict__:
            raise AttributeError("api_key cannot be changed after construction")
        if name == "base_url":
            _validate_base_url(value)
        super().__setattr__(name, value)

    @classmethod
    def from_env(cls, **overrides: Any) -> "ClientConfig":
        """Build a configuration from RESEND_API_KEY and RESEND_BASE_URL.

        Keyword arguments override the environment.
        """
        api_key = overrides.pop("api_key", None) or os.getenv(API_KEY_ENV)
        if api_key is None or api_key.strip() == "":
            raise ConfigurationError(
                f"Missing required environment variable: {API_KEY_ENV}"
            )
        base_url = overrides.pop("base_url", None) or os.getenv(
            BASE_URL_ENV, DEFAULT_BASE_URL
        )
        return cls(api_key=api_key, base_url=base_url, **overrides)

    def copy(self) -> "ClientConfig":
        """Return an independent copy, including the header mapping."""
        return replace(self, headers=dict(self.headers))


def _validate_base_url(base_url: str) -> None:
    try:
        url = httpx.URL(base_url)
    except (httpx.InvalidURL, TypeError) as e:
        raise ConfigurationError(f"Invalid base_url {base_url!r}: {e}") from e
    if url.scheme not in ("http", "https") or not url.host:
        raise ConfigurationError(
            f"base_url must be an absolute http(s) URL, got {base_url!r}"
        )


__all__ = [
    "API_KEY_ENV",
    "BASE_URL_ENV",
    "DEFAULT_BASE_URL",
    "USER_AGENT",
    "VERSION",
    "ClientConfig",
]
