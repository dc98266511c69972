# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Exception classes for the resend client library.

Only problems detected on the caller's side are raised as exceptions: an
invalid configuration, or a request that cannot be built. Everything that
happens after a request leaves the process (transport failures, API errors,
unparseable bodies) is returned as an ``APIOutcome`` value instead.

All exceptions inherit from ResendClientError, making it easy to catch
every library-raised error with a single except clause.
"""


class ResendClientError(Exception):
    """Base exception for all resend client errors.

    Example:
        try:
            outcome = await client.emails.send(request)
        except ResendClientError as e:
            logger.error(f"Could not send email: {e}")
    """

    pass


class ConfigurationError(ResendClientError):
    """Raised when client configuration is invalid.

    Common causes include:
    - An empty API key
    - A base URL without an http/https scheme or without a host
    - A missing RESEND_API_KEY environment variable in ``from_env()``

    Example:
        try:
            client = Client.from_env()
        except ConfigurationError as e:
            logger.error(f"Invalid configuration: {e}")
            raise SystemExit(1)
    """

    pass


class RequestConstructionError(ResendClientError):
    """Raised when an outbound request cannot be built.

    This is a caller-side error and is always raised before any network
    activity takes place.
    """

    pass


class InvalidHeaderError(RequestConstructionError):
    """Raised when a header name or value cannot appear in an HTTP request.

    Attributes:
        header_name: The offending header name. The value is never stored,
            since it may be the API key.

    Example:
        try:
            request = req_client.build("GET", "/domains")
        except InvalidHeaderError as e:
            logger.error(f"Bad header {e.header_name!r}")
    """

    def __init__(self, message: str, header_name: str | None = None):
        super().__init__(message)
        self.header_name = header_name


class InvalidPathError(RequestConstructionError):
    """Raised when a request path cannot be placed in a URL.

    Attributes:
        path: The offending path.

    Example:
        try:
            request = req_client.build("GET", f"/domains/{domain_id}")
        except InvalidPathError as e:
            logger.error(f"Bad domain id in {e.path!r}")
    """

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class SerializationError(RequestConstructionError):
    """Raised when a request payload cannot be serialized to JSON.

    Attributes:
        payload_type: Name of the payload's type.
    """

    def __init__(self, message: str, payload_type: str | None = None):
        super().__init__(message)
        self.payload_type = payload_type
