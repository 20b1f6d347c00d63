"""Client-specific exceptions."""

from __future__ import annotations

from typing import Mapping


class HTTPSError(Exception):
    """Base exception for all https-client failures."""

    def __init__(
        self,
        message: str,
        *,
        method: str | None = None,
        url: str | None = None,
        status_code: int | None = None,
        headers: Mapping[str, str] | None = None,
        body: str | None = None,
        attempts: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.method = method
        self.url = url
        self.status_code = status_code
        self.headers = dict(headers) if headers is not None else {}
        self.body = body
        self.attempts = attempts
        self.cause = cause

    @property
    def message(self) -> str:
        return str(self.args[0])


class HTTPSValidationError(HTTPSError):
    """Raised when request options are rejected before any I/O."""


class InvalidURLError(HTTPSValidationError):
    """Raised for a missing or malformed URL."""


class InvalidHeaderError(HTTPSValidationError):
    """Raised when a header entry is not a string or not in `Name: value` form."""


class InvalidBodyError(HTTPSValidationError):
    """Raised when the request body is not a string."""


class TransportError(HTTPSError):
    """Raised for connection, DNS, TLS and timeout failures."""


class HTTPStatusError(HTTPSError):
    """Raised when the server answers with a status code of 400 or above."""


class DecodeError(HTTPSError):
    """Raised when a decoded projection is requested for a non-JSON body."""


class InitializationError(HTTPSError):
    """Raised when the underlying transport cannot be set up."""
