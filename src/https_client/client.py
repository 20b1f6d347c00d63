"""Synchronous HTTP(S) client with option validation and bounded retries."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Mapping

from .exceptions import HTTPStatusError, TransportError
from .request_options import (
    PreparedRequest,
    RequestOptions,
    normalize_headers,
    prepare_request,
)
from .response import HTTPSResponse
from .security import sanitize_header_lines
from .transport import MAX_REDIRECTS, HttpxTransport, Transport

logger = logging.getLogger(__name__)


def _header_name(line: str) -> str:
    return line.partition(":")[0].strip().lower()


def _resolve_options(
    options: RequestOptions | Mapping[str, Any] | None,
    overrides: Mapping[str, Any],
) -> RequestOptions:
    if options is None:
        resolved = RequestOptions()
    elif isinstance(options, RequestOptions):
        resolved = options
    else:
        resolved = RequestOptions.from_mapping(options)
    return replace(resolved, **overrides) if overrides else resolved


class HTTPSClient:
    """Validates request options and performs the exchange with bounded retries.

    Only transport failures are retried, immediately and without backoff. A
    response with a status of 400 or above fails at once, whatever retries are
    left.
    """

    max_redirects = MAX_REDIRECTS

    def __init__(
        self,
        *,
        headers: Mapping[str, str] | list[str] | None = None,
        transport: Transport | None = None,
    ) -> None:
        self._default_headers = normalize_headers(headers)
        self._transport = transport or HttpxTransport()

    def prepare(self, options: RequestOptions | Mapping[str, Any]) -> PreparedRequest:
        request = prepare_request(options)
        if not self._default_headers:
            return request
        overridden = {_header_name(line) for line in request.headers}
        defaults = tuple(line for line in self._default_headers if _header_name(line) not in overridden)
        return replace(request, headers=defaults + request.headers)

    def execute(self, options: RequestOptions | Mapping[str, Any] | None = None, **kwargs: Any) -> HTTPSResponse:
        request = self.prepare(_resolve_options(options, kwargs))
        max_attempts = request.attempts
        last_error = ""
        last_exc: TransportError | None = None

        for attempt in range(1, max_attempts + 1):
            logger.debug(
                "%s %s attempt %d/%d headers=%s",
                request.method,
                request.url,
                attempt,
                max_attempts,
                sanitize_header_lines(request.headers),
            )
            try:
                exchange = self._transport.exchange(request, max_redirects=self.max_redirects)
            except TransportError as exc:
                last_exc = exc
                last_error = exc.message
                logger.error("Transport error (attempt %d/%d): %s", attempt, max_attempts, last_error)
                continue

            if exchange.status_code >= 400:
                message = (
                    f"HTTP error on {request.method} {request.url}: "
                    f"Received status code {exchange.status_code}"
                )
                logger.error(message)
                raise HTTPStatusError(
                    message,
                    method=request.method,
                    url=request.url,
                    status_code=exchange.status_code,
                    headers=exchange.headers,
                    body=exchange.body,
                    attempts=attempt,
                )

            return HTTPSResponse.from_exchange(exchange)

        raise TransportError(
            last_error or "Unknown error occurred during HTTP exchange.",
            method=request.method,
            url=request.url,
            attempts=max_attempts,
            cause=last_exc,
        ) from last_exc

    def request(self, options: RequestOptions | Mapping[str, Any] | None = None, **kwargs: Any) -> str:
        """Perform the request and return the raw response body."""
        return self.execute(options, **kwargs).as_text()


def execute(options: RequestOptions | Mapping[str, Any] | None = None, **kwargs: Any) -> HTTPSResponse:
    return HTTPSClient().execute(options, **kwargs)


def request(options: RequestOptions | Mapping[str, Any] | None = None, **kwargs: Any) -> str:
    return HTTPSClient().request(options, **kwargs)
