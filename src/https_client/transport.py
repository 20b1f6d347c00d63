"""Transport capability: one HTTP exchange per call, backed by httpx."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Mapping, Protocol

import httpx

from .exceptions import InitializationError, InvalidURLError, TransportError
from .request_options import PreparedRequest

MAX_REDIRECTS = 10


@dataclass(frozen=True)
class Exchange:
    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict)
    body: str = ""
    info: Mapping[str, Any] = field(default_factory=dict)


class Transport(Protocol):
    def exchange(self, request: PreparedRequest, *, max_redirects: int = MAX_REDIRECTS) -> Exchange:
        """Perform one exchange or raise `TransportError`."""
        ...


class HttpxTransport:
    """Opens a fresh `httpx.Client` for every exchange and closes it on every path.

    The whole exchange, redirects and body included, must finish within
    ``request.timeout`` seconds. The body is read in chunks so that a server
    trickling bytes cannot stretch the exchange past that deadline.
    """

    def __init__(
        self,
        *,
        transport: httpx.BaseTransport | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._transport = transport
        self._clock = clock

    def _client(self, request: PreparedRequest, max_redirects: int) -> httpx.Client:
        try:
            return httpx.Client(
                timeout=httpx.Timeout(float(request.timeout), connect=float(request.connect_timeout)),
                verify=request.verify,
                follow_redirects=True,
                max_redirects=max_redirects,
                trust_env=False,
                http1=True,
                http2=False,
                transport=self._transport,
            )
        except OSError as exc:
            raise InitializationError(f"Failed to initialize HTTP transport: {exc}", cause=exc) from exc

    def _failure(self, request: PreparedRequest, reason: str, cause: Exception | None = None) -> TransportError:
        return TransportError(
            f"{request.method} {request.url}: {reason}",
            method=request.method,
            url=request.url,
            cause=cause,
        )

    def _check_deadline(self, request: PreparedRequest, deadline: float) -> None:
        if self._clock() > deadline:
            raise self._failure(request, f"Total timeout of {request.timeout}s exceeded")

    def exchange(self, request: PreparedRequest, *, max_redirects: int = MAX_REDIRECTS) -> Exchange:
        headers = [(name.encode("utf-8"), value.encode("utf-8")) for name, value in request.header_pairs()]
        started = self._clock()
        deadline = started + request.timeout

        with self._client(request, max_redirects) as client:
            try:
                with client.stream(
                    request.method,
                    request.url,
                    headers=headers,
                    content=request.body.encode("utf-8") if request.body else None,
                ) as response:
                    self._check_deadline(request, deadline)
                    chunks: list[bytes] = []
                    for chunk in response.iter_bytes():
                        chunks.append(chunk)
                        self._check_deadline(request, deadline)
                    body = b"".join(chunks).decode(response.encoding or "utf-8", errors="replace")
            except httpx.InvalidURL as exc:
                raise InvalidURLError(f"Invalid URL: {exc}", method=request.method, url=request.url, cause=exc) from exc
            except httpx.RequestError as exc:
                raise self._failure(request, str(exc) or type(exc).__name__, cause=exc) from exc

        return Exchange(
            status_code=response.status_code,
            headers=MappingProxyType(dict(response.headers)),
            body=body,
            info=MappingProxyType(
                {
                    "url": str(response.url),
                    "method": request.method,
                    "http_version": response.http_version,
                    "elapsed": self._clock() - started,
                    "redirect_count": len(response.history),
                    "content_type": response.headers.get("content-type"),
                }
            ),
        )
