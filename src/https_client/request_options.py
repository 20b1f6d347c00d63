"""Request options and their validation."""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from typing import Any, Mapping, Sequence

from .exceptions import InvalidBodyError, InvalidHeaderError, InvalidURLError
from .security import is_valid_absolute_url

logger = logging.getLogger(__name__)

VALID_METHODS = frozenset({"GET", "POST", "PUT", "DELETE", "PATCH", "HEAD"})

DEFAULT_METHOD = "GET"
DEFAULT_TIMEOUT = 10
DEFAULT_CONNECT_TIMEOUT = 5
DEFAULT_VERIFY = True
DEFAULT_RETRIES = 0


@dataclass(frozen=True)
class RequestOptions:
    """Caller-supplied options. ``None`` means the option was not given."""

    url: Any = None
    method: Any = None
    headers: Any = None
    body: Any = None
    timeout: Any = None
    connect_timeout: Any = None
    verify: Any = None
    retries: Any = None

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> "RequestOptions":
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in options.items() if key in known})


@dataclass(frozen=True)
class PreparedRequest:
    url: str
    method: str = DEFAULT_METHOD
    headers: tuple[str, ...] = ()
    body: str = ""
    timeout: int = DEFAULT_TIMEOUT
    connect_timeout: int = DEFAULT_CONNECT_TIMEOUT
    verify: bool = DEFAULT_VERIFY
    retries: int = DEFAULT_RETRIES

    @property
    def attempts(self) -> int:
        return 1 + self.retries

    def header_pairs(self) -> list[tuple[str, str]]:
        pairs: list[tuple[str, str]] = []
        for line in self.headers:
            name, _, value = line.partition(":")
            pairs.append((name.strip(), value.strip()))
        return pairs


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _normalize_method(method: Any) -> str:
    if not isinstance(method, str):
        return DEFAULT_METHOD
    upper = method.strip().upper()
    if upper not in VALID_METHODS:
        return DEFAULT_METHOD
    return upper


def normalize_headers(headers: Any) -> tuple[str, ...]:
    """Turn a header mapping or a sequence of `Name: value` lines into an ordered tuple of lines."""
    if headers is None:
        return ()
    if isinstance(headers, Mapping):
        lines: list[str] = []
        for key, value in headers.items():
            if not isinstance(value, str):
                raise InvalidHeaderError(
                    f"Invalid header value for {key}. Headers should be string values."
                )
            lines.append(f"{key}: {value}")
        return tuple(lines)
    if isinstance(headers, (str, bytes)) or not isinstance(headers, Sequence):
        logger.warning("Ignoring headers of unsupported type %s", type(headers).__name__)
        return ()
    for line in headers:
        if not isinstance(line, str):
            raise InvalidHeaderError("Invalid header provided. Headers should be string values.")
        if ":" not in line:
            raise InvalidHeaderError(f"Invalid header provided. Expected 'Name: value', got {line!r}.")
    return tuple(headers)


def _positive_int(value: Any, default: int) -> int:
    if not _is_int(value) or value <= 0:
        return default
    return value


def prepare_request(options: RequestOptions | Mapping[str, Any]) -> PreparedRequest:
    """Validate ``options`` and return the normalized request.

    Only the URL, the headers and the body can be rejected. Every other option
    falls back to its default when missing or invalid.
    """
    if not isinstance(options, RequestOptions):
        options = RequestOptions.from_mapping(options)

    if not is_valid_absolute_url(options.url):
        raise InvalidURLError("Invalid or no URL provided.", url=options.url if isinstance(options.url, str) else None)

    headers = normalize_headers(options.headers)

    body = "" if options.body is None else options.body
    if not isinstance(body, str):
        raise InvalidBodyError("Invalid body provided. Body should be a string.")

    retries = options.retries if _is_int(options.retries) and options.retries >= 0 else DEFAULT_RETRIES

    return PreparedRequest(
        url=options.url,
        method=_normalize_method(options.method),
        headers=headers,
        body=body,
        timeout=_positive_int(options.timeout, DEFAULT_TIMEOUT),
        connect_timeout=_positive_int(options.connect_timeout, DEFAULT_CONNECT_TIMEOUT),
        verify=options.verify if isinstance(options.verify, bool) else DEFAULT_VERIFY,
        retries=retries,
    )
