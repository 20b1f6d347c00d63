"""URL validation and header redaction helpers."""

from __future__ import annotations

from typing import Iterable

from pydantic import AnyUrl, TypeAdapter, ValidationError


SENSITIVE_HEADERS = {
    "authorization",
    "proxy-authorization",
    "cookie",
    "x-api-key",
}

_URL_ADAPTER: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)


def is_valid_absolute_url(url: object) -> bool:
    """Return True when ``url`` is a string holding an absolute URL with a host."""
    if not isinstance(url, str) or not url:
        return False
    if any(ch.isspace() or ord(ch) < 32 or ord(ch) == 127 for ch in url):
        return False
    try:
        parsed = _URL_ADAPTER.validate_python(url)
    except ValidationError:
        return False
    return bool(parsed.scheme) and bool(parsed.host)


def sanitize_header_lines(headers: Iterable[str]) -> list[str]:
    """Return `Name: value` header lines with sensitive values redacted for logging."""
    redacted: list[str] = []
    for line in headers:
        name, sep, _ = line.partition(":")
        if sep and name.strip().lower() in SENSITIVE_HEADERS:
            redacted.append(f"{name}: [REDACTED]")
        else:
            redacted.append(line)
    return redacted
