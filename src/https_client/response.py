"""Response value and its text/mapping/object projections."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from types import MappingProxyType, SimpleNamespace
from typing import Any, Callable, Mapping

from . import status_codes
from .exceptions import DecodeError
from .transport import Exchange


@dataclass(frozen=True)
class HTTPSResponse:
    status_code: int
    body: str = ""
    headers: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    info: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def from_exchange(cls, exchange: Exchange) -> "HTTPSResponse":
        return cls(
            status_code=exchange.status_code,
            body=exchange.body,
            headers=MappingProxyType(dict(exchange.headers)),
            info=MappingProxyType(dict(exchange.info)),
        )

    def __str__(self) -> str:
        return self.body

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def as_text(self) -> str:
        return self.body

    def as_mapping(self) -> dict[str, Any] | list[Any]:
        """Decode the body into plain dicts and lists."""
        return self._decode()

    def as_object(self) -> SimpleNamespace | list[Any]:
        """Decode the body with JSON objects exposed through attribute access."""
        return self._decode(object_hook=lambda pairs: SimpleNamespace(**pairs))

    def _decode(self, object_hook: Callable[[dict[str, Any]], Any] | None = None) -> Any:
        try:
            decoded = json.loads(self.body, object_hook=object_hook)
        except json.JSONDecodeError as exc:
            raise DecodeError(f"Error decoding JSON: {exc}", body=self.body, cause=exc) from exc
        if not isinstance(decoded, (dict, list, SimpleNamespace)):
            raise DecodeError(
                f"Error decoding JSON: expected an object or array, got {type(decoded).__name__}",
                body=self.body,
            )
        return decoded

    @property
    def status_text(self) -> str:
        return status_codes.status_text(self.status_code)

    @property
    def status_class(self) -> str:
        return status_codes.status_class(self.status_code)

    @property
    def status_class_text(self) -> str:
        return status_codes.status_class_text(self.status_code)

    @property
    def status_class_description(self) -> str:
        return status_codes.status_class_description(self.status_code)

    @property
    def status_class_color(self) -> str:
        return status_codes.status_class_color(self.status_code)

    @property
    def status_class_icon(self) -> str:
        return status_codes.status_class_icon(self.status_code)
