"""Small synchronous HTTP(S) client with validated options and bounded retries."""

from .client import HTTPSClient, execute, request
from .exceptions import (
    DecodeError,
    HTTPSError,
    HTTPSValidationError,
    HTTPStatusError,
    InitializationError,
    InvalidBodyError,
    InvalidHeaderError,
    InvalidURLError,
    TransportError,
)
from .request_options import PreparedRequest, RequestOptions, prepare_request
from .response import HTTPSResponse
from .transport import Exchange, HttpxTransport, Transport

__version__ = "0.1.0"

__all__ = [
    "DecodeError",
    "Exchange",
    "HTTPSClient",
    "HTTPSError",
    "HTTPSResponse",
    "HTTPSValidationError",
    "HTTPStatusError",
    "HttpxTransport",
    "InitializationError",
    "InvalidBodyError",
    "InvalidHeaderError",
    "InvalidURLError",
    "PreparedRequest",
    "RequestOptions",
    "Transport",
    "TransportError",
    "execute",
    "prepare_request",
    "request",
]
