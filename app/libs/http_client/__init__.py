"""HTTP Client module."""

from .client import HttpClient
from .exceptions import ConstructionError, HttpClientError, ReadError, TransportError
from .middleware import (
    APIKeyMiddleware,
    BasicAuthMiddleware,
    HeadersMiddleware,
    LoggingMiddleware,
    TimeoutMiddleware,
)
from .models import Request, Response
from .transport import HttpxTransport
from .types import Middleware, SendFn, Transport, TransportFunc

__all__ = [
    "HttpClient",
    "HttpxTransport",
    "Request",
    "Response",
    "Transport",
    "TransportFunc",
    "SendFn",
    "Middleware",
    "HttpClientError",
    "ConstructionError",
    "TransportError",
    "ReadError",
    "BasicAuthMiddleware",
    "APIKeyMiddleware",
    "HeadersMiddleware",
    "TimeoutMiddleware",
    "LoggingMiddleware",
]
