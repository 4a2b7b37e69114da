import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field

from extensions.ext_logging import trace_id_generator, trace_id_var

from .models import Request, Response
from .types import Transport

Decorator = Callable[[Request], Request]


@dataclass(frozen=True)
class _DecoratingTransport:
    """Transport that rewrites the request, then delegates to ``inner``."""

    inner: Transport
    decorate: Decorator

    async def send(self, request: Request) -> Response:
        return await self.inner.send(self.decorate(request))


@dataclass(frozen=True)
class BasicAuthMiddleware:
    """Sets ``Authorization: Basic base64(username:password)``."""

    username: str
    password: str = field(repr=False)

    def __call__(self, request: Request) -> Request:
        return request.with_basic_auth(self.username, self.password)

    def wrap(self, inner: Transport) -> Transport:
        return _DecoratingTransport(inner, self)


@dataclass(frozen=True)
class APIKeyMiddleware:
    """Sets ``Authorization: Bearer <api_key>``."""

    api_key: str = field(repr=False)

    def __call__(self, request: Request) -> Request:
        return request.with_headers(Authorization=f"Bearer {self.api_key}")

    def wrap(self, inner: Transport) -> Transport:
        return _DecoratingTransport(inner, self)


@dataclass(frozen=True)
class HeadersMiddleware:
    headers: dict[str, str]

    def __call__(self, request: Request) -> Request:
        return request.with_header_items(self.headers)

    def wrap(self, inner: Transport) -> Transport:
        return _DecoratingTransport(inner, self)


@dataclass(frozen=True)
class TimeoutMiddleware:
    timeout: float

    def __call__(self, request: Request) -> Request:
        return request.with_timeout(self.timeout)

    def wrap(self, inner: Transport) -> Transport:
        return _DecoratingTransport(inner, self)


@dataclass(frozen=True)
class _LoggingTransport:
    inner: Transport
    log: logging.Logger

    async def send(self, request: Request) -> Response:
        token = None
        if trace_id_var.get() is None:
            token = trace_id_var.set(trace_id_generator())
        try:
            self.log.info("-> %s %s", request.method, request.url)
            start_time = time.perf_counter()
            try:
                response = await self.inner.send(request)
            except Exception as e:
                self.log.warning("<- %s %s failed: %s", request.method, request.url, e)
                raise
            latency_ms = int((time.perf_counter() - start_time) * 1000)
            self.log.info("<- %s (%sms)", response.status_code, latency_ms)
            return response
        finally:
            if token is not None:
                trace_id_var.reset(token)


@dataclass(frozen=True)
class LoggingMiddleware:
    logger: logging.Logger | None = None

    def wrap(self, inner: Transport) -> Transport:
        return _LoggingTransport(inner, self.logger or logging.getLogger(__name__))
