from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .models import Request, Response

SendFn = Callable[["Request"], Awaitable["Response"]]


@runtime_checkable
class Transport(Protocol):
    """Executes a single request and returns its response or raises."""

    async def send(self, request: "Request") -> "Response": ...


@runtime_checkable
class Middleware(Protocol):
    """Wraps a transport with another transport."""

    def wrap(self, inner: Transport) -> Transport: ...


class TransportFunc:
    """Adapts a plain ``async def send(request)`` into a :class:`Transport`."""

    __slots__ = ("_fn",)

    def __init__(self, fn: SendFn):
        self._fn = fn

    async def send(self, request: "Request") -> "Response":
        return await self._fn(request)

    def __repr__(self) -> str:
        return f"TransportFunc({getattr(self._fn, '__qualname__', self._fn)!r})"
