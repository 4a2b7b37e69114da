from collections.abc import AsyncIterator
from typing import Any

import httpx

from .exceptions import TransportError
from .models import Request, Response


class _HttpxBodyStream(httpx.AsyncByteStream):
    def __init__(self, response: httpx.Response):
        self._response = response

    async def __aiter__(self) -> AsyncIterator[bytes]:
        async for chunk in self._response.aiter_bytes():
            yield chunk

    async def aclose(self) -> None:
        await self._response.aclose()


class HttpxTransport:
    """Sends requests over the network with an ``httpx.AsyncClient``."""

    def __init__(self, client: httpx.AsyncClient | None = None, timeout: float = 30.0):
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)
        self._timeout = timeout

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpxTransport":
        return self

    async def __aexit__(self, *_args: Any) -> None:
        await self.aclose()

    async def send(self, request: Request) -> Response:
        http_request = self._client.build_request(
            method=request.method,
            url=request.url,
            headers=request.headers,
            content=request.body or None,
            timeout=request.timeout if request.timeout is not None else self._timeout,
        )
        try:
            http_response = await self._client.send(http_request, stream=True)
        except (httpx.HTTPError, OSError) as e:
            raise TransportError(e) from e

        return Response(
            status_code=http_response.status_code,
            headers=http_response.headers,
            stream=_HttpxBodyStream(http_response),
            request=request,
        )
