import asyncio
import logging
from functools import reduce
from typing import Any

from .exceptions import ReadError, TransportError
from .models import Request, Response
from .types import Middleware, Transport

logger = logging.getLogger(__name__)


class HttpClient:
    """Issues requests through a transport wrapped by middlewares.

    Middlewares are applied in order, each wrapping the previous result, so
    ``HttpClient(base, m1, m2)`` sends through ``m2.wrap(m1.wrap(base))``.
    The last-listed middleware sees the request first; the first-listed one
    runs last, so its header changes are what reach the base transport.

    The base transport is closed by :meth:`aclose` only when
    ``owns_transport`` is true.
    """

    def __init__(self, transport: Transport, *middlewares: Middleware, owns_transport: bool = False):
        self._base = transport
        self._owns_transport = owns_transport
        self._transport = reduce(lambda inner, m: m.wrap(inner), middlewares, transport)

    @property
    def transport(self) -> Transport:
        return self._transport

    async def aclose(self) -> None:
        if not self._owns_transport:
            return
        aclose = getattr(self._base, "aclose", None)
        if aclose is not None:
            await aclose()

    async def __aenter__(self) -> "HttpClient":
        return self

    async def __aexit__(self, *_args: Any) -> None:
        await self.aclose()

    async def get(self, url: str, *, timeout: float | None = None) -> bytes:
        """GET ``url`` and return the whole response body.

        ``timeout`` is a deadline in seconds covering both sending and reading
        the body. Raises ConstructionError, TransportError or ReadError
        depending on the failing stage.
        """
        request = Request.build("GET", url)
        deadline = None if timeout is None else asyncio.get_running_loop().time() + timeout

        try:
            async with asyncio.timeout_at(deadline):
                response = await self._transport.send(request)
        except TransportError:
            raise
        except Exception as e:
            raise TransportError(e) from e

        try:
            async with asyncio.timeout_at(deadline):
                return await response.aread()
        except ReadError:
            raise
        except Exception as e:
            raise ReadError(e) from e
        finally:
            await _close_body(response)


async def _close_body(response: Response) -> None:
    # The read result (or ReadError) takes precedence over a failed close.
    try:
        await response.aclose()
    except Exception as e:
        logger.warning("Failed to close response body: %s", e)
