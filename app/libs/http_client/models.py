import base64
import re
from dataclasses import dataclass, field, replace
from typing import Any

import httpx

from .exceptions import ConstructionError

# RFC 9110 token characters
_METHOD_RE = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")


@dataclass(frozen=True)
class Request:
    method: str
    url: str
    headers: httpx.Headers = field(default_factory=httpx.Headers)
    body: bytes = b""
    timeout: float | None = None

    @classmethod
    def build(
        cls,
        method: str,
        url: str,
        headers: dict[str, str] | httpx.Headers | None = None,
        body: bytes = b"",
    ) -> "Request":
        if not method or not _METHOD_RE.fullmatch(method):
            raise ConstructionError(f"invalid method {method!r}")
        try:
            parsed = httpx.URL(url)
        except (httpx.InvalidURL, TypeError) as e:
            raise ConstructionError(e) from e
        if parsed.scheme not in ("http", "https"):
            raise ConstructionError(f"unsupported protocol scheme in {url!r}")
        if not parsed.host:
            raise ConstructionError(f"no host in request URL {url!r}")
        return cls(method=method, url=str(parsed), headers=httpx.Headers(headers), body=body)

    def with_headers(self, **headers: str) -> "Request":
        return self.with_header_items(headers)

    def with_header_items(self, headers: dict[str, str] | httpx.Headers) -> "Request":
        merged = httpx.Headers(self.headers)
        for name, value in headers.items():
            merged[name] = value
        return replace(self, headers=merged)

    def with_basic_auth(self, username: str, password: str) -> "Request":
        token = base64.b64encode(f"{username}:{password}".encode()).decode("ascii")
        return self.with_header_items({"Authorization": f"Basic {token}"})

    def basic_auth(self) -> tuple[str, str] | None:
        scheme, _, token = self.headers.get("Authorization", "").partition(" ")
        if scheme.lower() != "basic" or not token:
            return None
        try:
            decoded = base64.b64decode(token, validate=True).decode()
        except ValueError:
            return None
        username, sep, password = decoded.partition(":")
        if not sep:
            return None
        return username, password

    def with_timeout(self, timeout: float | None) -> "Request":
        return replace(self, timeout=timeout)


@dataclass
class Response:
    status_code: int
    headers: httpx.Headers
    stream: httpx.AsyncByteStream
    request: Request | None = None
    _closed: bool = field(default=False, init=False, repr=False)

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400

    @property
    def is_closed(self) -> bool:
        return self._closed

    async def aread(self) -> bytes:
        chunks = [chunk async for chunk in self.stream]
        return b"".join(chunks)

    async def aclose(self) -> None:
        if self._closed:
            return
        self._closed = True
        await self.stream.aclose()

    async def __aenter__(self) -> "Response":
        return self

    async def __aexit__(self, *_args: Any) -> None:
        await self.aclose()
