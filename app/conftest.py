"""Pytest 配置文件"""

import httpx
import pytest

from libs.http_client import Request, Response, TransportFunc


class RecordingTransport:
    """Test double that records every request and answers with a fixed body."""

    def __init__(self, status_code: int = 200, body: bytes = b"hello"):
        self.status_code = status_code
        self.body = body
        self.requests: list[Request] = []
        self.responses: list[Response] = []

    async def send(self, request: Request) -> Response:
        self.requests.append(request)
        response = Response(
            status_code=self.status_code,
            headers=httpx.Headers({"content-type": "text/plain"}),
            stream=httpx.ByteStream(self.body),
            request=request,
        )
        self.responses.append(response)
        return response


@pytest.fixture
def transport():
    """记录请求的传输层"""
    return RecordingTransport()


@pytest.fixture
def failing_transport():
    """总是失败的传输层"""

    async def send(request: Request) -> Response:
        raise ConnectionError("connection refused")

    return TransportFunc(send)
