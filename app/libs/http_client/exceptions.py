class HttpClientError(Exception):
    """Base error raised by the HTTP client."""

    prefix: str = "http client error"

    def __init__(self, detail: str | BaseException):
        if isinstance(detail, BaseException):
            detail = str(detail) or type(detail).__name__
        self.detail = detail
        super().__init__(f"{self.prefix}: {detail}")


class ConstructionError(HttpClientError):
    """The request could not be built (invalid method or URL)."""

    prefix = "failed to create request"


class TransportError(HttpClientError):
    """The transport failed to send the request."""

    prefix = "request failed"


class ReadError(HttpClientError):
    """The response body could not be fully read."""

    prefix = "failed to read response body"
