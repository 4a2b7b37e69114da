import logging

from configs import HttpClientConfig
from libs.http_client import (
    APIKeyMiddleware,
    BasicAuthMiddleware,
    HttpClient,
    HttpxTransport,
    LoggingMiddleware,
    Middleware,
    TimeoutMiddleware,
    Transport,
)

logger = logging.getLogger(__name__)


def config_middlewares(config: HttpClientConfig) -> list[Middleware]:
    """
    Build the middleware chain described by the config.
    Later entries wrap earlier ones and run first, so the earliest entry has
    the last word: logging is innermost and logs the fully decorated request,
    and the API key runs after basic auth and overrides its header.
    """
    middlewares: list[Middleware] = []

    if config.HTTP_CLIENT_LOG_REQUESTS:
        middlewares.append(LoggingMiddleware())

    if config.HTTP_CLIENT_API_KEY:
        middlewares.append(APIKeyMiddleware(config.HTTP_CLIENT_API_KEY))

    username = config.HTTP_CLIENT_BASIC_AUTH_USERNAME
    password = config.HTTP_CLIENT_BASIC_AUTH_PASSWORD
    if username is not None and password is not None:
        middlewares.append(BasicAuthMiddleware(username, password))
    elif username is not None or password is not None:
        logger.warning("Basic auth needs both username and password, skipped")

    middlewares.append(TimeoutMiddleware(config.HTTP_CLIENT_TIMEOUT))
    return middlewares


def create_client(config: HttpClientConfig, transport: Transport | None = None) -> HttpClient:
    """Build a client from config. An injected transport stays owned by the caller."""
    owns_transport = transport is None
    base = transport or HttpxTransport(timeout=config.HTTP_CLIENT_TIMEOUT)
    middlewares = config_middlewares(config)
    logger.debug("Created client with %s", [type(m).__name__ for m in middlewares])
    return HttpClient(base, *middlewares, owns_transport=owns_transport)
