import asyncio
import logging
import sys

from app_factory import create_client
from configs import AppConfig
from extensions.ext_logging import init_logging
from libs.http_client import HttpClientError

logger = logging.getLogger(__name__)


async def fetch(config: AppConfig) -> bytes:
    async with create_client(config) as client:
        return await client.get(config.HTTP_CLIENT_ENDPOINT)


def main() -> int:
    config = AppConfig()
    init_logging(config)

    try:
        body = asyncio.run(fetch(config))
    except HttpClientError as e:
        logger.error("Error: %s", e)
        return 1

    print(body.decode("utf-8", errors="replace"))
    return 0


if __name__ == "__main__":
    sys.exit(main())
