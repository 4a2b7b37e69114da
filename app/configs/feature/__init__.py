from pydantic import Field, PositiveFloat, PositiveInt
from pydantic_settings import BaseSettings


class HttpClientConfig(BaseSettings):
    """
    Configuration for the authenticated HTTP client
    """

    HTTP_CLIENT_ENDPOINT: str = Field(
        description="URL fetched by the command line entry point",
        default="",
    )

    HTTP_CLIENT_TIMEOUT: PositiveFloat = Field(
        description="Per-request timeout in seconds passed to the network transport",
        default=30.0,
    )

    HTTP_CLIENT_API_KEY: str | None = Field(
        description="API key sent as `Authorization: Bearer <key>`",
        default=None,
    )

    HTTP_CLIENT_BASIC_AUTH_USERNAME: str | None = Field(
        description="Username for HTTP basic authentication",
        default=None,
    )

    HTTP_CLIENT_BASIC_AUTH_PASSWORD: str | None = Field(
        description="Password for HTTP basic authentication",
        default=None,
    )

    HTTP_CLIENT_LOG_REQUESTS: bool = Field(
        description="Log every outgoing request and its outcome",
        default=True,
    )


class LoggingConfig(BaseSettings):
    """
    Configuration for application logging
    """

    LOG_LEVEL: str = Field(
        description="Logging level, default to INFO. Set to ERROR for production environments.",
        default="INFO",
    )

    LOG_FILE: str | None = Field(
        description="File path for log output.",
        default=None,
    )

    LOG_FILE_MAX_SIZE: PositiveInt = Field(
        description="Maximum file size for file rotation retention, the unit is megabytes (MB)",
        default=20,
    )

    LOG_FILE_BACKUP_COUNT: PositiveInt = Field(
        description="Maximum file backup count file rotation retention",
        default=5,
    )

    LOG_FORMAT: str = Field(
        description="Format string for log messages",
        default=(
            "%(asctime)s.%(msecs)03d %(levelname)s [%(threadName)s] "
            "[%(filename)s:%(lineno)d] %(trace_id)s - %(message)s"
        ),
    )

    LOG_DATEFORMAT: str | None = Field(
        description="Date format string for log timestamps",
        default=None,
    )

    LOG_TZ: str | None = Field(
        description="Timezone for log timestamps (e.g., 'America/New_York')",
        default="UTC",
    )


class FeatureConfig(HttpClientConfig, LoggingConfig):
    pass
