from pydantic import Field
from pydantic_settings import SettingsConfigDict

from configs.feature import FeatureConfig, HttpClientConfig, LoggingConfig


class AppConfig(FeatureConfig):
    PROJECT_NAME: str = Field(default="authclient")

    model_config = SettingsConfigDict(
        # read from dotenv format config file
        env_file=".env",
        env_file_encoding="utf-8",
        # ignore extra attributes
        extra="ignore",
    )


__all__ = ["AppConfig", "HttpClientConfig", "LoggingConfig"]
