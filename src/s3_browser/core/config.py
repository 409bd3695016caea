"""Configuration management for s3-browser.

Logging and tracing options are read when the package is imported. Storage
options are read on first use through get_settings(), so a bad
URL_EXPIRES_IN only fails the code that builds a browser from settings.
"""

from functools import lru_cache
from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings

# SigV4 presigned URLs cannot outlive seven days.
MAX_URL_EXPIRES_IN = 604800


class ObservabilitySettings(BaseSettings):
    """Logging and tracing settings with environment variable support."""

    log_level: str = "INFO"
    otel_enabled: bool = False
    otel_service_name: str = "s3-browser"
    otel_exporter_endpoint: str = "http://localhost:4317"

    model_config = {
        "env_prefix": "S3_BROWSER_",
        "case_sensitive": False,
        "extra": "ignore",
    }


class Settings(ObservabilitySettings):
    """Application settings with environment variable support."""

    region_name: str = Field(
        "us-east-1",
        validation_alias=AliasChoices("S3_BROWSER_REGION_NAME", "AWS_REGION"),
    )
    url_expires_in: int = Field(
        3600,
        gt=0,
        le=MAX_URL_EXPIRES_IN,
        validation_alias=AliasChoices("S3_BROWSER_URL_EXPIRES_IN", "URL_EXPIRES_IN"),
    )
    page_size: Optional[int] = Field(None, gt=0)

    model_config = {
        "env_prefix": "S3_BROWSER_",
        "case_sensitive": False,
        "populate_by_name": True,
        "extra": "ignore",
    }


observability_settings = ObservabilitySettings()


@lru_cache
def get_settings() -> Settings:
    """Get the process settings, reading the environment on first call.

    Raises:
        pydantic.ValidationError: If a storage option is malformed
    """
    return Settings()
