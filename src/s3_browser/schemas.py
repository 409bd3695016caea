"""Configuration schemas for the storage browser."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from s3_browser.core.config import MAX_URL_EXPIRES_IN, Settings


class BrowserConfig(BaseModel):
    """Immutable configuration handed to a StorageBrowser at startup."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    region_name: str = Field("us-east-1", description="AWS region name")
    url_expires_in: int = Field(
        3600,
        gt=0,
        le=MAX_URL_EXPIRES_IN,
        description="Lifetime of presigned URLs in seconds",
    )
    delimiter: str = Field(
        "/", min_length=1, description="Path separator used for folder listings"
    )
    page_size: Optional[int] = Field(
        None, gt=0, description="MaxKeys per listing request"
    )

    @classmethod
    def from_settings(cls, settings: Settings) -> "BrowserConfig":
        """Build a browser configuration from process settings."""
        return cls(
            region_name=settings.region_name,
            url_expires_in=settings.url_expires_in,
            page_size=settings.page_size,
        )
