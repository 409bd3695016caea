"""S3 client configuration and management.

The S3ClientManager owns the single boto3 client a process shares between
listing and signing calls. boto3 clients are safe to use from several threads
once created, so the manager creates the client on first use and hands out
the same instance afterwards.

Authentication Methods Supported:
    1. Explicit credentials (access_key_id, secret_access_key)
    2. AWS CLI profiles (aws_profile)
    3. IAM roles / environment variables (no explicit credentials)
    4. Temporary credentials (session_token)

S3-Compatible Services:
    Custom endpoints (MinIO, Cloudflare R2, DigitalOcean Spaces) are reached
    via endpoint_url.
"""

import threading
from typing import Any, Dict, Optional

import boto3
from botocore.config import Config
from pydantic import BaseModel, ConfigDict, Field

from s3_browser.core import get_logger
from s3_browser.core.exceptions import ValidationError

logger = get_logger(__name__)


class S3ClientConfig(BaseModel):
    """Configuration for S3 client connections.

    Authentication Priority:
        1. If aws_profile is provided, use profile-based authentication
        2. If explicit credentials are provided, use them
        3. Otherwise, fall back to default AWS credential chain

    Example:
        # AWS profile
        config = S3ClientConfig(aws_profile="my-profile")

        # MinIO endpoint
        config = S3ClientConfig(
            endpoint_url="http://localhost:9000",
            access_key_id="minioadmin",
            secret_access_key="minioadmin"
        )
    """

    model_config = ConfigDict(extra="forbid")

    access_key_id: Optional[str] = Field(None, description="AWS access key ID")
    secret_access_key: Optional[str] = Field(None, description="AWS secret access key")
    session_token: Optional[str] = Field(
        None, description="AWS session token for temporary credentials"
    )
    region_name: str = Field("us-east-1", description="AWS region name")
    endpoint_url: Optional[str] = Field(
        None, description="Custom S3 endpoint URL for S3-compatible services"
    )
    aws_profile: Optional[str] = Field(
        None, description="AWS CLI profile name to use for credentials"
    )


class S3ClientManager:
    """Manages the shared S3 client connection."""

    def __init__(self, config: S3ClientConfig):
        """Initialize S3 client manager.

        Args:
            config: S3 client configuration
        """
        self.config = config
        self._client = None
        self._lock = threading.Lock()
        logger.info("S3 client manager initialized", region=config.region_name)

    @property
    def client(self):
        """Get or create the S3 client instance."""
        if self._client is None:
            with self._lock:
                if self._client is None:
                    self._client = self._create_client()
        return self._client

    def _create_client(self):
        """Create boto3 S3 client with the configured settings."""
        kwargs: Dict[str, Any] = {
            "region_name": self.config.region_name,
            # Presigned URLs must carry X-Amz-Expires
            "config": Config(signature_version="s3v4"),
        }

        if self.config.endpoint_url:
            kwargs["endpoint_url"] = self.config.endpoint_url

        if self.config.aws_profile:
            session = boto3.Session(profile_name=self.config.aws_profile)
            client = session.client("s3", **kwargs)  # type: ignore
            logger.info(
                "S3 client created with profile", profile=self.config.aws_profile
            )
        else:
            if self.config.access_key_id and self.config.secret_access_key:
                kwargs.update(
                    {
                        "aws_access_key_id": self.config.access_key_id,
                        "aws_secret_access_key": self.config.secret_access_key,
                    }
                )
                if self.config.session_token:
                    kwargs["aws_session_token"] = self.config.session_token
                logger.info("S3 client created with explicit credentials")
            else:
                logger.info("S3 client created with default credential chain")

            client = boto3.client("s3", **kwargs)  # type: ignore

        return client

    @staticmethod
    def parse_s3_path(s3_path: str) -> tuple[str, str]:
        """Parse S3 path into bucket and key/prefix components.

        Args:
            s3_path: S3 path in format s3://bucket/prefix or s3://bucket

        Returns:
            Tuple of (bucket_name, prefix)

        Raises:
            ValidationError: If path format is invalid
        """
        if not s3_path.startswith("s3://"):
            raise ValidationError(f"S3 path must start with 's3://': {s3_path}")

        # Keys may contain "?" or "#", so no URL parsing here
        bucket, _, prefix = s3_path[len("s3://") :].partition("/")

        if not bucket:
            raise ValidationError(f"Invalid S3 path, missing bucket: {s3_path}")

        logger.debug("S3 path parsed", bucket=bucket, prefix=prefix)
        return bucket, prefix
