"""Core utilities and shared components for s3-browser."""

from .config import Settings, get_settings
from .exceptions import S3BrowserError, ValidationError
from .observability import get_logger, get_tracer

__all__ = [
    "Settings",
    "get_settings",
    "S3BrowserError",
    "ValidationError",
    "get_logger",
    "get_tracer",
]
