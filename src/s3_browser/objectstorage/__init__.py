"""Object storage operations for S3-compatible services."""

from .browser import (
    StorageBrowser,
    create_browser,
    extract_file_names,
    generate_signed_url,
    list_files_in_folder,
)
from .clients import S3ClientConfig, S3ClientManager

__all__ = [
    "S3ClientConfig",
    "S3ClientManager",
    "StorageBrowser",
    "create_browser",
    "extract_file_names",
    "generate_signed_url",
    "list_files_in_folder",
]
