"""Browse folders of S3-compatible buckets and hand out temporary links.

This package wraps two object-storage primitives behind a small adapter:

    - listing the files directly under a folder prefix, across every page
      of the listing, filtered and sorted alphabetically
    - generating presigned download URLs whose lifetime comes from
      configuration

Usage:
    >>> from s3_browser import create_browser
    >>> browser = create_browser()
    >>> browser.list_files_in_folder("docs-bucket", "reports/2024/")
    ['a.pdf', 'b.pdf']
    >>> url = browser.generate_signed_url("docs-bucket", "reports/2024/a.pdf")

The region and URL lifetime are read from ``AWS_REGION`` and
``URL_EXPIRES_IN`` (or their ``S3_BROWSER_`` prefixed forms).
"""

__version__ = "0.1.0"

from .objectstorage import (
    S3ClientConfig,
    S3ClientManager,
    StorageBrowser,
    create_browser,
    extract_file_names,
    generate_signed_url,
    list_files_in_folder,
)
from .schemas import BrowserConfig

__all__ = [
    "BrowserConfig",
    "S3ClientConfig",
    "S3ClientManager",
    "StorageBrowser",
    "create_browser",
    "extract_file_names",
    "generate_signed_url",
    "list_files_in_folder",
]
