"""Folder listing and presigned URL operations over a shared S3 client.

A folder listing is a single level of an S3 prefix: the request carries a
delimiter, so deeper keys are grouped into CommonPrefixes by the service and
only the objects directly under the folder come back as Contents.

Service errors are logged once where they happen and re-raised unchanged.
"""

import threading
from typing import Iterable, Optional

from s3_browser.core import Settings, get_logger, get_settings, get_tracer
from s3_browser.objectstorage.clients import S3ClientConfig, S3ClientManager
from s3_browser.schemas import BrowserConfig

logger = get_logger(__name__)
tracer = get_tracer(__name__)


def extract_file_names(
    keys: Iterable[str], folder_path: str, delimiter: str = "/"
) -> list[str]:
    """Turn object keys listed under a folder into sorted file names.

    The folder marker itself and any key ending with the delimiter are
    dropped; the remaining keys lose the folder prefix and are sorted by
    codepoint, so "10.txt" comes before "2.txt".

    Args:
        keys: Object keys returned for the folder
        folder_path: Prefix the keys were listed under
        delimiter: Path separator

    Returns:
        Sorted list of file names relative to the folder
    """
    file_names = [
        key[len(folder_path) :]
        for key in keys
        if key != folder_path and not key.endswith(delimiter)
    ]
    return sorted(file_names)


class StorageBrowser:
    """Lists folder contents and signs download URLs for S3 objects."""

    def __init__(self, config: BrowserConfig, client_manager: S3ClientManager):
        """Initialize the storage browser.

        Args:
            config: Browser configuration (expiry, delimiter, page size)
            client_manager: Manager of the long-lived S3 client
        """
        self.config = config
        self.client_manager = client_manager
        logger.info(
            "Storage browser initialized",
            region=config.region_name,
            url_expires_in=config.url_expires_in,
        )

    def list_files_in_folder(self, bucket_name: str, folder_path: str) -> list[str]:
        """List the files directly under a folder, sorted alphabetically.

        Every page of the listing is fetched before anything is returned.

        Args:
            bucket_name: Name of the bucket
            folder_path: Folder prefix, expected to end with the delimiter

        Returns:
            Sorted file names relative to folder_path

        Raises:
            botocore.exceptions.ClientError: If the service rejects a request
            botocore.exceptions.BotoCoreError: If a request cannot be made
        """
        logger.info("Listing folder", bucket=bucket_name, folder_path=folder_path)

        with tracer.start_as_current_span("list_files_in_folder") as span:
            span.set_attribute("s3.bucket", bucket_name)
            span.set_attribute("s3.prefix", folder_path)

            pagination_config = {}
            if self.config.page_size:
                pagination_config["PageSize"] = self.config.page_size

            keys = []
            page_count = 0
            try:
                paginator = self.client_manager.client.get_paginator(
                    "list_objects_v2"
                )
                page_iterator = paginator.paginate(
                    Bucket=bucket_name,
                    Prefix=folder_path,
                    Delimiter=self.config.delimiter,
                    PaginationConfig=pagination_config,
                )

                for page in page_iterator:
                    page_count += 1
                    for obj in page.get("Contents", []):
                        keys.append(obj["Key"])

            except Exception as e:
                logger.error(
                    "Error listing files from S3",
                    bucket=bucket_name,
                    folder_path=folder_path,
                    page=page_count + 1,
                    error=str(e),
                )
                raise

            file_names = extract_file_names(keys, folder_path, self.config.delimiter)
            span.set_attribute("s3.file_count", len(file_names))

        logger.info(
            "Folder listed",
            bucket=bucket_name,
            folder_path=folder_path,
            page_count=page_count,
            file_count=len(file_names),
        )
        return file_names

    def generate_signed_url(self, bucket_name: str, object_key: str) -> str:
        """Generate a presigned GET URL for a single object.

        The object is not checked for existence; a URL for a missing key is
        still produced and fails only when fetched.

        Args:
            bucket_name: Name of the bucket
            object_key: Key of the object to grant read access to

        Returns:
            Presigned URL valid for config.url_expires_in seconds
        """
        logger.debug("Signing URL", bucket=bucket_name, key=object_key)

        with tracer.start_as_current_span("generate_signed_url") as span:
            span.set_attribute("s3.bucket", bucket_name)
            span.set_attribute("s3.key", object_key)
            try:
                url = self.client_manager.client.generate_presigned_url(
                    "get_object",
                    Params={"Bucket": bucket_name, "Key": object_key},
                    ExpiresIn=self.config.url_expires_in,
                )
            except Exception as e:
                logger.error(
                    "Error generating signed URL",
                    bucket=bucket_name,
                    key=object_key,
                    error=str(e),
                )
                raise

        return url


def create_browser(
    settings: Optional[Settings] = None,
    client_config: Optional[S3ClientConfig] = None,
) -> StorageBrowser:
    """Create a storage browser from settings.

    Args:
        settings: Process settings, defaults to the environment-derived ones
        client_config: S3 client configuration; defaults to the default
            credential chain in the configured region

    Returns:
        A StorageBrowser with its own S3 client manager
    """
    settings = settings or get_settings()
    config = BrowserConfig.from_settings(settings)
    if client_config is None:
        client_config = S3ClientConfig(region_name=config.region_name)
    return StorageBrowser(config, S3ClientManager(client_config))


_default_browser: Optional[StorageBrowser] = None
_default_browser_lock = threading.Lock()


def _get_default_browser() -> StorageBrowser:
    global _default_browser
    if _default_browser is None:
        with _default_browser_lock:
            if _default_browser is None:
                _default_browser = create_browser()
    return _default_browser


def list_files_in_folder(
    bucket_name: str,
    folder_path: str,
    browser: Optional[StorageBrowser] = None,
) -> list[str]:
    """List files directly under a folder (convenience function)."""
    browser = browser or _get_default_browser()
    return browser.list_files_in_folder(bucket_name, folder_path)


def generate_signed_url(
    bucket_name: str,
    object_key: str,
    browser: Optional[StorageBrowser] = None,
) -> str:
    """Generate a presigned download URL (convenience function)."""
    browser = browser or _get_default_browser()
    return browser.generate_signed_url(bucket_name, object_key)
