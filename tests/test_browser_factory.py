"""Tests for browser construction and the module-level operations."""

from unittest.mock import Mock, patch

import pytest

from s3_browser.core.config import Settings
from s3_browser.objectstorage import browser as browser_module
from s3_browser.objectstorage import (
    S3ClientConfig,
    StorageBrowser,
    create_browser,
    generate_signed_url,
    list_files_in_folder,
)


class TestCreateBrowser:
    """Test building a browser from settings."""

    def test_from_settings(self):
        """Test the browser takes region and expiry from settings."""
        settings = Settings(region_name="eu-west-1", url_expires_in=900)

        browser = create_browser(settings)

        assert isinstance(browser, StorageBrowser)
        assert browser.config.url_expires_in == 900
        assert browser.client_manager.config.region_name == "eu-west-1"

    def test_explicit_client_config(self):
        """Test a supplied client configuration is used as given."""
        client_config = S3ClientConfig(endpoint_url="http://localhost:9000")

        browser = create_browser(Settings(), client_config)

        assert browser.client_manager.config is client_config

    def test_client_not_created_eagerly(self):
        """Test no boto3 client exists until an operation needs one."""
        browser = create_browser(Settings())

        assert browser.client_manager._client is None


class TestModuleLevelOperations:
    """Test the convenience functions."""

    @pytest.fixture(autouse=True)
    def reset_default_browser(self, monkeypatch):
        monkeypatch.setattr(browser_module, "_default_browser", None)

    def test_explicit_browser(self):
        """Test a passed browser is used directly."""
        browser = Mock()
        browser.list_files_in_folder.return_value = ["a.pdf"]
        browser.generate_signed_url.return_value = "https://signed"

        assert list_files_in_folder("docs-bucket", "x/", browser=browser) == ["a.pdf"]
        assert generate_signed_url("docs-bucket", "x/a.pdf", browser=browser) == (
            "https://signed"
        )
        browser.list_files_in_folder.assert_called_once_with("docs-bucket", "x/")
        browser.generate_signed_url.assert_called_once_with("docs-bucket", "x/a.pdf")

    @patch("s3_browser.objectstorage.browser.create_browser")
    def test_default_browser_shared(self, mock_create):
        """Test the default browser is created once and reused."""
        mock_create.return_value.list_files_in_folder.return_value = []
        mock_create.return_value.generate_signed_url.return_value = "https://signed"

        list_files_in_folder("docs-bucket", "x/")
        list_files_in_folder("docs-bucket", "y/")
        generate_signed_url("docs-bucket", "x/a.pdf")

        mock_create.assert_called_once_with()
