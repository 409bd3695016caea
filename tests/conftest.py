"""Test configuration and fixtures for s3-browser."""

import pytest

from s3_browser.core.config import get_settings
from s3_browser.objectstorage import S3ClientConfig, S3ClientManager, StorageBrowser
from s3_browser.schemas import BrowserConfig


@pytest.fixture(autouse=True)
def aws_credentials(monkeypatch):
    """Keep tests away from real AWS credentials and configuration."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
    monkeypatch.delenv("AWS_PROFILE", raising=False)


@pytest.fixture(autouse=True)
def fresh_settings():
    """Re-read settings from the environment in every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def client_config():
    """S3 client configuration with explicit test credentials."""
    return S3ClientConfig(
        access_key_id="test_key",
        secret_access_key="test_secret",
        region_name="us-east-1",
    )


@pytest.fixture
def browser_config():
    """Browser configuration with a one hour URL lifetime."""
    return BrowserConfig(region_name="us-east-1", url_expires_in=3600)


@pytest.fixture
def browser(browser_config, client_config):
    """Storage browser wired to a fresh client manager."""
    return StorageBrowser(browser_config, S3ClientManager(client_config))
