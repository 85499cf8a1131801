"""Shared pytest fixtures for media_api tests."""

import pytest

from media_api.config import get_settings
from tests.fakes import FakeAssetClient, create_test_client


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached per process; reset around each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fake_client():
    return FakeAssetClient()


@pytest.fixture
def client(fake_client):
    return create_test_client(fake_client)
