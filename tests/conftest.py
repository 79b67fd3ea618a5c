"""
Pytest configuration and shared fixtures for the Mailjet client tests.
"""

import tempfile
from pathlib import Path
from typing import Generator

import pytest

from mailjet.sdk.adapters.base import BaseAdapter, RawResponse, TransportRequest
from mailjet.sdk.adapters.mock import MockAdapter
from mailjet.sdk.client import MailjetClient


BASE_URL = "https://api.example.com/v3"


class ForbiddenAdapter(BaseAdapter):
    """Transport that fails the test if it is ever used."""

    def send(self, request: TransportRequest) -> RawResponse:
        raise AssertionError(f"transport must not be called: {request.method} {request.url}")

    def close(self) -> None:
        pass

    @property
    def is_connected(self) -> bool:
        return True


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """
    Create a temporary directory for test files.
    
    Yields:
        Path to temporary directory that is cleaned up after test.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def base_url() -> str:
    return BASE_URL


@pytest.fixture
def mock_adapter() -> MockAdapter:
    return MockAdapter()


@pytest.fixture
def forbidden_adapter() -> ForbiddenAdapter:
    return ForbiddenAdapter()


@pytest.fixture
def client(mock_adapter: MockAdapter) -> MailjetClient:
    """Client talking to the in-memory mock transport."""
    return MailjetClient("test-key", "test-secret", base_url=BASE_URL, adapter=mock_adapter)


@pytest.fixture(autouse=True)
def clear_mailjet_env(monkeypatch):
    """Keep real credentials from the environment out of the tests."""
    monkeypatch.delenv("MJ_APIKEY_PUBLIC", raising=False)
    monkeypatch.delenv("MJ_APIKEY_PRIVATE", raising=False)
