"""Shared fixtures."""

from collections.abc import Iterator

import httpx
import pytest
import respx

BASE_URL = "http://bugtracker.test"


@pytest.fixture
def api() -> Iterator[respx.MockRouter]:
    """Mock the bug tracker REST API."""
    with respx.mock(base_url=BASE_URL, assert_all_called=False) as router:
        yield router


@pytest.fixture
def http() -> httpx.AsyncClient:
    """HTTP client pointed at the mocked API."""
    return httpx.AsyncClient(base_url=BASE_URL)
