"""
Global pytest fixtures for the OpenLink test suite.

Responsibilities:
    - Provide a fresh FastAPI TestClient via the app factory for integration tests
    - Provide isolated UrlStore and RequestCounter fixtures for direct testing
    - Provide a LinkManager fixture wired to the store fixture

Each fixture builds new objects, so no state leaks between tests.
"""

import pytest
from fastapi.testclient import TestClient

from main import create_app
from openlink.analytics.counter import RequestCounter
from openlink.manager.link_manager import LinkManager
from openlink.storage.store import UrlStore


@pytest.fixture
def store() -> UrlStore:
    """Fresh, empty in-memory store."""
    return UrlStore()


@pytest.fixture
def counter() -> RequestCounter:
    """Fresh request counter with no names."""
    return RequestCounter()


@pytest.fixture
def manager(store: UrlStore) -> LinkManager:
    """LinkManager wired to the store fixture with a fixed public origin."""
    return LinkManager(store=store, base_url="http://short.test")


@pytest.fixture
def client(store: UrlStore, counter: RequestCounter) -> TestClient:
    """
    TestClient over a new app that shares the store and counter fixtures,
    so tests can inspect state behind the HTTP surface.
    """
    app = create_app(store=store, counter=counter)
    return TestClient(app)
