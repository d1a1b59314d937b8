"""Shared fixtures for end-to-end tests through the HTTP app."""

import pytest
from fastapi.testclient import TestClient

from stackit.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def container():
    """Test container with in-memory persistence shared across requests."""
    return build_test_container(with_fastapi=True)


@pytest.fixture
def client(container):
    """Test client bound to the test container.

    The client is entered so HTTP requests and WebSocket sessions share
    one event loop.
    """
    with TestClient(create_app(container)) as test_client:
        yield test_client
