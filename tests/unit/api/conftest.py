"""Fixtures for API route tests."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from lms.api import create_app
from lms.config import Settings
from lms.repository import Repository


@pytest.fixture
def repository() -> Repository:
    """Create an empty Repository."""
    return Repository()


@pytest.fixture
def app(repository: Repository) -> FastAPI:
    """Create a test app serving the fixture repository."""
    return create_app(repository=repository, settings=Settings())


@pytest.fixture
def client(app: FastAPI):
    """Create a test client."""
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client
