from typing import Any

import pytest
from fastapi.testclient import TestClient

from bookmarks.dependencies import get_repository
from main import create_app

from .fixtures import InMemoryBookmarkRepository, make_bookmarks_array


@pytest.fixture(name="repo")
def repo_fixture() -> InMemoryBookmarkRepository:
    return InMemoryBookmarkRepository()


@pytest.fixture(name="app")
def app_fixture(repo: InMemoryBookmarkRepository):
    app = create_app()
    app.dependency_overrides[get_repository] = lambda: repo
    yield app
    app.dependency_overrides.clear()


@pytest.fixture(name="client")
def client_fixture(app) -> TestClient:
    # No context manager: the lifespan (and its Postgres pool) never starts.
    return TestClient(app)


@pytest.fixture
def bookmarks(repo: InMemoryBookmarkRepository) -> list[dict[str, Any]]:
    rows = make_bookmarks_array()
    repo.insert(*rows)
    return rows
