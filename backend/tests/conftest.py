"""pytest configuration and shared fixtures."""

import copy
from typing import Any, Generator

import pytest
from fastapi import FastAPI

from flatfile_api.application.interfaces import CollectionStore
from flatfile_api.domain.exceptions import CollectionLoadError
from flatfile_api.infrastructure.dependencies import get_collection_store
from flatfile_api.main import app


# ── Fake Store ───────────────────────────────────────────────────────

class FakeCollectionStore(CollectionStore):
    """In-memory collection store that records every save."""

    def __init__(self, collections: dict[str, list[dict[str, Any]]] | None = None):
        self.collections = copy.deepcopy(collections or {})
        self.saves: list[tuple[str, list[dict[str, Any]]]] = []

    async def load(self, name: str) -> list[dict[str, Any]]:
        if name not in self.collections:
            raise CollectionLoadError(name)
        return copy.deepcopy(self.collections[name])

    async def save(self, name: str, records: list[dict[str, Any]]) -> None:
        self.saves.append((name, copy.deepcopy(records)))
        self.collections[name] = copy.deepcopy(records)


# ── Fixtures ─────────────────────────────────────────────────────────

@pytest.fixture
def sample_users() -> list[dict[str, Any]]:
    return [
        {"id": "1", "name": "Test User 1", "email": "user1@example.com", "role": "admin"},
        {"id": "2", "name": "Test User 2", "email": "user2@example.com", "role": "user"},
    ]


@pytest.fixture
def sample_products() -> list[dict[str, Any]]:
    return [
        {"id": 1, "name": "Test Product 1", "price": 99.99, "category": "electronics", "stock": 10},
        {"id": 2, "name": "Test Product 2", "price": 49.99, "category": "accessories", "stock": 20},
    ]


@pytest.fixture
def fake_store(sample_users, sample_products) -> FakeCollectionStore:
    return FakeCollectionStore(
        {"users.json": sample_users, "products.json": sample_products}
    )


@pytest.fixture
def api_app(fake_store) -> Generator[FastAPI, None, None]:
    """The application with its collection store replaced by ``fake_store``."""
    app.dependency_overrides[get_collection_store] = lambda: fake_store
    yield app
    app.dependency_overrides.clear()

