"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from food_catalog.adapters.catalog_client import CatalogClient
from food_catalog.config import Settings
from food_catalog.containers import AppContainer
from food_catalog.services.favorites import FavoriteStore
from food_catalog.services.storage import InMemoryKeyValueStore, KeyValueStore

SAMPLE_DOCUMENT: dict[str, object] = {
    "record": {
        "data": [
            {
                "id": 1,
                "title": "Pizza",
                "rating": 4.5,
                "category": "Italian",
                "mainImage": "https://example.com/pizza.jpg",
                "tags": ["spicy", "cheese"],
                "prepTimeMins": 20,
            },
            {
                "id": 2,
                "name": "Burger",
                "rating": 4.2,
                "category": "American",
                "image": "https://example.com/burger.jpg",
                "tags": ["fast-food"],
            },
        ]
    }
}


@dataclass
class RecordingKeyValueStore(KeyValueStore):
    """In-memory store that records writes for tests."""

    values: dict[str, str] = field(default_factory=dict)
    writes: list[tuple[str, str]] = field(default_factory=list)
    removals: list[str] = field(default_factory=list)

    async def get(self, key: str) -> str | None:
        return self.values.get(key)

    async def set(self, key: str, value: str) -> None:
        self.writes.append((key, value))
        self.values[key] = value

    async def remove(self, key: str) -> None:
        self.removals.append(key)
        self.values.pop(key, None)


@dataclass
class FailingKeyValueStore(KeyValueStore):
    """Store whose reads and/or writes raise."""

    fail_reads: bool = False
    fail_writes: bool = True
    values: dict[str, str] = field(default_factory=dict)

    async def get(self, key: str) -> str | None:
        if self.fail_reads:
            raise OSError("storage read failed")
        return self.values.get(key)

    async def set(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise OSError("storage write failed")
        self.values[key] = value

    async def remove(self, key: str) -> None:
        if self.fail_writes:
            raise OSError("storage write failed")
        self.values.pop(key, None)


@dataclass
class FakeCatalogClient(CatalogClient):
    """Fake catalog client returning queued documents or errors."""

    responses: list[object] = field(default_factory=lambda: [SAMPLE_DOCUMENT])
    calls: int = 0

    async def fetch_catalog(self) -> object:
        self.calls += 1
        # The last queued response repeats.
        if len(self.responses) > 1:
            response = self.responses.pop(0)
        else:
            response = self.responses[0]
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def settings() -> Settings:
    return Settings(
        catalog_url="https://catalog.test/b/items",
        storage_backend="memory",
        favorites_storage_key="@test_favorites",
    )


@pytest.fixture
def storage() -> RecordingKeyValueStore:
    return RecordingKeyValueStore()


@pytest.fixture
def favorite_store(storage: RecordingKeyValueStore) -> FavoriteStore:
    return FavoriteStore(storage=storage)


@pytest.fixture
def catalog_client() -> FakeCatalogClient:
    return FakeCatalogClient()


@pytest.fixture
def container(settings: Settings, catalog_client: FakeCatalogClient) -> AppContainer:
    storage = InMemoryKeyValueStore()

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        catalog_client=catalog_client,
        storage=storage,
        favorite_store=FavoriteStore(storage, key=settings.favorites_storage_key),
        close_resources=close_resources,
    )
