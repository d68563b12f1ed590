"""Tests for catalog session orchestration."""

import asyncio

import httpx

from food_catalog.domain.items import FoodItem
from food_catalog.services.catalog import CatalogSession
from food_catalog.services.favorites import FavoriteStore
from food_catalog.services.projection import FavoriteStateProjection
from tests.conftest import SAMPLE_DOCUMENT, FakeCatalogClient


def _session(client: FakeCatalogClient, store: FavoriteStore) -> CatalogSession:
    return CatalogSession(client=client, projection=FavoriteStateProjection(store))


def test_load_normalizes_and_projects_favorites(
    catalog_client: FakeCatalogClient, favorite_store: FavoriteStore
) -> None:
    asyncio.run(favorite_store.add(FoodItem(id="2", name="Burger")))
    session = _session(catalog_client, favorite_store)

    result = asyncio.run(session.load())

    assert result.success
    assert [item.name for item in result.items] == ["Pizza", "Burger"]
    assert result.items[0].prep_time == "20 min"
    assert result.items[0].image == "https://example.com/pizza.jpg"
    assert session.items == result.items
    assert session.projection.states == {"1": False, "2": True}
    assert catalog_client.calls == 1


def test_load_failure_returns_message_verbatim(
    favorite_store: FavoriteStore,
) -> None:
    client = FakeCatalogClient(responses=[httpx.ConnectError("Network error")])
    session = _session(client, favorite_store)

    result = asyncio.run(session.load())

    assert not result.success
    assert result.error == "Network error"
    assert result.items == []
    assert session.error == "Network error"


def test_load_failure_without_message_uses_fallback(
    favorite_store: FavoriteStore,
) -> None:
    client = FakeCatalogClient(responses=[RuntimeError()])
    session = _session(client, favorite_store)

    result = asyncio.run(session.load())

    assert result.error == "Failed to fetch food items"


def test_failed_refresh_keeps_previous_items(favorite_store: FavoriteStore) -> None:
    client = FakeCatalogClient(
        responses=[SAMPLE_DOCUMENT, httpx.ReadTimeout("timed out")]
    )
    session = _session(client, favorite_store)
    asyncio.run(session.load())

    result = asyncio.run(session.refresh())

    assert not result.success
    assert [item.id for item in session.items] == ["1", "2"]
    assert client.calls == 2


def test_successful_refresh_clears_error(favorite_store: FavoriteStore) -> None:
    client = FakeCatalogClient(responses=[RuntimeError("boom"), SAMPLE_DOCUMENT])
    session = _session(client, favorite_store)
    asyncio.run(session.load())
    assert session.error == "boom"

    result = asyncio.run(session.refresh())

    assert result.success
    assert session.error is None


def test_unrecognized_payload_loads_empty_list(favorite_store: FavoriteStore) -> None:
    client = FakeCatalogClient(responses=[{"record": "unexpected"}])
    session = _session(client, favorite_store)

    result = asyncio.run(session.load())

    assert result.success
    assert result.items == []
    assert session.projection.states == {}


def test_find_returns_loaded_item(
    catalog_client: FakeCatalogClient, favorite_store: FavoriteStore
) -> None:
    session = _session(catalog_client, favorite_store)
    asyncio.run(session.load())

    assert session.find(2).name == "Burger"
    assert session.find("404") is None
