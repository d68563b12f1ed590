"""Durable favorite set backed by a key-value store."""

import json
import logging
from dataclasses import dataclass

from food_catalog.domain.items import FoodItem, canonical_id
from food_catalog.domain.results import (
    ALREADY_FAVORITED_MESSAGE,
    MISSING_ID_MESSAGE,
    FailureReason,
    FavoriteResult,
)
from food_catalog.services.storage import KeyValueStore

DEFAULT_FAVORITES_KEY = "@FoodListingApp_favorites"

_logger = logging.getLogger(__name__)


def encode_favorites(items: list[FoodItem]) -> str:
    """Serialize favorites as a JSON array of item records."""
    return json.dumps([item.to_record() for item in items])


def decode_favorites(raw: str | None) -> list[FoodItem]:
    """Parse a stored favorites document.

    Entries that are not objects or have no usable id are dropped, and only
    the first entry of a repeated id is kept.
    """
    return _items_from_records(_load_records(raw))


def _load_records(raw: str | None) -> list[object]:
    if not raw:
        return []
    data = json.loads(raw)
    if not isinstance(data, list):
        raise ValueError("Stored favorites are not a JSON array")
    return data


def _record_id(record: object) -> str | None:
    if not isinstance(record, dict):
        return None
    return canonical_id(record.get("id"))


def _items_from_records(records: list[object]) -> list[FoodItem]:
    items: list[FoodItem] = []
    seen: set[str] = set()
    for record in records:
        if not isinstance(record, dict):
            continue
        item = FoodItem.from_record(record)
        if item.id is None or item.id in seen:
            continue
        seen.add(item.id)
        items.append(item)
    return items


@dataclass
class FavoriteStore:
    """Sole writer of the persisted favorite set.

    Every mutation reads the whole set and writes it back as one document.
    There is no locking, so overlapping mutations can lose updates; callers
    serialize toggles per item.
    """

    storage: KeyValueStore
    key: str = DEFAULT_FAVORITES_KEY

    # Defined before ``list`` so the annotations still name the builtin.
    async def _read(self) -> list[FoodItem]:
        return decode_favorites(await self.storage.get(self.key))

    # Mutations rewrite the raw records so entries that do not decode to an
    # item are written back unchanged.
    async def _read_records(self) -> list[object]:
        return _load_records(await self.storage.get(self.key))

    async def list(self) -> list[FoodItem]:
        """Return all favorites in insertion order, or [] if unreadable."""
        try:
            return await self._read()
        except Exception as exc:
            _logger.warning("Failed to read favorites: %s", exc)
            return []

    async def contains(self, item_id: object) -> bool:
        """Return True when the id is favorited."""
        wanted = canonical_id(item_id)
        if wanted is None:
            return False
        favorites = await self.list()
        return any(item.id == wanted for item in favorites)

    async def add(self, item: FoodItem) -> FavoriteResult:
        """Add an item unless its id is already present."""
        if item.id is None:
            return FavoriteResult.failed(FailureReason.MISSING_ID, MISSING_ID_MESSAGE)
        try:
            records = await self._read_records()
            if any(_record_id(record) == item.id for record in records):
                return FavoriteResult.failed(
                    FailureReason.ALREADY_FAVORITED, ALREADY_FAVORITED_MESSAGE
                )
            records.append(item.to_record())
            await self.storage.set(self.key, json.dumps(records))
        except Exception as exc:
            _logger.exception("Failed to add favorite %s", item.id)
            return FavoriteResult.failed(FailureReason.PERSISTENCE, str(exc))
        return FavoriteResult.ok()

    async def remove(self, item_id: object) -> FavoriteResult:
        """Remove an id; removing an absent id succeeds."""
        wanted = canonical_id(item_id)
        if wanted is None:
            return FavoriteResult.ok()
        try:
            records = await self._read_records()
            remaining = [record for record in records if _record_id(record) != wanted]
            await self.storage.set(self.key, json.dumps(remaining))
        except Exception as exc:
            _logger.exception("Failed to remove favorite %s", wanted)
            return FavoriteResult.failed(FailureReason.PERSISTENCE, str(exc))
        return FavoriteResult.ok()

    async def clear(self) -> FavoriteResult:
        """Delete the whole persisted set."""
        try:
            await self.storage.remove(self.key)
        except Exception as exc:
            _logger.exception("Failed to clear favorites")
            return FavoriteResult.failed(FailureReason.PERSISTENCE, str(exc))
        return FavoriteResult.ok()
