"""Per-screen projection of favorite membership."""

import asyncio
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from food_catalog.domain.items import FoodItem, ItemId, canonical_id
from food_catalog.domain.results import (
    MISSING_ID_MESSAGE,
    FailureReason,
    FavoriteResult,
)
from food_catalog.services.favorites import FavoriteStore

_logger = logging.getLogger(__name__)


@dataclass
class FavoriteStateProjection:
    """Cached id -> favorited mapping for the items one screen shows.

    The mapping is a read-only snapshot of the store. It is rebuilt wholesale
    when the visible list changes or the screen regains focus; the only local
    write is the optimistic flip made by ``toggle``.
    """

    store: FavoriteStore
    states: dict[ItemId, bool] = field(default_factory=dict)
    ids: list[ItemId] = field(default_factory=list)
    detached: bool = False
    _generation: int = field(default=0, init=False, repr=False)

    async def refresh(self, ids: Iterable[object]) -> dict[ItemId, bool]:
        """Recompute membership for the given ids and replace the mapping."""
        wanted = [item_id for item_id in map(canonical_id, ids) if item_id is not None]
        self._generation += 1
        generation = self._generation
        flags = await asyncio.gather(*(self.store.contains(i) for i in wanted))
        states = dict(zip(wanted, flags, strict=True))
        # A newer refresh or a detached screen owns the mapping now.
        if not self.detached and generation == self._generation:
            self.ids = wanted
            self.states = states
        return states

    async def on_list_changed(self, ids: Iterable[object]) -> dict[ItemId, bool]:
        """Refresh after the screen's item list was replaced."""
        return await self.refresh(ids)

    async def on_focus(self) -> dict[ItemId, bool]:
        """Refresh the current ids after the screen regains focus."""
        return await self.refresh(list(self.ids))

    def is_favorite(self, item_id: object) -> bool:
        """Return the cached membership for an id."""
        return self.states.get(canonical_id(item_id), False)

    async def toggle(self, item: FoodItem) -> FavoriteResult:
        """Flip an item's membership optimistically, reverting on failure."""
        if item.id is None:
            return FavoriteResult.failed(FailureReason.MISSING_ID, MISSING_ID_MESSAGE)
        was_favorite = self.states.get(item.id, False)
        self.states[item.id] = not was_favorite
        if was_favorite:
            result = await self.store.remove(item.id)
        else:
            result = await self.store.add(item)
        if self.detached or result.success:
            return result
        if result.reason == FailureReason.ALREADY_FAVORITED:
            # The store already holds the item, so the flip stands.
            return result
        if self.states.get(item.id) == (not was_favorite):
            self.states[item.id] = was_favorite
            _logger.info("Reverted favorite toggle for %s: %s", item.id, result.error)
        return result

    def detach(self) -> None:
        """Stop applying results; the hosting screen is gone."""
        self.detached = True
