"""Snapshot of stored favorites for the favorites screen."""

from dataclasses import dataclass, field

from food_catalog.domain.items import FoodItem, canonical_id
from food_catalog.domain.results import FavoriteResult
from food_catalog.services.favorites import FavoriteStore


@dataclass
class FavoritesListing:
    """Favorites screen state backed by the favorite store."""

    store: FavoriteStore
    items: list[FoodItem] = field(default_factory=list)

    async def load(self) -> list[FoodItem]:
        """Replace the snapshot with the stored favorites."""
        self.items = await self.store.list()
        return self.items

    async def on_focus(self) -> list[FoodItem]:
        """Reload to pick up changes made on other screens."""
        return await self.load()

    async def remove(self, item_id: object) -> FavoriteResult:
        """Remove a favorite and drop it from the snapshot."""
        result = await self.store.remove(item_id)
        if result.success:
            wanted = canonical_id(item_id)
            self.items = [item for item in self.items if item.id != wanted]
        return result

    async def clear_all(self) -> FavoriteResult:
        """Remove every favorite."""
        result = await self.store.clear()
        if result.success:
            self.items = []
        return result
