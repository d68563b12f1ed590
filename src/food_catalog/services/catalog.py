"""Catalog session: fetch, normalize, project favorites."""

import logging
from dataclasses import dataclass, field

from food_catalog.adapters.catalog_client import CatalogClient
from food_catalog.domain.items import FoodItem
from food_catalog.domain.results import FETCH_FAILED_MESSAGE, CatalogResult
from food_catalog.services.normalizer import find_item, normalize_catalog
from food_catalog.services.projection import FavoriteStateProjection

_logger = logging.getLogger(__name__)


@dataclass
class CatalogSession:
    """One screen's catalog list.

    A failed load leaves the previously loaded items in place. Loads are not
    retried and are not sequenced against favorite mutations.
    """

    client: CatalogClient
    projection: FavoriteStateProjection
    items: list[FoodItem] = field(default_factory=list)
    error: str | None = None

    async def load(self) -> CatalogResult:
        """Fetch and normalize the catalog, then refresh favorite states."""
        try:
            document = await self.client.fetch_catalog()
        except Exception as exc:
            _logger.warning("Catalog fetch failed: %s", exc)
            self.error = str(exc) or FETCH_FAILED_MESSAGE
            return CatalogResult(success=False, error=self.error)

        items = normalize_catalog(document)
        self.items = items
        self.error = None
        await self.projection.on_list_changed(item.id for item in items)
        _logger.info("Loaded %s catalog items", len(items))
        return CatalogResult(success=True, items=items)

    async def refresh(self) -> CatalogResult:
        """Reload the catalog from scratch."""
        return await self.load()

    def find(self, item_id: object) -> FoodItem | None:
        """Return a loaded item by id."""
        return find_item(self.items, item_id)
