"""Result values returned by favorite and catalog operations."""

from dataclasses import dataclass, field
from enum import StrEnum

from food_catalog.domain.items import FoodItem

ALREADY_FAVORITED_MESSAGE = "Already in favorites"
MISSING_ID_MESSAGE = "Item has no id"
FETCH_FAILED_MESSAGE = "Failed to fetch food items"


class FailureReason(StrEnum):
    """Why a favorite mutation did not succeed."""

    ALREADY_FAVORITED = "already_favorited"
    MISSING_ID = "missing_id"
    PERSISTENCE = "persistence"


@dataclass(frozen=True)
class FavoriteResult:
    """Outcome of a favorite store mutation."""

    success: bool
    error: str | None = None
    reason: FailureReason | None = None

    @classmethod
    def ok(cls) -> "FavoriteResult":
        return cls(success=True)

    @classmethod
    def failed(cls, reason: FailureReason, error: str) -> "FavoriteResult":
        return cls(success=False, error=error, reason=reason)


@dataclass(frozen=True)
class CatalogResult:
    """Outcome of a catalog load."""

    success: bool
    items: list[FoodItem] = field(default_factory=list)
    error: str | None = None
