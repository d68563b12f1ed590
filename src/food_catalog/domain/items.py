"""Domain models for catalog items."""

from dataclasses import dataclass, field

ItemId = str

_RECORD_FIELDS = (
    ("name", "name"),
    ("category", "category"),
    ("cuisine", "cuisine"),
    ("description", "description"),
    ("image", "image"),
    ("price", "price"),
    ("rating", "rating"),
    ("prep_time", "prepTime"),
    ("servings", "servings"),
    ("is_veg", "isVeg"),
)


def canonical_id(value: object) -> ItemId | None:
    """Return the canonical string form of an item id.

    Integers and integral floats become their decimal text, strings are kept
    as they are. Booleans, ``None`` and anything else have no usable id.
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return None


@dataclass(frozen=True)
class FoodItem:
    """Canonical catalog item."""

    id: ItemId | None
    name: str | None = None
    category: str | None = None
    cuisine: str | None = None
    description: str | None = None
    image: str | None = None
    price: object | None = None
    rating: object | None = None
    tags: tuple[str, ...] = field(default_factory=tuple)
    prep_time: str | None = None
    servings: object | None = None
    is_veg: bool | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "id", canonical_id(self.id))

    def to_record(self) -> dict[str, object]:
        """Return the storage record for the item, omitting absent attributes."""
        record: dict[str, object] = {"id": self.id}
        for attribute, key in _RECORD_FIELDS:
            value = getattr(self, attribute)
            if value is not None:
                record[key] = value
        record["tags"] = list(self.tags)
        return record

    @classmethod
    def from_record(cls, record: dict[str, object]) -> "FoodItem":
        """Build an item from a storage record."""
        values = {
            attribute: record.get(key)
            for attribute, key in _RECORD_FIELDS
            if record.get(key) is not None
        }
        tags = record.get("tags")
        return cls(
            id=canonical_id(record.get("id")),
            tags=tuple(str(tag) for tag in tags) if isinstance(tags, list) else (),
            **values,
        )
