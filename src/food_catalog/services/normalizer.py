"""Normalization of remote catalog payloads into canonical items."""

import logging
from collections.abc import Iterable, Mapping

from food_catalog.domain.items import FoodItem, canonical_id

_logger = logging.getLogger(__name__)

_IMAGE_KEYS = ("mainImage", "thumbNailImage", "image")
# Precedence: a non-empty title wins over name.
_NAME_KEYS = ("title", "name")


def extract_payload(document: object) -> object:
    """Return the records carried by a remote catalog document.

    Records live under the top-level ``record`` field, sometimes nested one
    level deeper under ``record.data``.
    """
    if not isinstance(document, Mapping):
        return None
    record = document.get("record")
    if isinstance(record, Mapping):
        nested = record.get("data")
        if nested:
            return nested
    return record


def normalize_catalog(document: object) -> list[FoodItem]:
    """Normalize a full remote catalog document."""
    return normalize_records(extract_payload(document))


def normalize_records(payload: object) -> list[FoodItem]:
    """Map an array or keyed object of raw records to canonical items."""
    if isinstance(payload, list):
        return [
            _normalize_record(record, record.get("id"))
            for record in payload
            if isinstance(record, Mapping)
        ]
    if isinstance(payload, Mapping):
        items = []
        for key, record in payload.items():
            if not isinstance(record, Mapping):
                continue
            raw_id = record.get("id")
            items.append(_normalize_record(record, key if raw_id is None else raw_id))
        return items
    _logger.warning(
        "Unrecognized catalog payload shape: %s", type(payload).__name__
    )
    return []


def find_item(items: Iterable[FoodItem], item_id: object) -> FoodItem | None:
    """Return the item with the given id, if present."""
    wanted = canonical_id(item_id)
    if wanted is None:
        return None
    return next((item for item in items if item.id == wanted), None)


def _normalize_record(record: Mapping[str, object], raw_id: object) -> FoodItem:
    """Build a canonical item from one raw record."""
    return FoodItem(
        id=canonical_id(raw_id),
        name=_first_text(record, _NAME_KEYS),
        category=_text(record.get("category")),
        cuisine=_text(record.get("cuisine")),
        description=_text(record.get("description")),
        image=_first_text(record, _IMAGE_KEYS),
        price=_scalar(record.get("price")),
        rating=_scalar(record.get("rating")),
        tags=_tags(record.get("tags")),
        prep_time=_prep_time(record),
        servings=_scalar(record.get("servings")),
        is_veg=record.get("isVeg") if isinstance(record.get("isVeg"), bool) else None,
    )


def _text(value: object) -> str | None:
    return value if isinstance(value, str) else None


def _first_text(record: Mapping[str, object], keys: tuple[str, ...]) -> str | None:
    """Return the first non-empty string among the given keys."""
    for key in keys:
        value = record.get(key)
        if isinstance(value, str) and value:
            return value
    return None


def _scalar(value: object) -> object | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float, str)):
        return value
    return None


def _tags(value: object) -> tuple[str, ...]:
    if not isinstance(value, list):
        return ()
    return tuple(tag for tag in value if isinstance(tag, str))


def _prep_time(record: Mapping[str, object]) -> str | None:
    """Return ``"<n> min"`` for a non-zero ``prepTimeMins``, else ``prepTime``.

    ``prepTimeMins`` takes precedence even when ``prepTime`` is present.
    """
    minutes = record.get("prepTimeMins")
    if isinstance(minutes, (int, float)) and not isinstance(minutes, bool) and minutes:
        if isinstance(minutes, float) and minutes.is_integer():
            minutes = int(minutes)
        return f"{minutes} min"
    return _text(record.get("prepTime"))
