"""Key-value persistence abstractions."""

from dataclasses import dataclass
from typing import Protocol


class KeyValueStore(Protocol):
    """Async string key-value storage."""

    async def get(self, key: str) -> str | None:
        """Return the stored value for a key, if present."""

    async def set(self, key: str, value: str) -> None:
        """Store a value under a key, replacing any previous value."""

    async def remove(self, key: str) -> None:
        """Delete a key; deleting a missing key is not an error."""


@dataclass
class InMemoryKeyValueStore(KeyValueStore):
    """Process-local key-value store."""

    _values: dict[str, str]

    def __init__(self, values: dict[str, str] | None = None) -> None:
        self._values = dict(values or {})

    async def get(self, key: str) -> str | None:
        """Return the stored value for a key."""
        return self._values.get(key)

    async def set(self, key: str, value: str) -> None:
        """Store a value under a key."""
        self._values[key] = value

    async def remove(self, key: str) -> None:
        """Delete a key if present."""
        self._values.pop(key, None)
