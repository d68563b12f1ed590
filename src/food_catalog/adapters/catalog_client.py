"""Remote catalog API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class CatalogClient(Protocol):
    """Interface for fetching the remote catalog document."""

    async def fetch_catalog(self) -> object:
        """Fetch the catalog and return the decoded JSON document."""


@dataclass
class HttpxCatalogClient(CatalogClient):
    """HTTPX-backed catalog client."""

    url: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 15

    @classmethod
    def create(cls, url: str, timeout_seconds: float = 15) -> "HttpxCatalogClient":
        """Create a catalog client with a managed httpx session."""
        return cls(
            url=url,
            http_client=httpx.AsyncClient(),
            timeout_seconds=timeout_seconds,
        )

    async def fetch_catalog(self) -> object:
        """GET the catalog endpoint."""
        response = await self.http_client.get(self.url, timeout=self.timeout_seconds)
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
