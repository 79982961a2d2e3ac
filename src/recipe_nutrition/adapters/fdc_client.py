"""USDA FoodData Central API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx

MAX_FOODS_PER_REQUEST = 20


class FdcClient(Protocol):
    """Interface for FoodData Central API interactions."""

    async def search_foods(self, query: str, page_size: int = 25) -> dict[str, object]:
        """Search foods by query and return raw API data."""

    async def get_food(self, fdc_id: int) -> dict[str, object]:
        """Fetch a food by FDC id and return raw API data."""

    async def get_foods(self, fdc_ids: list[int]) -> list[dict[str, object]]:
        """Fetch several foods; ids FDC cannot resolve are absent from the result."""


@dataclass
class HttpxFdcClient(FdcClient):
    """HTTPX-backed FDC client."""

    api_key: str
    base_url: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 15

    @classmethod
    def create(cls, api_key: str, base_url: str) -> "HttpxFdcClient":
        """Create an FDC client with a managed httpx session."""
        return cls(api_key=api_key, base_url=base_url, http_client=httpx.AsyncClient())

    async def search_foods(self, query: str, page_size: int = 25) -> dict[str, object]:
        """Search foods by query."""
        response = await self.http_client.post(
            f"{self.base_url}/foods/search",
            params={"api_key": self.api_key},
            json={"query": query, "pageSize": page_size},
            timeout=self.timeout_seconds,
        )
        response.raise_for_status()
        return response.json()

    async def get_food(self, fdc_id: int) -> dict[str, object]:
        """Fetch a food by FDC id."""
        response = await self.http_client.get(
            f"{self.base_url}/food/{fdc_id}",
            params={"api_key": self.api_key},
            timeout=self.timeout_seconds,
        )
        response.raise_for_status()
        return response.json()

    async def get_foods(self, fdc_ids: list[int]) -> list[dict[str, object]]:
        """Fetch foods in batches of at most twenty ids."""
        foods: list[dict[str, object]] = []
        for start in range(0, len(fdc_ids), MAX_FOODS_PER_REQUEST):
            chunk = fdc_ids[start : start + MAX_FOODS_PER_REQUEST]
            response = await self.http_client.post(
                f"{self.base_url}/foods",
                params={"api_key": self.api_key},
                json={"fdcIds": chunk, "format": "full"},
                timeout=self.timeout_seconds,
            )
            response.raise_for_status()
            foods.extend(response.json() or [])
        return foods

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
