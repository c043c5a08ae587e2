"""TheMealDB adapter for meal search and retrieval.
"""

from typing import Any, Dict, List, Optional
import logging

import httpx

from app.exceptions import TransportError

logger = logging.getLogger("mealfinder.mealdb")


class MealDBClient:
    """Async client for TheMealDB JSON API.

    Every lookup returns the raw ``meals`` result set as a list (empty when the
    API answers ``{"meals": null}``) or raises TransportError.
    """

    def __init__(
        self,
        base_url: str,
        timeout_sec: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout_sec,
            headers={"Content-Type": "application/json"},
            transport=transport,
        )

    async def __aenter__(self) -> "MealDBClient":
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        await self._client.aclose()
        logger.info("TheMealDB client closed")

    # ------------------ Lookups ------------------
    async def search(self, query: str) -> List[Any]:
        """Search meals by name."""
        return await self._fetch("search.php", {"s": query})

    async def filter_by_category(self, category: str) -> List[Any]:
        return await self._fetch("filter.php", {"c": category})

    async def filter_by_area(self, area: str) -> List[Any]:
        return await self._fetch("filter.php", {"a": area})

    async def filter_by_ingredient(self, ingredient: str) -> List[Any]:
        return await self._fetch("filter.php", {"i": ingredient})

    async def lookup_by_id(self, meal_id: str) -> List[Any]:
        """Full record for one meal; zero or one item."""
        return await self._fetch("lookup.php", {"i": meal_id})

    async def fetch_random(self) -> List[Any]:
        """One random full meal record."""
        return await self._fetch("random.php", {})

    # ------------------ Transport ------------------
    async def _fetch(self, endpoint: str, params: Dict[str, str]) -> List[Any]:
        """GET an endpoint and unwrap its ``meals`` list.

        Raises:
            TransportError: remote unreachable, non-2xx status or non-JSON body
        """
        try:
            response = await self._client.get(endpoint, params=params)
        except httpx.HTTPError as exc:
            logger.warning("TheMealDB request to %s failed: %s", endpoint, exc)
            raise TransportError(
                f"TheMealDB request to {endpoint} failed: {exc}"
            ) from exc

        if response.is_error:
            raise TransportError(
                f"TheMealDB returned an error for {endpoint}",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise TransportError(
                f"TheMealDB returned a non-JSON body for {endpoint}",
                status_code=response.status_code,
            ) from exc

        meals = payload.get("meals") if isinstance(payload, dict) else None
        if not isinstance(meals, list):
            logger.debug("No meals in TheMealDB response for %s %s", endpoint, params)
            return []
        return meals
