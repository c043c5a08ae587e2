from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Awaitable, Dict, List, Optional, Protocol
import asyncio

from app.exceptions import NotFoundError, ServiceValidationError
from core.base.base_service import BaseService
from core.error_reporter import ErrorReporter
from domain.mappers.meal_mapper import MealMapper
from domain.schemas.meal_schemas import MealDetail, MealSummary, SearchCriteria

SUGGESTION_LIMIT = 4


class MealLookupClient(Protocol):
    """Remote meal source; every call returns a raw result set or raises."""

    async def search(self, query: str) -> List[Any]: ...

    async def filter_by_category(self, category: str) -> List[Any]: ...

    async def filter_by_area(self, area: str) -> List[Any]: ...

    async def filter_by_ingredient(self, ingredient: str) -> List[Any]: ...

    async def lookup_by_id(self, meal_id: str) -> List[Any]: ...

    async def fetch_random(self) -> List[Any]: ...


@dataclass
class Settled:
    """Outcome of one remote call: its items, or the error it failed with."""

    label: str
    items: List[Any] = field(default_factory=list)
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


async def settle(label: str, call: Awaitable[List[Any]]) -> Settled:
    """Await one lookup; any failure is captured on the outcome instead of raised."""
    try:
        return Settled(label, items=list(await call))
    except Exception as exc:
        return Settled(label, error=exc)


def dedupe_by_id(meals: List[MealSummary]) -> List[MealSummary]:
    """Drop repeated ids, keeping the first occurrence."""
    seen = set()
    unique: List[MealSummary] = []
    for meal in meals:
        if meal.id not in seen:
            seen.add(meal.id)
            unique.append(meal)
    return unique


def intersect(meals: List[MealSummary], filter_count: int) -> List[MealSummary]:
    """
    Keep meals whose id occurs exactly ``filter_count`` times in ``meals``.

    Occurrences are tallied over the whole concatenated sequence, so an id
    repeated inside a single result set counts twice.
    """
    counts = Counter(meal.id for meal in meals)
    return dedupe_by_id([meal for meal in meals if counts[meal.id] == filter_count])


class MealService(BaseService):
    """Meal search and retrieval on top of a remote lookup client."""

    def __init__(self, client: MealLookupClient, reporter: ErrorReporter):
        super().__init__("mealfinder.meals")
        self.client = client
        self.reporter = reporter

    def _lookups(self) -> Dict[str, Any]:
        return {
            "query": self.client.search,
            "category": self.client.filter_by_category,
            "area": self.client.filter_by_area,
            "ingredient": self.client.filter_by_ingredient,
        }

    def _report(self, error: Exception) -> None:
        try:
            self.reporter.report(error)
        except Exception:
            self.logger.exception("Error reporter failed while reporting %r", error)

    async def search_meals(self, criteria: SearchCriteria) -> List[MealSummary]:
        """
        Search meals matching every requested filter.

        One remote call is issued per non-empty filter, all concurrently. A
        failed call is reported and counts as an empty result. With a single
        filter the deduplicated results are returned; with several, only the
        meals found by all of them.

        Args:
            criteria: query, category, area and ingredient filters

        Returns:
            List of unique meals, possibly empty
        """
        requested = criteria.requested()
        lookups = self._lookups()

        outcomes = await asyncio.gather(
            *(settle(name, lookups[name](value)) for name, value in requested)
        )

        meals: List[MealSummary] = []
        failed = 0
        for outcome in outcomes:
            if not outcome.ok:
                failed += 1
                self._report(outcome.error)
                continue
            meals.extend(MealMapper.well_shaped(outcome.items))

        if requested and failed == len(requested):
            self.log_warning(
                "All meal lookups failed", filters=",".join(n for n, _ in requested)
            )

        filter_count = len(requested)
        if filter_count > 1:
            result = intersect(meals, filter_count)
        else:
            result = dedupe_by_id(meals)

        self.log_info(
            "Meal search completed",
            filters=filter_count,
            failed=failed,
            results=len(result),
        )
        return result

    async def fetch_suggestions(self, category: str) -> List[MealSummary]:
        """
        Fetch up to four meal suggestions within the given category.

        Raises:
            ServiceValidationError: If category is empty
            TransportError: If the remote call fails
        """
        if not category:
            raise ServiceValidationError("category is required")

        items = await self.client.filter_by_category(category)
        return MealMapper.well_shaped(items)[:SUGGESTION_LIMIT]

    async def fetch_random_meal(self) -> MealSummary:
        """
        Fetch a random meal.

        Raises:
            NotFoundError: If the remote source returned no well-shaped meal
            TransportError: If the remote call fails
        """
        items = await self.client.fetch_random()
        meals = MealMapper.well_shaped(items)
        if not meals:
            raise NotFoundError("No random meal available", code="MEAL_NOT_FOUND")
        return meals[0]

    async def search_by_id(self, meal_id: str) -> MealDetail:
        """
        Fetch a meal by its ID.

        The first item of the lookup is returned as-is, without a shape check.

        Raises:
            ServiceValidationError: If meal_id is empty
            NotFoundError: If no meal has this ID
            TransportError: If the remote call fails
        """
        if not meal_id:
            raise ServiceValidationError("meal id is required")

        items = await self.client.lookup_by_id(meal_id)
        if not items:
            raise NotFoundError(f"Meal {meal_id} not found", code="MEAL_NOT_FOUND")
        return MealMapper.to_detail(items[0])
