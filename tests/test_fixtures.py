"""
Shared test fixtures and utilities for the MealFinder test suite.

This module contains a fake TheMealDB client, raw item builders and the
TestClient setup reused across test files.
"""

import asyncio
from typing import Any, Dict, List, Optional

from fastapi.testclient import TestClient

from api.dependencies import get_meal_service
from app.exceptions import TransportError
from main import app
from services.meal_service import MealService

# Routes resolve the service through the dependency, so the lifespan is not run
client = TestClient(app)


def make_raw_meal(meal_id, name=None, thumb=None, **extra) -> Dict[str, Any]:
    """
    Build a raw TheMealDB list item.

    Example:
        >>> make_raw_meal(52772)["strMeal"]
        'Meal 52772'
    """
    raw = {
        "idMeal": str(meal_id),
        "strMeal": name if name is not None else f"Meal {meal_id}",
        "strMealThumb": (
            thumb
            if thumb is not None
            else f"https://www.themealdb.com/images/media/meals/{meal_id}.jpg"
        ),
    }
    raw.update(extra)
    return raw


def raw_meals(*ids) -> List[Dict[str, Any]]:
    return [make_raw_meal(i) for i in ids]


class FakeMealClient:
    """
    In-memory stand-in for MealDBClient.

    ``responses`` maps an operation name to either a list of raw items or an
    exception to raise. ``delays`` holds optional per-operation sleeps
    used to make calls finish out of issue order.
    """

    def __init__(
        self,
        responses: Optional[Dict[str, Any]] = None,
        delays: Optional[Dict[str, float]] = None,
    ):
        self.responses = responses or {}
        self.delays = delays or {}
        self.calls: List[tuple] = []

    async def _answer(self, operation: str, *args):
        self.calls.append((operation, *args))
        if operation in self.delays:
            await asyncio.sleep(self.delays[operation])
        response = self.responses.get(operation, [])
        if isinstance(response, Exception):
            raise response
        return list(response)

    async def search(self, query):
        return await self._answer("search", query)

    async def filter_by_category(self, category):
        return await self._answer("filter_by_category", category)

    async def filter_by_area(self, area):
        return await self._answer("filter_by_area", area)

    async def filter_by_ingredient(self, ingredient):
        return await self._answer("filter_by_ingredient", ingredient)

    async def lookup_by_id(self, meal_id):
        return await self._answer("lookup_by_id", meal_id)

    async def fetch_random(self):
        return await self._answer("fetch_random")


class RecordingReporter:
    """Error reporter that keeps every reported error."""

    def __init__(self):
        self.errors: List[Exception] = []

    def report(self, error: Exception) -> None:
        self.errors.append(error)


def transport_error(status_code: Optional[int] = 500) -> TransportError:
    return TransportError("TheMealDB returned an error", status_code=status_code)


def make_service(responses=None, delays=None):
    """Return (service, fake client, reporter) wired together."""
    fake = FakeMealClient(responses, delays)
    reporter = RecordingReporter()
    return MealService(fake, reporter), fake, reporter


def override_service(service: MealService) -> None:
    app.dependency_overrides[get_meal_service] = lambda: service


def ids(meals) -> List[str]:
    return [m.id for m in meals]
