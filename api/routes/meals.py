"""
Meal routes - Meal search, suggestions and retrieval endpoints.
"""

from fastapi import APIRouter, Depends, Query
from typing import List, Optional
import logging

from api.dependencies import get_meal_service
from api.responses import APIResponse, ErrorResponse, success_response
from domain.schemas.meal_schemas import MealDetail, MealSummary, SearchCriteria
from services.meal_service import MealService

router = APIRouter(
    prefix="/meals",
    tags=["Meals"],
    responses={
        404: {"model": ErrorResponse, "description": "No matching meal"},
        502: {"model": ErrorResponse, "description": "TheMealDB unavailable"},
    },
)
logger = logging.getLogger("mealfinder.api.meals")


@router.get("/suggestions", response_model=APIResponse[List[MealSummary]])
async def fetch_suggestions(
    category: str = Query(..., min_length=1, description="Category to suggest meals from"),
    service: MealService = Depends(get_meal_service),
):
    """
    Fetch up to 4 meal suggestions within the given category.
    """
    suggestions = await service.fetch_suggestions(category)
    return success_response(suggestions, "Meal suggestions successfully retrieved")


@router.get("/random", response_model=APIResponse[MealSummary])
async def fetch_random_meal(service: MealService = Depends(get_meal_service)):
    """Fetch a random meal."""
    meal = await service.fetch_random_meal()
    return success_response(meal, "Random meal successfully retrieved")


@router.get("", response_model=APIResponse[List[MealSummary]])
async def search_meals(
    query: Optional[str] = Query(default=None, description="Search by meal name"),
    category: Optional[str] = Query(default=None, description="Filter by category"),
    area: Optional[str] = Query(default=None, description="Filter by area"),
    ingredient: Optional[str] = Query(default=None, description="Filter by ingredient"),
    service: MealService = Depends(get_meal_service),
):
    """
    Search meals with filters.

    - **query**: Search in meal names
    - **category**: Filter by category
    - **area**: Filter by cuisine area
    - **ingredient**: Filter by main ingredient

    With more than one filter only meals matching all of them are returned.
    """
    criteria = SearchCriteria(
        query=query, category=category, area=area, ingredient=ingredient
    )
    meals = await service.search_meals(criteria)
    return success_response(meals, "Meals successfully retrieved")


@router.get("/{meal_id}", response_model=APIResponse[MealDetail])
async def search_by_id(meal_id: str, service: MealService = Depends(get_meal_service)):
    """
    Get a single meal by ID.

    Returns the full record including ingredients and instructions.
    """
    meal = await service.search_by_id(meal_id)
    return success_response(meal, "Meal successfully retrieved")
