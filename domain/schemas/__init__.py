"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.meal_schemas import (
    MealSummary,
    MealIngredient,
    MealDetail,
    SearchCriteria,
)

__all__ = [
    "MealSummary",
    "MealIngredient",
    "MealDetail",
    "SearchCriteria",
]
