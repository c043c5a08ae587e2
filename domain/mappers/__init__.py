"""
Domain mappers package.
Handles transformation between raw remote items and DTOs (Data Transfer Objects).
"""

from domain.mappers.meal_mapper import MealMapper, Valid, Invalid, MealValidation

__all__ = ["MealMapper", "Valid", "Invalid", "MealValidation"]
