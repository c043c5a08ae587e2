"""
Adapters package - External service connections.
HTTP adapter for TheMealDB.
"""

from adapters.mealdb_adapter import MealDBClient

__all__ = [
    "MealDBClient",
]
