"""
Domain layer - Meal schemas and mappers.
"""

from domain import mappers, schemas

__all__ = ["mappers", "schemas"]
