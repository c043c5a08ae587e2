"""
API dependencies for dependency injection
"""

from fastapi import Request

from services.meal_service import MealService


def get_meal_service(request: Request) -> MealService:
    """
    Meal service dependency for FastAPI routes.

    The service is built once in the application lifespan and kept on
    ``app.state``; tests replace it through ``app.dependency_overrides``.

    Usage:
        @router.get("/example")
        async def example(service: MealService = Depends(get_meal_service)):
            ...
    """
    return request.app.state.meal_service
