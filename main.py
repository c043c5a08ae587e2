"""
MealFinder FastAPI Application
Main entry point with middleware, exception handlers and configuration management
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import uvicorn
from contextlib import asynccontextmanager

from api.routes import health, meals

from adapters.mealdb_adapter import MealDBClient
from core.error_reporter import LoggingErrorReporter
from services.meal_service import MealService

from app.config import settings

from api.middleware import (
    RequestLoggingMiddleware,
    validation_exception_handler,
    http_exception_handler,
    service_validation_exception_handler,
    not_found_exception_handler,
    transport_exception_handler,
    general_exception_handler,
)
from app.exceptions import ServiceValidationError, NotFoundError, TransportError

# Setup logging with configured level and format
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()), format=settings.log_format
)
_logger = logging.getLogger("mealfinder.main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for application startup and shutdown.
    Opens the TheMealDB client and wires the meal service.
    """
    _logger.info(f"Starting {settings.app_name} in {settings.environment.value} mode")

    client = MealDBClient(settings.meal_api_url, timeout_sec=settings.meal_api_timeout_sec)
    app.state.meal_service = MealService(client, LoggingErrorReporter())
    _logger.info("TheMealDB client ready at %s", settings.meal_api_base_url)

    try:
        yield
    finally:
        _logger.info(f"Shutting down {settings.app_name}")
        try:
            await client.close()
        except Exception as e:
            _logger.exception("Error closing TheMealDB client during shutdown: %s", e)


app = FastAPI(
    title=settings.api_title,
    version=settings.app_version,
    description=settings.api_description,
    lifespan=lifespan,
    debug=settings.debug,
    openapi_url=(
        f"{settings.api_prefix}/openapi.json" if not settings.is_production() else None
    ),
    docs_url=f"{settings.api_prefix}/docs" if not settings.is_production() else None,
    redoc_url=f"{settings.api_prefix}/redoc" if not settings.is_production() else None,
)

# Only the configured frontends may call the API
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.add_middleware(RequestLoggingMiddleware)

app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(ServiceValidationError, service_validation_exception_handler)
app.add_exception_handler(NotFoundError, not_found_exception_handler)
app.add_exception_handler(TransportError, transport_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

app.include_router(health.router, prefix=settings.api_prefix)
app.include_router(meals.router, prefix=settings.api_prefix)


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development(),
        log_level=settings.log_level.lower(),
    )
