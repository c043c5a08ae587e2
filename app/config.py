"""
Application configuration with Pydantic Settings for validation and type safety.
Supports environment-specific configurations and .env file loading.
"""

from enum import Enum
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator


class Environment(str, Enum):
    """Application environment types"""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """
    Application settings with validation.
    Settings are loaded from environment variables or .env file.
    """

    # Application settings
    app_name: str = Field(default="MealFinder", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")
    environment: Environment = Field(
        default=Environment.DEVELOPMENT, description="Application environment"
    )
    debug: bool = Field(default=False, description="Debug mode")

    # Server settings
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(
        default=5555,
        ge=1,
        le=65535,
        validation_alias="BACKEND_PORT",
        description="Server port",
    )

    # TheMealDB settings
    meal_api_base_url: str = Field(
        default="https://www.themealdb.com/api/json/v1",
        description="TheMealDB base URL (without the API key segment)",
    )
    meal_api_key: str = Field(default="1", description="TheMealDB API key")
    meal_api_timeout_sec: float = Field(
        default=10.0, gt=0, description="Timeout for a single TheMealDB request"
    )

    # Frontend origins allowed by CORS
    frontend_url_dev: Optional[str] = Field(
        default="http://localhost:3000", description="Frontend URL in development"
    )
    frontend_url_prod: Optional[str] = Field(
        default=None, description="Frontend URL in production"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(
        default="%(asctime)s %(levelname)s %(name)s: %(message)s",
        description="Log format string",
    )

    # API settings
    api_prefix: str = Field(default="", description="API route prefix")
    api_title: str = Field(
        default="MealFinder API", description="API documentation title"
    )
    api_description: str = Field(
        default="Backend for the MealFinder app, proxying TheMealDB",
        description="API documentation description",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("environment", mode="before")
    @classmethod
    def validate_environment(cls, v):
        """Validate and normalize environment value"""
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    @property
    def meal_api_url(self) -> str:
        """Base URL for TheMealDB requests, API key included."""
        return f"{self.meal_api_base_url.rstrip('/')}/{self.meal_api_key}/"

    @property
    def cors_origins(self) -> list[str]:
        """Frontend origins whitelisted for CORS."""
        return [url for url in (self.frontend_url_dev, self.frontend_url_prod) if url]

    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.environment == Environment.PRODUCTION

    def is_development(self) -> bool:
        """Check if running in development environment"""
        return self.environment == Environment.DEVELOPMENT


# Global settings instance
settings = Settings()
