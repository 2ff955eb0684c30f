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


class FavoriteTogglePolicy(str, Enum):
    """How the favorite flag follows the registry write"""

    CONFIRMED = "confirmed"
    OPTIMISTIC = "optimistic"


class Settings(BaseSettings):
    """
    Application settings with validation.
    Settings are loaded from environment variables or .env file.
    """

    # Application settings
    app_name: str = Field(default="GoRestaurant", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    environment: Environment = Field(
        default=Environment.DEVELOPMENT, description="Application environment"
    )
    debug: bool = Field(default=False, description="Debug mode")

    # Server settings
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8000, ge=1, le=65535, description="Server port")

    # Catalog API settings
    catalog_api_url: str = Field(
        default="http://localhost:3333",
        description="Base URL of the catalog / favorites API",
    )
    http_timeout_sec: Optional[float] = Field(
        default=None, gt=0, description="HTTP timeout, unset means wait forever"
    )

    # Pricing display
    currency_symbol: str = Field(default="$", description="Currency prefix")
    decimal_separator: str = Field(default=".", description="Decimal separator")
    thousands_separator: str = Field(default=",", description="Thousands separator")

    # Ordering behaviour
    favorite_toggle_policy: FavoriteTogglePolicy = Field(
        default=FavoriteTogglePolicy.CONFIRMED,
        description="confirmed: flip only after the registry accepted the write",
    )
    order_submission_enabled: bool = Field(
        default=False, description="Send finished orders to POST /orders"
    )

    # Screen sessions
    max_open_screens: int = Field(
        default=1000, ge=1, description="Open screens kept before the least recently used is closed"
    )
    screen_idle_ttl_sec: float = Field(
        default=1800.0, gt=0, description="Screens unused for this long are closed"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(
        default="%(asctime)s %(levelname)s %(name)s: %(message)s",
        description="Log format string",
    )

    # CORS settings
    cors_origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:8000"],
        description="Allowed CORS origins",
    )
    cors_allow_credentials: bool = Field(
        default=True, description="Allow CORS credentials"
    )
    cors_allow_methods: list[str] = Field(
        default=["*"], description="Allowed HTTP methods"
    )
    cors_allow_headers: list[str] = Field(
        default=["*"], description="Allowed HTTP headers"
    )

    # API settings
    api_prefix: str = Field(default="", description="API route prefix")
    api_title: str = Field(
        default="GoRestaurant Food Details API", description="API documentation title"
    )
    api_description: str = Field(
        default="Dish customization, favorites and order totals",
        description="API documentation description",
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    @field_validator("environment", mode="before")
    @classmethod
    def validate_environment(cls, v):
        """Validate and normalize environment value"""
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    @field_validator("favorite_toggle_policy", mode="before")
    @classmethod
    def validate_toggle_policy(cls, v):
        if isinstance(v, str):
            return FavoriteTogglePolicy(v.lower())
        return v

    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.environment == Environment.PRODUCTION

    def is_development(self) -> bool:
        """Check if running in development environment"""
        return self.environment == Environment.DEVELOPMENT

    def is_testing(self) -> bool:
        """Check if running in testing environment"""
        return self.environment == Environment.TESTING


# Global settings instance
settings = Settings()
