"""Configuration management using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Catalog query
    default_page_size: int = Field(
        default=12,
        description="Items per page on storefront views",
    )
    catalog_page_size: int = Field(
        default=24,
        description="Items per page on the catalog-wide shop view",
    )
    free_shipping_threshold: float = Field(
        default=50_000,
        description="Minimum price for an item to ship for free",
    )

    # Filter state persistence
    filter_state_key: str = Field(
        default="catalog_filter_state",
        description="Key under which the current filter criteria are persisted",
    )
    filter_state_backend: Literal["memory", "redis"] = Field(
        default="memory",
        description="Where filter criteria are persisted (memory or redis)",
    )
    filter_state_ttl_seconds: int = Field(
        default=0,
        description="Expiry for persisted filter criteria in seconds (0 = never)",
    )

    # Redis
    redis_url: str = Field(
        default="redis://localhost:6379/0",
        description="Redis connection string",
    )

    # Catalog data
    catalog_data_path: str = Field(
        default="",
        description="Optional JSON file with catalog items to serve",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR)",
    )
    log_json: bool = Field(
        default=True,
        description="Enable JSON structured logging",
    )

    # API Settings
    api_title: str = Field(
        default="Shop Catalog",
        description="API title",
    )
    api_version: str = Field(
        default="0.1.0",
        description="API version",
    )
    service_environment: str = Field(
        default="development",
        description="Deployment environment (development, staging, production)",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
