"""
Application settings loaded from environment variables.

Values can be overridden with SHOPSMART_* variables or a local .env file.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # UI
    app_title: str = "My Shopping List"

    # Markers for products the user types in by hand
    custom_product_icon: str = "🛒"
    custom_product_description: str = "Added manually"
    custom_product_category: str = "Custom"

    # Logging
    log_level: str = "INFO"

    class Config:
        env_prefix = "SHOPSMART_"
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
