# core/config.py

"""
Configuration management for the nearby news service.
"""

from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with validation."""

    # Service configuration
    app_name: str = "nearby-news-service"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 5000
    api_prefix: str = "/api/v1"

    # Storage backend: "mongo" for MongoDB, "memory" for the in-process store
    storage_backend: str = Field(
        default="mongo", description="Storage backend: 'mongo' or 'memory'"
    )

    # MongoDB configuration
    mongodb_url: str = Field(default="mongodb://localhost:27017")
    mongodb_database: str = "nearby_news"
    mongodb_collection_news: str = "news_items"
    mongodb_collection_locations: str = "location_pings"
    mongodb_server_selection_timeout: int = Field(
        default=2000, description="Server selection timeout in milliseconds"
    )

    # Retention configuration
    news_ttl_days: int = Field(default=7, description="Days an item stays visible")
    enable_retention_sweep: bool = True
    retention_sweep_interval_seconds: int = Field(
        default=3600, description="Interval between expiry sweeps"
    )

    # Query configuration
    max_radius_meters: float = 50000
    default_page_limit: int = 10
    max_page_limit: int = 100
    max_content_length: int = 500

    # Image upload configuration
    upload_dir: str = "uploads/news"
    max_image_bytes: int = 5 * 1024 * 1024  # 5MB
    image_base_url: Optional[str] = Field(
        default=None, description="Public URL prefix for stored images"
    )

    # Logging configuration
    log_level: str = "INFO"
    log_file_path: str = "logs/"

    # Validators
    @field_validator("storage_backend")
    @classmethod
    def validate_storage_backend(cls, v):
        valid_backends = {"mongo", "memory"}
        if v.lower() not in valid_backends:
            raise ValueError(f"storage_backend must be one of {sorted(valid_backends)}")
        return v.lower()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in levels:
            raise ValueError(f"log_level must be one of {sorted(levels)}")
        return v.upper()

    @field_validator("news_ttl_days", "retention_sweep_interval_seconds")
    @classmethod
    def validate_positive_duration(cls, v):
        if v < 1:
            raise ValueError("durations must be at least 1")
        return v

    @field_validator("max_radius_meters")
    @classmethod
    def validate_max_radius(cls, v):
        if v <= 0:
            raise ValueError("max_radius_meters must be positive")
        return v

    @field_validator("max_page_limit")
    @classmethod
    def validate_max_page_limit(cls, v):
        if v < 1 or v > 1000:
            raise ValueError("max_page_limit must be between 1 and 1000")
        return v

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


# Global settings instance
settings = Settings()
