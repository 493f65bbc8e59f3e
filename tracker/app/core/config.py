"""
Configuration settings for the Parcel Tracker.

This module handles application configuration using Pydantic settings.
"""

from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Application settings."""

    # Application
    app_name: str = "Parcel Tracker"
    log_level: str = "INFO"

    # Database Configuration
    database_url: str = "sqlite+aiosqlite:///tracker.db"
    db_echo: bool = False
    db_pool_size: int = 5
    db_max_overflow: int = 10

    # Per-call deadline for repository operations (None disables it)
    statement_timeout_seconds: Optional[float] = 5.0

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
