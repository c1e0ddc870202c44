"""
Configuration management using Pydantic settings.
Handles database URL, token secrets, session cookies and seeding options.
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings
from typing import List
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables or a .env file."""

    # Application configuration
    app_name: str = "Car Marketplace"
    app_version: str = "1.0.0"
    environment: str = "development"
    debug: bool = False
    testing: bool = False

    # Database configuration
    database_url: str = "postgresql+asyncpg://postgres:postgres@db:5432/car_marketplace"

    # Token configuration (owner bearer tokens and guest API keys)
    jwt_secret_key: str = "your-secret-key-change-in-production"
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 30
    api_key_expire_days: int = 30
    require_api_key: bool = True

    # Browser session cookie holding the seeding flag and sell wizard state
    session_secret_key: str = "your-session-secret-change-in-production"
    session_cookie_name: str = "carmarket_session"

    # Demo data seeding
    seed_on_first_visit: bool = True
    seed_owner: str = "demo-seed"

    # Views
    featured_car_count: int = 3

    # API configuration
    cors_origins: List[str] = ["http://localhost:3000", "http://localhost:5173", "http://localhost:8000"]

    # Server configuration
    host: str = "0.0.0.0"
    port: int = 8000

    @field_validator("database_url", mode="before")
    @classmethod
    def validate_database_url(cls, v):
        """Ensure an async driver is used."""
        if v and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        if v and v.startswith("sqlite://"):
            return v.replace("sqlite://", "sqlite+aiosqlite://", 1)
        return v

    @field_validator("jwt_secret_key", "session_secret_key", mode="before")
    @classmethod
    def validate_secret_key(cls, v):
        """Validate secret key strength."""
        if not v:
            raise ValueError("Secret keys must not be empty")
        if len(v) < 32 and not v.startswith("your-"):
            raise ValueError("Secret keys must be at least 32 characters long")
        return v

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v):
        """Validate environment setting."""
        allowed_envs = ["development", "testing", "staging", "production"]
        if v not in allowed_envs:
            raise ValueError(f"Environment must be one of: {allowed_envs}")
        return v

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @property
    def is_testing(self) -> bool:
        return self.environment == "testing" or self.testing

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    This ensures we only create one instance of settings throughout the app lifecycle.
    """
    return Settings()


# Global settings instance
settings = get_settings()
