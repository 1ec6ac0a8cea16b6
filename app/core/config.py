# app/core/config.py
from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Centralized application settings loaded from environment.

    Required env vars (.env):
      - JWT_SECRET (signing secret for access tokens)

    Optional:
      - DATABASE_URL (defaults to a local SQLite file)
      - DATABASE_SSLMODE (appended to PostgreSQL URLs, e.g. "require")
      - USE_FALLBACK_CATALOG (serve products from the static catalog only)
    """

    PROJECT_NAME: str = "Shop API"
    APP_VERSION: str = "1.0.0"
    API_PREFIX: str = "/api"

    # "development" exposes exception detail in 500 responses
    ENVIRONMENT: Literal["production", "development", "test"] = "production"
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str = "sqlite:///./shop.db"
    DATABASE_SSLMODE: str | None = None
    DATABASE_ECHO: bool = False

    # JWT issuing / verification
    JWT_SECRET: str
    JWT_ALG: str = "HS256"
    JWT_EXPIRES_HOURS: int = 24

    # Password hashing cost
    BCRYPT_ROUNDS: int = 12

    CORS_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    # Skip the database entirely for catalog reads
    USE_FALLBACK_CATALOG: bool = False

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings loader.
    Ensures we don't re-parse .env on every import / request.
    """
    return Settings()
