"""
Configuration module - loads all env vars using pydantic-settings.
This is the SINGLE SOURCE OF TRUTH for all config values.
"""

from functools import lru_cache
from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "PM Internship Portal"

    # MongoDB
    mongodb_uri: str = "mongodb://127.0.0.1:27017"
    mongodb_db: str = "pm_internship_portal"
    mongodb_timeout_ms: int = 5000

    # JWT Auth
    jwt_secret_key: str = "change-this-secret"
    jwt_algorithm: str = "HS256"
    jwt_expire_minutes: int = 1440

    # Password hashing cost
    bcrypt_rounds: int = 10

    # Recommendations
    recommendation_limit: int = 5
    seed_catalog: bool = True

    # App
    cors_origins: str = "*"
    log_level: str = "INFO"
    debug: bool = False

    def cors_origin_list(self) -> List[str]:
        """Comma separated CORS origins as a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8"
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
