"""
Application configuration module.

Provides strongly-typed settings using Pydantic BaseSettings. Values are loaded
from environment variables and .env (via python-dotenv automatically loaded by
Pydantic). Use get_settings() to obtain a cached Settings instance.

Storage:
- RESOURCES_FILE points at the JSON document holding the resource collection.
  Relative paths resolve against the process working directory.
- The file and its parent directories are created on first access.
"""

from functools import lru_cache
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# PUBLIC_INTERFACE
class Settings(BaseSettings):
    """Centralized application configuration powered by Pydantic BaseSettings."""

    # App
    APP_NAME: str = Field(default="Resource Service", description="Application name")
    APP_ENV: str = Field(default="development", description="Execution environment")
    LOG_LEVEL: Optional[str] = Field(
        default=None,
        description="Root log level (DEBUG, INFO, WARNING, ERROR). Derived from APP_ENV when unset.",
    )
    HOST: str = Field(default="0.0.0.0", description="Bind address for the HTTP server")
    PORT: int = Field(default=3000, description="Port for the FastAPI server")
    CORS_ALLOWED_ORIGINS: str = Field(default="*", description="Comma-separated list of allowed CORS origins or '*'")

    # Storage
    RESOURCES_FILE: str = Field(
        default="data/resources.json",
        description="Path of the JSON document that stores the resource collection",
    )
    API_PREFIX: str = Field(default="/resources", description="Mount prefix for the resource routes")

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Convenience helpers (non-env)
    def cors_origins_list(self) -> List[str]:
        """
        Parse CORS_ALLOWED_ORIGINS into a list. '*' returns ['*'] to indicate permissive mode.
        """
        raw = (self.CORS_ALLOWED_ORIGINS or "").strip()
        if raw == "*" or raw == "":
            return ["*"]
        return [o.strip() for o in raw.split(",") if o.strip()]

    def effective_log_level(self) -> str:
        """
        Resolve the log level: explicit LOG_LEVEL wins, otherwise INFO in production
        and DEBUG everywhere else.
        """
        if (self.LOG_LEVEL or "").strip():
            return self.LOG_LEVEL.strip().upper()
        return "INFO" if self.APP_ENV.strip().lower() == "production" else "DEBUG"


# PUBLIC_INTERFACE
@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings()
