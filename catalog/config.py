"""
Configuration management for the catalog library.

Loads and validates environment variables for the application.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via environment variables.
    """

    # Service Configuration
    APP_NAME: str = "catalog"
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    # Database Configuration
    DATABASE_URL: str = "sqlite:///./catalog.db"
    DATABASE_ECHO: bool = False
    SLOW_QUERY_THRESHOLD_MS: int = 100

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


# Global settings instance
settings = Settings()
