from functools import lru_cache
from pydantic import field_validator
from pydantic_settings import BaseSettings
import os
from dotenv import load_dotenv


class Settings(BaseSettings):
    """Package settings with environment variable support."""

    # Service information
    SERVICE_NAME: str = "dialogflow-fulfillment"
    ENVIRONMENT: str = "development"

    # Logging configuration
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate that the log level is one the logging module knows."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Only structured JSON and plain text output are supported."""
        fmt = v.lower()
        if fmt not in ("json", "text"):
            raise ValueError("LOG_FORMAT must be 'json' or 'text'")
        return fmt

    class Config:
        env_prefix = "FULFILLMENT_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True


def load_env_file() -> None:
    """Load environment variables from .env file if it exists."""
    env_path = os.path.join(os.getcwd(), ".env")
    if os.path.exists(env_path):
        load_dotenv(dotenv_path=env_path)


@lru_cache
def get_settings() -> Settings:
    """
    Create and cache package settings.

    Returns:
        Settings: Settings instance
    """
    load_env_file()
    return Settings()
