"""
Configuration module for contacts service.

This module provides centralized configuration management using Pydantic settings.
All configuration values can be overridden via environment variables or .env file.
"""

from pathlib import Path
from typing import Literal

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load service-local environment variables
env_path = Path(__file__).parent.parent / ".env"
if env_path.exists():
    load_dotenv(dotenv_path=env_path)


class Settings(BaseSettings):
    """
    Application settings for the contacts service.

    Attributes:
        SERVICE_NAME: Name used to identify the service in logs
        DATABASE_URL: SQLAlchemy connection URL for the contact store
        DB_ECHO: Echo SQL statements to the log
        DB_POOL_PRE_PING: Test pooled connections before use
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        LOG_JSON: Emit JSON structured logs instead of human-readable output
    """

    SERVICE_NAME: str = Field(
        default="contacts-service",
        description="Name used to identify the service in logs",
    )

    # Database configuration
    DATABASE_URL: str = Field(
        default="sqlite:///./contacts.db",
        description="SQLAlchemy connection URL for the contact store",
    )
    DB_ECHO: bool = Field(
        default=False,
        description="Echo SQL statements to the log",
    )
    DB_POOL_PRE_PING: bool = Field(
        default=True,
        description="Test pooled connections before use",
    )

    # Logging configuration
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    LOG_JSON: bool = Field(
        default=False,
        description="Use JSON structured logging",
    )

    model_config = SettingsConfigDict(
        env_file=env_path,
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("DATABASE_URL")
    @classmethod
    def validate_database_url(cls, value: str) -> str:
        """
        Validate that the database URL is set.

        Raises:
            ValueError: If URL is empty
        """
        value = value.strip()
        if not value:
            raise ValueError("DATABASE_URL cannot be empty")
        return value


# Global settings instance
settings = Settings()
