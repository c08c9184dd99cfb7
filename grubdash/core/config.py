"""
Application Configuration Module

Centralizes all configuration using environment variables with Pydantic Settings.
Every value can be set in the environment or in a local .env file.

Usage:
    from grubdash.core.config import get_settings

    settings = get_settings()
    if settings.seed_data:
        # Load the bundled sample menu at startup

Version: 1.0.0
"""

import logging
import sys
from enum import Enum
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class IdStrategy(str, Enum):
    """
    Identifier allocation strategies.

    Attributes:
        UUID: 32 character random hex ids (default)
        COUNTER: Monotonic integer ids rendered as strings
    """
    UUID = "uuid"
    COUNTER = "counter"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        debug: Enable verbose logging and error details

        # API Configuration
        app_name: Title shown in the OpenAPI docs
        app_version: Version shown in the OpenAPI docs
        api_host: Host to bind the API server
        api_port: Port for the API server
        cors_origins: Comma-separated list of allowed origins

        # Storage
        id_strategy: How new record ids are generated
        seed_data: Load the bundled fixture records at startup
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==========================================================================
    # ENVIRONMENT
    # ==========================================================================

    debug: bool = Field(
        default=False,
        description="Enable debug mode with verbose logging"
    )

    # ==========================================================================
    # APPLICATION
    # ==========================================================================

    app_name: str = Field(
        default="GrubDash API",
        description="Application display name"
    )
    app_version: str = Field(
        default="1.0.0",
        description="Application version"
    )
    api_host: str = Field(
        default="0.0.0.0",
        description="API server host"
    )
    api_port: int = Field(
        default=5000,
        description="API server port"
    )
    cors_origins: str = Field(
        default="*",
        description="Comma-separated list of allowed CORS origins"
    )

    # ==========================================================================
    # STORAGE
    # ==========================================================================

    id_strategy: IdStrategy = Field(
        default=IdStrategy.UUID,
        description="Identifier allocation strategy (uuid or counter)"
    )
    seed_data: bool = Field(
        default=False,
        description="Load the bundled fixture dishes and orders at startup"
    )

    # ==========================================================================
    # VALIDATORS
    # ==========================================================================

    @field_validator("id_strategy", mode="before")
    @classmethod
    def validate_id_strategy(cls, v: str) -> IdStrategy:
        """Convert string to IdStrategy enum."""
        if isinstance(v, IdStrategy):
            return v
        try:
            return IdStrategy(str(v).lower())
        except ValueError:
            valid = [e.value for e in IdStrategy]
            raise ValueError(f"Invalid id_strategy. Must be one of: {valid}")

    # ==========================================================================
    # COMPUTED PROPERTIES
    # ==========================================================================

    @property
    def cors_origins_list(self) -> list[str]:
        """Get allowed CORS origins as a list."""
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached application settings.

    Settings are read from the environment once and shared for the
    lifetime of the process.

    Returns:
        Settings: Configured application settings

    Example:
        >>> settings = get_settings()
        >>> print(settings.id_strategy)
        IdStrategy.UUID
    """
    return Settings()


# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================

def setup_logging(debug: bool = False, level: int = logging.INFO) -> logging.Logger:
    """
    Configure application-wide logging.

    Args:
        debug: Force DEBUG level regardless of ``level``
        level: Logging level (DEBUG, INFO, WARNING, ERROR)

    Returns:
        Configured package logger
    """
    if debug:
        level = logging.DEBUG

    log_format = "%(asctime)s │ %(levelname)-8s │ %(name)-25s │ %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=level,
        format=log_format,
        datefmt=date_format,
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    return logging.getLogger("grubdash")
