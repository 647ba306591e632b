"""
Library configuration and environment variables.

This module unifies configuration using pydantic-settings.
Variables can come from:
1. .env file
2. System environment variables (have priority)
3. Default values

Naming convention:
- In Python code: snake_case (require_codes_on_decode)
- In .env or ENV vars: UPPER_CASE (REQUIRE_CODES_ON_DECODE)
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Unified library configuration.

    Example:
        # In .env or as environment variable:
        LOG_LEVEL=DEBUG
        REQUIRE_CODES_ON_DECODE=true
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ============================================================================
    # LOGGING SETTINGS
    # ============================================================================
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_format: str = Field(
        default="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | trace_id={extra[trace_id]} | {name}:{function}:{line} - {message}",  # noqa: E501
        description="Log format",
    )
    logger_name: str = Field(
        default="devicereg", description="Logger name enabled by configure_logger()"
    )
    logger_enqueue: bool = Field(
        default=False, description="Enqueue logs using multiprocessing"
    )

    # ============================================================================
    # REGISTRATION FLOW SETTINGS
    # ============================================================================
    require_codes_on_decode: bool = Field(
        default=False,
        description=(
            "Treat 'code' and 'activation_code' as mandatory when decoding "
            "a serialized registration response"
        ),
    )
    state_length: int = Field(
        default=32,
        ge=16,
        le=64,
        description="Random bytes used when generating a registration state",
    )


# ============================================================================
# SINGLETON PATTERN - Global settings instance
# ============================================================================


@lru_cache
def get_settings() -> Settings:
    """
    Get library settings (LRU cached).

    This function is cached, so the .env file is only read once.
    To refresh the configuration, clear the cache:
        get_settings.cache_clear()

    Returns:
        Settings: Library configuration instance.
    """
    return Settings()


settings = get_settings()
