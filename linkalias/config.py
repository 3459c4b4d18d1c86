"""Configuration management for the alias registry."""

from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import Field


class Config(BaseSettings):
    """Registry configuration."""

    # Display settings
    base_url: str = Field(
        default="http://localhost:3000",
        description="Origin used when rendering short URLs as {origin}/{code}"
    )

    path_prefix: str = Field(
        default="",
        description="Path prefix for short URLs (e.g., '/s' for /s/abc123)"
    )

    # Short code settings
    short_code_length: int = Field(
        default=6,
        ge=1,
        description="Length of generated short codes"
    )

    custom_code_min_length: int = Field(
        default=3,
        ge=1,
        description="Minimum length of a custom short code"
    )

    custom_code_max_length: int = Field(
        default=20,
        ge=1,
        description="Maximum length of a custom short code"
    )

    max_collision_retries: int = Field(
        default=1000,
        ge=1,
        description="Draws attempted before the code space is declared exhausted"
    )

    # Alias lifetime settings
    default_validity_minutes: int = Field(
        default=30,
        ge=1,
        description="Validity applied when a request does not specify one"
    )

    max_batch_size: int = Field(
        default=5,
        ge=1,
        description="Largest batch callers may submit in one create_batch call"
    )

    purge_interval_seconds: float = Field(
        default=60.0,
        gt=0,
        description="Interval between background purges of expired aliases"
    )

    # Logging settings
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Log file path (logs to stdout if not specified)"
    )

    log_json: bool = Field(
        default=False,
        description="Use JSON format for logs"
    )

    log_buffer_size: int = Field(
        default=500,
        ge=0,
        description="Number of log entries kept in memory for display (0 disables)"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",  # Ignore extra environment variables
    }


def load_config() -> Config:
    """Load configuration from environment."""
    return Config()
