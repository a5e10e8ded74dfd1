"""Configuration management using environment variables."""

import codecs
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Decoder settings loaded from DVW_* environment variables."""

    # Input
    encoding: str = Field(default="utf-8", description="Text encoding of scout files")

    # Decoding
    set_count: int = Field(
        default=5, ge=1, le=5, description="Number of data lines expected in the [3SET] section"
    )
    strict_codes: bool = Field(
        default=True, description="Fail the decode on action codes that do not decode"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="console", description="Log format (json or console)")
    log_file: str | None = Field(
        default=None, description="JSON-lines log file written by setup_logging, if set"
    )

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Validate the encoding is known to the codecs registry."""
        try:
            return codecs.lookup(v).name
        except LookupError as e:
            raise ValueError(f"unknown encoding: {v}") from e

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid option."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v.upper()

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate log format is a valid option."""
        if v not in {"json", "console"}:
            raise ValueError("log_format must be 'json' or 'console'")
        return v

    class Config:
        """Pydantic configuration."""

        env_prefix = "DVW_"
        case_sensitive = False
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: Decoder settings.
    """
    return Settings()

