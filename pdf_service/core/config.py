"""Configuration management for the PDF parsing service."""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .. import __version__


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging Configuration
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json")
    log_file: Optional[Path] = Field(default=None)

    # Download Configuration
    download_timeout: float = Field(default=60.0, gt=0)
    max_download_bytes: int = Field(default=300 * 1024 * 1024, gt=0)
    user_agent: str = Field(default=f"pdf-parsing-service/{__version__}")

    # Parsing Configuration
    pdf_backend: str = Field(default="pymupdf")

    # Response Configuration
    distinct_error_status: bool = Field(default=False)

    # Server Configuration
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=4000)
    reload: bool = Field(default=False)

    # Caller-side Configuration
    pdf_service_url: str = Field(default="http://localhost:4000")

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ("json", "console"):
            raise ValueError("log_format must be 'json' or 'console'")
        return v

    @field_validator("pdf_backend")
    @classmethod
    def normalize_backend(cls, v: str) -> str:
        return v.strip().lower()


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
