"""Organism Dendrogram - Configuration Settings.

This module provides centralized configuration management using pydantic-settings
and python-dotenv for environment variable handling.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DendrogramSettings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ===========================================
    # Input
    # ===========================================
    organisms_file: Path = Field(
        default=Path("organisms.txt"),
        description="Default organisms file read by the command line interface",
    )
    file_encoding: str = Field(
        default="utf-8",
        description="Text encoding of organisms files",
    )

    # ===========================================
    # Logging & Debug
    # ===========================================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level",
    )
    verbose: bool = Field(
        default=False,
        description="Enable verbose output",
    )


@lru_cache
def get_settings() -> DendrogramSettings:
    """Get cached settings instance.

    Returns:
        DendrogramSettings: Application settings loaded from environment.
    """
    return DendrogramSettings()


# Convenience function for quick access
settings = get_settings()
