"""Pydantic configuration models for mimereg."""

import sys
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings

from mimereg.registry import DATA_VERSION


class RegistryConfig(BaseModel):
    """Registry and corpus configuration."""

    data_file: Path | None = None
    data_version: str = DATA_VERSION
    platform: str = Field(default_factory=lambda: sys.platform, min_length=1)

    @field_validator("data_file", mode="before")
    @classmethod
    def validate_data_file(cls, v: Path | str | None) -> Path | None:
        """Expand user path and require an existing file."""
        if v is None:
            return None
        if isinstance(v, str):
            v = Path(v)
        expanded = v.expanduser().resolve()
        if not expanded.is_file():
            raise ValueError(f"Corpus file does not exist: {expanded}")
        return expanded


class LoggingConfig(BaseModel):
    """Logging configuration for loguru."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "ERROR"
    format: Literal["console", "json"] = "console"
    file: Path | None = None
    rotation: str = "10 MB"
    retention: str = "7 days"


class Config(BaseSettings):
    """Root configuration for mimereg."""

    registry: RegistryConfig = Field(default_factory=RegistryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {
        "env_prefix": "MIMEREG_",
        "env_nested_delimiter": "__",
    }
