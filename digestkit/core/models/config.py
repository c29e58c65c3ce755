"""
Configuration models.

Provides Pydantic models for digestkit configuration with validation.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

LogLevel = Literal["debug", "info", "warning", "error"]

DEFAULT_CHUNK_SIZE = 8 * 1024 * 1024  # 8MB


class ConfigBaseModel(BaseModel):
    """Base model for config sections; coerces TOML and env strings, ignores unknown keys."""

    model_config = ConfigDict(validate_assignment=True, extra="ignore")


class DigestConfig(ConfigBaseModel):
    """Digest catalog configuration section.

    ``extended`` decides whether md2, md4, sha384 and sha512 are exposed.
    It is read once when the catalog is built and never re-read.
    """

    extended: bool = True
    chunk_size: int = Field(default=DEFAULT_CHUNK_SIZE)

    @field_validator("chunk_size")
    @classmethod
    def validate_chunk_size(cls, v: int) -> int:
        """Chunk size must be a positive byte count."""
        if v <= 0:
            raise ValueError("chunk_size must be a positive number of bytes")
        return v


class LoggingConfig(ConfigBaseModel):
    """Logging configuration section."""

    level: LogLevel = "warning"
    console: bool = False
    file: bool = False

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        """Accept level names in any case."""
        if isinstance(v, str):
            return v.strip().lower()
        return v
