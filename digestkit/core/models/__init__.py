"""Pydantic models for digestkit."""

from .config import (
    DEFAULT_CHUNK_SIZE,
    ConfigBaseModel,
    DigestConfig,
    LoggingConfig,
    LogLevel,
)

__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "ConfigBaseModel",
    "DigestConfig",
    "LogLevel",
    "LoggingConfig",
]
