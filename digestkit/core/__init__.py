"""
Core infrastructure for digestkit.

This module provides:
- ServiceContainer: DI container using dependency-injector
- Application bootstrap for initialization
- Settings loading from TOML and environment
- Custom exception hierarchy
"""

from .bootstrap import bootstrap, is_initialized, reset
from .container import ServiceContainer, get_container, try_resolve
from .exceptions import (
    AlgorithmComputationError,
    ConfigFileError,
    DigestConfigError,
    DigestException,
    DigestValidationError,
    DuplicateAlgorithmError,
    FileAccessError,
    InvalidInputTypeError,
    UnknownAlgorithmError,
)
from .settings import DigestkitSettings, find_config_file, load_settings

__all__ = [
    "AlgorithmComputationError",
    "ConfigFileError",
    "DigestConfigError",
    "DigestException",
    "DigestValidationError",
    "DigestkitSettings",
    "DuplicateAlgorithmError",
    "FileAccessError",
    "InvalidInputTypeError",
    "ServiceContainer",
    "UnknownAlgorithmError",
    "bootstrap",
    "find_config_file",
    "get_container",
    "is_initialized",
    "load_settings",
    "reset",
    "try_resolve",
]
