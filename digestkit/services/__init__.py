"""Service implementations: digest dispatcher and logging."""

from .digest import DigestService
from .logging import DigestLogger, NullLogger

__all__ = ["DigestLogger", "DigestService", "NullLogger"]
