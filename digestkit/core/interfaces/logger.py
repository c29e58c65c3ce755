"""
Logger interface for digestkit diagnostics.

Digest results and CLI output never go through this; it carries the
reasons behind None results and config problems.
"""

from abc import ABC, abstractmethod
from typing import Any


class ILogger(ABC):
    """Diagnostic sink with %-style lazy formatting, as in stdlib logging."""

    @abstractmethod
    def debug(self, message: str, *args: Any) -> None:
        pass

    @abstractmethod
    def warning(self, message: str, *args: Any) -> None:
        pass

    @abstractmethod
    def error(self, message: str, *args: Any) -> None:
        pass
