"""
Diagnostic loggers.

DigestLogger sends records to stderr and/or a rotating log file as the
``[logging]`` config section asks. NullLogger is what library calls get
before bootstrap().
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from ..core.interfaces.logger import ILogger
from ..core.models.config import LoggingConfig

LOG_FILE_PATH = Path.home() / ".digestkit" / "digestkit.log"
MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB
BACKUP_COUNT = 3

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class DigestLogger(ILogger):
    """
    ILogger backed by a named stdlib logger.

    The named logger is reconfigured on construction: existing handlers are
    dropped and propagation is off, so building a second DigestLogger with
    the same name replaces rather than duplicates output. With no output
    enabled it gets a NullHandler and stays silent.
    """

    def __init__(
        self,
        config: LoggingConfig | None = None,
        name: str = "digestkit",
        log_file: Path | None = None,
    ) -> None:
        """
        Args:
            config: Level and enabled outputs (defaults: warning, none)
            name: stdlib logger name
            log_file: Log file location when file output is on
        """
        config = config or LoggingConfig()
        level = logging.getLevelName(config.level.upper())

        self._logger = logging.getLogger(name)
        self._logger.handlers.clear()
        self._logger.setLevel(level)
        self._logger.propagate = False

        for handler in self._build_handlers(config, log_file or LOG_FILE_PATH):
            handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
            self._logger.addHandler(handler)

        if not self._logger.handlers:
            self._logger.addHandler(logging.NullHandler())

    @staticmethod
    def _build_handlers(config: LoggingConfig, log_file: Path) -> list[logging.Handler]:
        handlers: list[logging.Handler] = []
        if config.console:
            handlers.append(logging.StreamHandler(sys.stderr))
        if config.file:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            handlers.append(
                RotatingFileHandler(log_file, maxBytes=MAX_FILE_SIZE, backupCount=BACKUP_COUNT)
            )
        return handlers

    def debug(self, message: str, *args: Any) -> None:
        self._logger.debug(message, *args)

    def warning(self, message: str, *args: Any) -> None:
        self._logger.warning(message, *args)

    def error(self, message: str, *args: Any) -> None:
        self._logger.error(message, *args)


class NullLogger(ILogger):
    """Discards everything."""

    def debug(self, message: str, *args: Any) -> None:
        pass

    def warning(self, message: str, *args: Any) -> None:
        pass

    def error(self, message: str, *args: Any) -> None:
        pass
