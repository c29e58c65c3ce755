"""
Click context extension for digestkit CLI.

Provides DigestContext dataclass that holds the bootstrapped services
passed through the Click command chain via ctx.obj.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..core.bootstrap import bootstrap, reset
from ..core.interfaces.logger import ILogger
from ..core.settings import DigestkitSettings, load_settings
from ..hashing import AlgorithmCatalog
from ..services.digest import DigestService


@dataclass
class DigestContext:
    """Extended context passed through Click command chain.

    Attributes:
        settings: Loaded settings
        service: Digest dispatcher built from settings
        logger: Diagnostic logger
    """

    settings: DigestkitSettings
    service: DigestService
    logger: ILogger

    @property
    def catalog(self) -> AlgorithmCatalog:
        return self.service.catalog

    @classmethod
    def create(cls, config_path: Path | None = None) -> DigestContext:
        """Bootstrap services for one CLI invocation.

        An explicit config path must load cleanly; a discovered one only
        logs a warning on failure.

        Raises:
            ConfigFileError: If config_path is given and cannot be loaded
        """
        settings = load_settings(config_path=config_path, strict=config_path is not None)

        reset()
        container = bootstrap(settings=settings)

        return cls(
            settings=settings,
            service=container.resolve(DigestService),
            logger=container.resolve(ILogger),  # type: ignore[type-abstract]
        )
