"""
Application bootstrap for digestkit.

Initializes the DI container with the configured services.
Called once at CLI startup; library use works without it.
"""

from pathlib import Path

from .container import ServiceContainer, get_container
from .interfaces.logger import ILogger
from .settings import DigestkitSettings, load_settings

_initialized = False


def bootstrap(
    config_path: Path | None = None,
    start_dir: str | None = None,
    settings: DigestkitSettings | None = None,
) -> ServiceContainer:
    """
    Bootstrap the digestkit application.

    Registers settings, the logger, the algorithm catalog and the digest
    service as singletons.

    Args:
        config_path: Explicit path to a config file
        start_dir: Directory to start config discovery from
        settings: Pre-loaded settings, skipping discovery

    Returns:
        Initialized ServiceContainer
    """
    global _initialized

    container = get_container()

    if _initialized:
        return container

    if settings is None:
        settings = load_settings(config_path=config_path, start_dir=start_dir)

    _register_core_services(container, settings)

    _initialized = True
    return container


def _register_core_services(container: ServiceContainer, settings: DigestkitSettings) -> None:
    """Register core application services."""
    from ..hashing import AlgorithmCatalog
    from ..services.digest import DigestService
    from ..services.logging import DigestLogger

    container.register_singleton(DigestkitSettings, implementation=settings)

    def create_logger() -> ILogger:
        return DigestLogger(settings.logging)

    container.register_singleton(ILogger, factory=create_logger)  # type: ignore[type-abstract]

    def create_catalog() -> AlgorithmCatalog:
        return AlgorithmCatalog.default(settings)

    container.register_singleton(AlgorithmCatalog, factory=create_catalog)

    def create_digest_service() -> DigestService:
        return DigestService(
            catalog=container.resolve(AlgorithmCatalog),
            chunk_size=settings.digest.chunk_size,
            logger=container.resolve(ILogger),  # type: ignore[type-abstract]
        )

    container.register_singleton(DigestService, factory=create_digest_service)

    if settings.config_error:
        container.resolve(ILogger).warning(settings.config_error)  # type: ignore[type-abstract]


def reset() -> None:
    """
    Reset the application state.

    Useful for testing to ensure clean state between tests.
    """
    global _initialized
    ServiceContainer.reset()
    _initialized = False


def is_initialized() -> bool:
    """Check if the application has been bootstrapped."""
    return _initialized
