"""
Process-wide service registry for digestkit.

bootstrap() fills it with the settings, logger, catalog and digest service;
library code reads it through resolve_or_default() so nothing breaks when
it is empty.
"""

from collections.abc import Callable
from typing import Optional, TypeVar

from dependency_injector import providers

T = TypeVar("T")


class ServiceContainer:
    """Maps a service type to the dependency-injector provider that builds it."""

    _instance: Optional["ServiceContainer"] = None

    def __init__(self) -> None:
        self._providers: dict[type, providers.Provider] = {}

    @classmethod
    def get_instance(cls) -> "ServiceContainer":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Forget the global container and everything registered in it."""
        cls._instance = None

    def register_singleton(
        self,
        service_type: type[T],
        implementation: T | None = None,
        factory: Callable[[], T] | None = None,
    ) -> None:
        """
        Bind service_type to one shared instance.

        Args:
            service_type: Key used by resolve()
            implementation: Ready-made instance
            factory: Called on first resolve() to build the instance
        """
        if implementation is not None:
            self._providers[service_type] = providers.Object(implementation)
        elif factory is not None:
            self._providers[service_type] = providers.Singleton(factory)
        else:
            raise ValueError("Must provide either implementation or factory")

    def resolve(self, service_type: type[T]) -> T:
        """
        Return the instance bound to service_type.

        Raises:
            KeyError: If service_type was never registered
        """
        provider = self._providers.get(service_type)
        if provider is None:
            raise KeyError(f"No provider registered for: {service_type}")
        return provider()

    def try_resolve(self, service_type: type[T]) -> T | None:
        provider = self._providers.get(service_type)
        return provider() if provider is not None else None


def get_container() -> ServiceContainer:
    return ServiceContainer.get_instance()


def try_resolve(service_type: type[T]) -> T | None:
    """Resolve from the global container, or None before bootstrap()."""
    return get_container().try_resolve(service_type)
