"""Service lookup that works with or without bootstrap()."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")


def resolve_or_default(service_type: type[T], default_factory: Callable[[], T]) -> T:
    """Return the registered service_type, or default_factory() if none is registered.

    Library calls such as ``digestkit.md5`` run without bootstrap(), so
    their logger comes from here as a NullLogger until the CLI registers a
    real one.
    """
    from .container import try_resolve

    instance = try_resolve(service_type)
    return instance if instance is not None else default_factory()
