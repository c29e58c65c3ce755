"""
Digest functions.

Every catalog algorithm is exposed under two names: ``<name>`` hashes
in-memory data and ``<name>_file`` hashes a file. Both return a lowercase
hex string, or None when the input has the wrong type, the file can't be
read, or the hash primitive fails.

The catalog is built once at import from the ``digest.extended`` setting
(``DIGESTKIT_DIGEST__EXTENDED`` or the config file). Without it, md2, md4,
sha384 and sha512 and their ``_file`` variants are not defined here.

Example:
    >>> from digestkit import md5, sha256_file
    >>> md5("This is a test")
    'ce114e4501d2f4e2dcea3e17b546f339'
    >>> md5(123) is None
    True
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .core.settings import load_settings
from .hashing import AlgorithmCatalog
from .services.digest import DigestService

DigestFunction = Callable[[Any], str | None]


def _data_function(service: DigestService, name: str) -> DigestFunction:
    def digest(data: Any) -> str | None:
        return service.hash_data(name, data)

    digest.__name__ = digest.__qualname__ = name
    digest.__doc__ = (
        f"Return the {name.upper()} digest of data (bytes-like or str) as lowercase hex.\n\n"
        "Returns None if data is not bytes-like or str."
    )
    return digest


def _file_function(service: DigestService, name: str) -> DigestFunction:
    def digest_file(path: Any) -> str | None:
        return service.hash_file(name, path)

    digest_file.__name__ = digest_file.__qualname__ = f"{name}_file"
    digest_file.__doc__ = (
        f"Return the {name.upper()} digest of the file at path as lowercase hex.\n\n"
        "Returns None if path is not a str path or the file cannot be read."
    )
    return digest_file


def build_namespace(service: DigestService) -> dict[str, DigestFunction]:
    """
    Map each catalog algorithm to its data and file functions.

    Args:
        service: Dispatcher whose catalog decides which names exist

    Returns:
        Dict with ``<name>`` entries followed by ``<name>_file`` entries,
        in catalog order.
    """
    names = service.catalog.names
    namespace: dict[str, DigestFunction] = {}
    for name in names:
        namespace[name] = _data_function(service, name)
    for name in names:
        namespace[f"{name}_file"] = _file_function(service, name)
    return namespace


_settings = load_settings()

CATALOG = AlgorithmCatalog.default(_settings)
EXTENDED: bool = CATALOG.extended

_service = DigestService(catalog=CATALOG, chunk_size=_settings.digest.chunk_size)
_functions = build_namespace(_service)

globals().update(_functions)


def hash_data(algorithm: str, data: Any) -> str | None:
    """Digest in-memory data with the named algorithm; None on any failure."""
    return _service.hash_data(algorithm, data)


def hash_file(algorithm: str, path: Any) -> str | None:
    """Digest a file with the named algorithm; None on any failure."""
    return _service.hash_file(algorithm, path)


def available_algorithms() -> list[str]:
    """Names of the algorithms this process exposes."""
    return list(CATALOG.names)


__all__ = [
    "CATALOG",
    "EXTENDED",
    "available_algorithms",
    "build_namespace",
    "hash_data",
    "hash_file",
    *_functions,
]
