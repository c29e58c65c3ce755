"""
Algorithm catalog.

Binds each algorithm name to its descriptor. The catalog is filled once,
in its constructor, from the ``digest.extended`` setting and is read-only
afterwards; there is no public register method.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ..core.exceptions import (
    AlgorithmComputationError,
    DigestException,
    DigestValidationError,
    DuplicateAlgorithmError,
    FileAccessError,
    UnknownAlgorithmError,
)
from ..core.models.config import DEFAULT_CHUNK_SIZE
from ..core.validation import coerce_data, coerce_path
from .strategies import CORE_STRATEGIES, EXTENDED_STRATEGIES, HashStrategy

if TYPE_CHECKING:
    from ..core.settings import DigestkitSettings

_HEX_RE = re.compile(r"^[0-9a-f]+$")


@dataclass(frozen=True)
class AlgorithmDescriptor:
    """
    One catalog entry: an algorithm name bound to its hash strategy.

    ``compute_data``/``compute_file`` raise typed DigestException errors;
    ``hash_data``/``hash_file`` return None instead.
    """

    name: str
    digest_length: int
    strategy: HashStrategy
    extended: bool = False

    @classmethod
    def from_strategy(cls, strategy: HashStrategy) -> AlgorithmDescriptor:
        return cls(
            name=strategy.algorithm_name,
            digest_length=strategy.digest_length,
            strategy=strategy,
            extended=strategy.extended,
        )

    @property
    def hex_length(self) -> int:
        return 2 * self.digest_length

    def new_hasher(self) -> Any:
        """Create a fresh hasher for this algorithm."""
        try:
            return self.strategy.create_hasher()
        except Exception as e:
            raise AlgorithmComputationError(
                "Hash primitive unavailable", algorithm=self.name, cause=e
            ) from e

    def update(self, hasher: Any, data: bytes | bytearray | memoryview) -> None:
        try:
            self.strategy.update(hasher, data)
        except Exception as e:
            raise AlgorithmComputationError(
                "Hash primitive failed during update", algorithm=self.name, cause=e
            ) from e

    def finalize(self, hasher: Any) -> str:
        """
        Render the hasher's digest as lowercase hex.

        Raises:
            AlgorithmComputationError: If the primitive fails or the digest
                is not exactly ``hex_length`` lowercase hex characters.
        """
        try:
            digest = self.strategy.hexdigest(hasher)
        except Exception as e:
            raise AlgorithmComputationError(
                "Hash primitive failed during finalize", algorithm=self.name, cause=e
            ) from e

        if len(digest) != self.hex_length or not _HEX_RE.match(digest):
            raise AlgorithmComputationError(
                "Hash primitive returned a malformed digest",
                algorithm=self.name,
                context={"expected_length": self.hex_length, "actual_length": len(digest)},
            )
        return digest

    def compute_data(self, data: Any) -> str:
        """Hash an in-memory value, raising on failure."""
        payload = coerce_data(data)
        hasher = self.new_hasher()
        self.update(hasher, payload)
        return self.finalize(hasher)

    def compute_file(self, path: Any, chunk_size: int = DEFAULT_CHUNK_SIZE) -> str:
        """
        Hash a file's contents in ``chunk_size`` reads, raising on failure.

        The file is opened read-only and closed on every exit path.
        """
        file_path = coerce_path(path)
        if chunk_size <= 0:
            raise DigestValidationError(
                "chunk_size must be positive", context={"chunk_size": chunk_size}
            )
        hasher = self.new_hasher()
        try:
            with open(file_path, "rb") as f:
                for chunk in iter(lambda: f.read(chunk_size), b""):
                    self.update(hasher, chunk)
        except (OSError, ValueError) as e:
            raise FileAccessError.from_error(file_path, e) from e
        return self.finalize(hasher)

    def hash_data(self, data: Any) -> str | None:
        try:
            return self.compute_data(data)
        except DigestException:
            return None

    def hash_file(self, path: Any, chunk_size: int = DEFAULT_CHUNK_SIZE) -> str | None:
        try:
            return self.compute_file(path, chunk_size)
        except DigestException:
            return None


class AlgorithmCatalog:
    """
    Read-only catalog of hash algorithms.

    Example:
        catalog = AlgorithmCatalog(extended=False)
        catalog.names                  # ('md5', 'sha1', 'sha256')
        catalog.require("sha1").hash_data(b"abc")
    """

    def __init__(
        self,
        extended: bool = True,
        strategies: Iterable[HashStrategy] | None = None,
    ):
        """
        Initialize the catalog.

        Args:
            extended: Include md2, md4, sha384 and sha512
            strategies: Explicit strategy list, replacing the built-in set

        Raises:
            DuplicateAlgorithmError: If two strategies share a name
        """
        self._extended = extended
        self._descriptors: dict[str, AlgorithmDescriptor] = {}

        if strategies is None:
            classes = CORE_STRATEGIES + (EXTENDED_STRATEGIES if extended else ())
            strategies = [cls() for cls in classes]

        for strategy in strategies:
            self._register(strategy)

    @classmethod
    def default(cls, settings: DigestkitSettings | None = None) -> AlgorithmCatalog:
        """Build the catalog from loaded settings."""
        if settings is None:
            from ..core.settings import load_settings

            settings = load_settings()
        return cls(extended=settings.digest.extended)

    def _register(self, strategy: HashStrategy) -> None:
        descriptor = AlgorithmDescriptor.from_strategy(strategy)
        if descriptor.name in self._descriptors:
            raise DuplicateAlgorithmError(
                f"Algorithm registered twice: {descriptor.name}", algorithm=descriptor.name
            )
        self._descriptors[descriptor.name] = descriptor

    @property
    def extended(self) -> bool:
        return self._extended

    @property
    def names(self) -> tuple[str, ...]:
        """Algorithm names in registration order."""
        return tuple(self._descriptors)

    @property
    def descriptors(self) -> tuple[AlgorithmDescriptor, ...]:
        return tuple(self._descriptors.values())

    def get(self, algorithm: Any) -> AlgorithmDescriptor | None:
        """
        Get descriptor by algorithm name.

        Returns:
            AlgorithmDescriptor or None if not found
        """
        if not isinstance(algorithm, str):
            return None
        return self._descriptors.get(algorithm)

    def require(self, algorithm: Any) -> AlgorithmDescriptor:
        """
        Get descriptor by algorithm name.

        Raises:
            UnknownAlgorithmError: If the name is not in the catalog
        """
        descriptor = self.get(algorithm)
        if descriptor is None:
            raise UnknownAlgorithmError(
                f"Unknown hash algorithm: {algorithm}",
                algorithm=str(algorithm),
                available=list(self.names),
            )
        return descriptor

    def describe(self) -> list[tuple[str, int, bool]]:
        """Rows of (name, digest_length, extended) for display."""
        return [(d.name, d.digest_length, d.extended) for d in self._descriptors.values()]

    def __contains__(self, algorithm: object) -> bool:
        return self.get(algorithm) is not None

    def __iter__(self) -> Iterator[AlgorithmDescriptor]:
        return iter(self.descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)

    def __repr__(self) -> str:
        return f"AlgorithmCatalog(extended={self._extended}, names={list(self.names)})"
