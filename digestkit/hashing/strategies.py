"""
Hash algorithm strategy implementations.

Each strategy encapsulates the primitive for one algorithm. MD5, SHA-1 and
the SHA-2 family come from hashlib; MD2 and MD4 come from pycryptodome since
OpenSSL 3 no longer exposes them through hashlib.
"""

import hashlib
from abc import ABC, abstractmethod
from typing import Any

from Crypto.Hash import MD2, MD4


class HashStrategy(ABC):
    """
    Abstract base class for hash algorithm strategies.

    Implementations must provide:
    - algorithm_name: Unique identifier for the algorithm
    - digest_length: Raw digest size in bytes
    - create_hasher(): Factory method for hasher instances

    Strategies hold no state; every digest gets its own hasher, so one
    strategy can serve concurrent callers.
    """

    extended: bool = False

    @property
    @abstractmethod
    def algorithm_name(self) -> str:
        """Return algorithm identifier (e.g., 'md5', 'sha256')."""
        pass

    @property
    @abstractmethod
    def digest_length(self) -> int:
        """Return raw digest length in bytes."""
        pass

    @abstractmethod
    def create_hasher(self) -> Any:
        """Create a new hasher instance."""
        pass

    def update(self, hasher: Any, data: bytes) -> None:
        """Update hasher with data. Default implementation works for most hashers."""
        hasher.update(data)

    def hexdigest(self, hasher: Any) -> str:
        """Get hex digest from hasher. Default implementation works for most hashers."""
        return hasher.hexdigest().lower()

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class MD5Strategy(HashStrategy):
    """MD5 hashing strategy - for legacy compatibility only."""

    @property
    def algorithm_name(self) -> str:
        return "md5"

    @property
    def digest_length(self) -> int:
        return 16

    def create_hasher(self) -> Any:
        # Fingerprinting, not security; keeps working on FIPS builds
        return hashlib.md5(usedforsecurity=False)


class SHA1Strategy(HashStrategy):
    """SHA-1 hashing strategy."""

    @property
    def algorithm_name(self) -> str:
        return "sha1"

    @property
    def digest_length(self) -> int:
        return 20

    def create_hasher(self) -> Any:
        return hashlib.sha1(usedforsecurity=False)


class SHA256Strategy(HashStrategy):
    """SHA-256 hashing strategy - widely compatible."""

    @property
    def algorithm_name(self) -> str:
        return "sha256"

    @property
    def digest_length(self) -> int:
        return 32

    def create_hasher(self) -> Any:
        return hashlib.sha256()


class MD2Strategy(HashStrategy):
    """MD2 hashing strategy (RFC 1319) - legacy, extended set only."""

    extended = True

    @property
    def algorithm_name(self) -> str:
        return "md2"

    @property
    def digest_length(self) -> int:
        return 16

    def create_hasher(self) -> Any:
        return MD2.new()


class MD4Strategy(HashStrategy):
    """MD4 hashing strategy (RFC 1320) - legacy, extended set only."""

    extended = True

    @property
    def algorithm_name(self) -> str:
        return "md4"

    @property
    def digest_length(self) -> int:
        return 16

    def create_hasher(self) -> Any:
        return MD4.new()


class SHA384Strategy(HashStrategy):
    """SHA-384 hashing strategy - truncated SHA-512 variant."""

    extended = True

    @property
    def algorithm_name(self) -> str:
        return "sha384"

    @property
    def digest_length(self) -> int:
        return 48

    def create_hasher(self) -> Any:
        return hashlib.sha384()


class SHA512Strategy(HashStrategy):
    """SHA-512 hashing strategy - stronger variant of SHA-2."""

    extended = True

    @property
    def algorithm_name(self) -> str:
        return "sha512"

    @property
    def digest_length(self) -> int:
        return 64

    def create_hasher(self) -> Any:
        return hashlib.sha512()


CORE_STRATEGIES: tuple[type[HashStrategy], ...] = (
    MD5Strategy,
    SHA1Strategy,
    SHA256Strategy,
)

EXTENDED_STRATEGIES: tuple[type[HashStrategy], ...] = (
    MD2Strategy,
    MD4Strategy,
    SHA384Strategy,
    SHA512Strategy,
)
