"""
Digest dispatcher.

Looks up the algorithm in the catalog, validates input and produces the
hex digest. ``hash_data``/``hash_file`` collapse every failure to None;
``compute_data``/``compute_file`` raise the typed errors instead.
"""

from __future__ import annotations

from typing import Any

from ..core.di import resolve_or_default
from ..core.exceptions import DigestException, FileAccessError
from ..core.interfaces.logger import ILogger
from ..core.models.config import DEFAULT_CHUNK_SIZE
from ..core.validation import coerce_path
from ..hashing import AlgorithmCatalog
from .logging import NullLogger


class DigestService:
    """
    Computes digests of in-memory data and files.

    Holds no per-call state; the catalog is read-only, so one service
    instance can be shared across threads.
    """

    def __init__(
        self,
        catalog: AlgorithmCatalog | None = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        logger: ILogger | None = None,
    ):
        """
        Initialize digest service.

        Args:
            catalog: Algorithm catalog (defaults to one built from settings)
            chunk_size: Read size for file hashing
            logger: Diagnostic logger (defaults to the container's ILogger)
        """
        if chunk_size <= 0:
            raise ValueError("chunk_size must be a positive number of bytes")
        self._catalog = catalog if catalog is not None else AlgorithmCatalog.default()
        self._chunk_size = chunk_size
        self._logger = logger

    @property
    def logger(self) -> ILogger:
        """Explicit logger, else the container's ILogger at call time."""
        return self._logger or resolve_or_default(ILogger, NullLogger)

    @property
    def catalog(self) -> AlgorithmCatalog:
        return self._catalog

    @property
    def chunk_size(self) -> int:
        return self._chunk_size

    def compute_data(self, algorithm: str, data: Any) -> str:
        """
        Compute the digest of in-memory data.

        Args:
            algorithm: Algorithm name ('md5', 'sha1', 'sha256', ...)
            data: bytes, bytearray, memoryview or str (hashed as UTF-8)

        Returns:
            Lowercase hex digest.

        Raises:
            UnknownAlgorithmError: Algorithm not in the catalog
            InvalidInputTypeError: Data is not bytes-like or str
            AlgorithmComputationError: The hash primitive failed
        """
        return self._catalog.require(algorithm).compute_data(data)

    def compute_file(self, algorithm: str, path: Any) -> str:
        """
        Compute the digest of a file's contents.

        Args:
            algorithm: Algorithm name
            path: str or os.PathLike resolving to str

        Returns:
            Lowercase hex digest.

        Raises:
            UnknownAlgorithmError: Algorithm not in the catalog
            InvalidInputTypeError: Path is not a text path
            FileAccessError: File could not be opened or read
            AlgorithmComputationError: The hash primitive failed
        """
        return self._catalog.require(algorithm).compute_file(path, self._chunk_size)

    def hash_data(self, algorithm: str, data: Any) -> str | None:
        """
        Compute the digest of in-memory data.

        Returns:
            Lowercase hex digest, or None for any failure.
        """
        try:
            return self.compute_data(algorithm, data)
        except DigestException as e:
            self.logger.debug("hash_data(%s) returned no result: %s", algorithm, e)
            return None

    def hash_file(self, algorithm: str, path: Any) -> str | None:
        """
        Compute the digest of a file.

        Returns:
            Lowercase hex digest, or None if the path is invalid, the file
            can't be read, or the primitive failed.
        """
        try:
            return self.compute_file(algorithm, path)
        except DigestException as e:
            self.logger.debug("hash_file(%s) returned no result: %s", algorithm, e)
            return None

    def compute_file_many(self, path: Any, algorithms: list[str]) -> dict[str, str]:
        """
        Compute several digests of one file in a single read pass.

        Args:
            path: str or os.PathLike resolving to str
            algorithms: Algorithm names; duplicates are computed once

        Returns:
            Dict of {algorithm: digest} in the order requested.

        Raises:
            Same as compute_file().
        """
        descriptors = {name: self._catalog.require(name) for name in algorithms}
        file_path = coerce_path(path)

        hashers = {name: d.new_hasher() for name, d in descriptors.items()}
        try:
            with open(file_path, "rb") as f:
                for chunk in iter(lambda: f.read(self._chunk_size), b""):
                    for name, hasher in hashers.items():
                        descriptors[name].update(hasher, chunk)
        except (OSError, ValueError) as e:
            raise FileAccessError.from_error(file_path, e) from e

        return {name: descriptors[name].finalize(hasher) for name, hasher in hashers.items()}

    def hash_file_many(self, path: Any, algorithms: list[str]) -> dict[str, str] | None:
        """
        Compute several digests of one file in a single read pass.

        Returns:
            Dict of {algorithm: digest}, or None for any failure.
        """
        try:
            return self.compute_file_many(path, algorithms)
        except DigestException as e:
            self.logger.debug("hash_file_many(%s) returned no result: %s", algorithms, e)
            return None
