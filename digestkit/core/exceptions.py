"""
Custom exception hierarchy for digestkit.

The public digest functions collapse every failure into a ``None`` result.
These exceptions are what the strict service methods raise underneath, so
callers that need to tell a bad argument from a missing file can opt in.
"""

from __future__ import annotations


class DigestException(Exception):
    """
    Base exception for all digestkit errors.

    Attributes:
        message: Human-readable error description
        context: Additional debugging context (algorithm, file path, etc.)
        exit_code: Suggested exit code for CLI (default: 1)
        recoverable: Whether retry/recovery may be possible
    """

    exit_code: int = 1
    recoverable: bool = True

    def __init__(
        self,
        message: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        if cause is not None:
            self.__cause__ = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class DigestConfigError(DigestException):
    """Base class for configuration-related errors."""

    pass


class ConfigFileError(DigestConfigError):
    """
    Error reading or parsing a configuration file.

    Raised for TOML parsing errors, permission errors, etc.
    """

    def __init__(
        self,
        message: str,
        *,
        file_path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if file_path:
            ctx["file_path"] = file_path
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Validation Errors
# =============================================================================


class DigestValidationError(DigestException, ValueError):
    """
    Base class for input validation errors.

    Inherits from ValueError so callers catching ValueError keep working.
    """

    recoverable: bool = False


class InvalidInputTypeError(DigestValidationError, TypeError):
    """Input was not of a type the digest operation accepts."""

    def __init__(
        self,
        message: str,
        *,
        expected: str | None = None,
        actual: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if expected:
            ctx["expected"] = expected
        if actual:
            ctx["actual"] = actual
        super().__init__(message, context=ctx, cause=cause)


class UnknownAlgorithmError(DigestValidationError):
    """Requested algorithm is not present in the catalog."""

    exit_code: int = 2

    def __init__(
        self,
        message: str,
        *,
        algorithm: str | None = None,
        available: list[str] | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if algorithm is not None:
            ctx["algorithm"] = algorithm
        if available is not None:
            ctx["available"] = available
        super().__init__(message, context=ctx, cause=cause)


class DuplicateAlgorithmError(DigestValidationError):
    """Two descriptors were registered under the same name."""

    def __init__(
        self,
        message: str,
        *,
        algorithm: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if algorithm is not None:
            ctx["algorithm"] = algorithm
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Computation Errors
# =============================================================================


class FileAccessError(DigestException):
    """
    File could not be opened or read to completion.

    Covers missing files, permission errors, directories, I/O errors
    mid-read and paths the OS cannot represent (embedded NUL, lone
    surrogates). The originating error is chained as the cause.
    """

    def __init__(
        self,
        message: str,
        *,
        file_path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if file_path:
            ctx["file_path"] = file_path
        super().__init__(message, context=ctx, cause=cause)

    @classmethod
    def from_error(cls, file_path: str, error: OSError | ValueError) -> FileAccessError:
        """Wrap the OSError or ValueError raised by open() or read()."""
        reason = getattr(error, "strerror", None) or error
        return cls(f"Cannot read file: {reason}", file_path=file_path, cause=error)


class AlgorithmComputationError(DigestException):
    """
    The hash primitive failed or produced a malformed digest.

    Not expected in practice; raised when the underlying library refuses
    the algorithm (e.g. FIPS mode) or returns a digest of the wrong length.
    """

    recoverable: bool = False

    def __init__(
        self,
        message: str,
        *,
        algorithm: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if algorithm is not None:
            ctx["algorithm"] = algorithm
        super().__init__(message, context=ctx, cause=cause)
