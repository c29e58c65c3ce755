"""
Input validation for digest operations.

Normalizes caller input to the two shapes the hash strategies accept:
raw bytes for data, and a text filesystem path for files.
"""

from __future__ import annotations

import os
from typing import Any

from .exceptions import InvalidInputTypeError


def _type_name(value: Any) -> str:
    return type(value).__name__


def coerce_data(value: Any) -> bytes | bytearray | memoryview:
    """
    Return the byte range to hash for a data input.

    Bytes-like values are hashed over their full length, NUL bytes included.
    Strings are hashed as their UTF-8 encoding.

    Raises:
        InvalidInputTypeError: For any other type, or a str that cannot be
            encoded (lone surrogates).
    """
    if isinstance(value, (bytes, bytearray, memoryview)):
        return value
    if isinstance(value, str):
        try:
            return value.encode("utf-8")
        except UnicodeEncodeError as e:
            raise InvalidInputTypeError(
                "String input is not encodable as UTF-8",
                expected="utf-8 str",
                actual=_type_name(value),
                cause=e,
            ) from e
    raise InvalidInputTypeError(
        "Data must be bytes-like or str",
        expected="bytes | bytearray | memoryview | str",
        actual=_type_name(value),
    )


def coerce_path(value: Any) -> str:
    """
    Return a text filesystem path for a file input.

    Accepts str and os.PathLike objects that resolve to str. Bytes paths
    are rejected along with every other type, before touching the disk.

    Raises:
        InvalidInputTypeError: If the value is not a text path.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, os.PathLike):
        path = os.fspath(value)
        if isinstance(path, str):
            return path
    raise InvalidInputTypeError(
        "Path must be str or a text os.PathLike",
        expected="str | os.PathLike[str]",
        actual=_type_name(value),
    )
