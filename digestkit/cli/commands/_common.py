"""Helpers shared by the digest commands."""

from __future__ import annotations

import click

from ...core.exceptions import UnknownAlgorithmError
from ..context import DigestContext


def require_algorithm(ctx: DigestContext, algorithm: str) -> str:
    """Return the catalog name for ALGORITHM (case-insensitive), or fail as a usage error."""
    try:
        return ctx.catalog.require(algorithm.lower()).name
    except UnknownAlgorithmError as e:
        available = ", ".join(ctx.catalog.names)
        raise click.BadParameter(
            f"unknown algorithm {algorithm!r} (available: {available})",
            param_hint="ALGORITHM",
        ) from e
