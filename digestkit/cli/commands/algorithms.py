"""
Native Click implementation of the algorithms command.

Usage: digestkit algorithms
"""

from __future__ import annotations

import click

from ..context import DigestContext


@click.command("algorithms")
@click.pass_obj
def algorithms(ctx: DigestContext) -> None:
    """List the available digest algorithms."""
    for name, digest_length, extended in ctx.catalog.describe():
        kind = "extended" if extended else "core"
        click.echo(f"{name:<8}{digest_length * 8:>5} bits  {kind}")
