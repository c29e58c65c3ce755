"""
Native Click implementation of the data command.

Usage: digestkit data ALGORITHM [TEXT]
"""

from __future__ import annotations

import click

from ...core.exceptions import DigestException
from ..context import DigestContext
from ._common import require_algorithm


@click.command("data")
@click.argument("algorithm")
@click.argument("text", required=False)
@click.pass_obj
def data(ctx: DigestContext, algorithm: str, text: str | None) -> None:
    """Digest TEXT, or standard input when TEXT is omitted.

    TEXT is hashed as UTF-8. Standard input is hashed as raw bytes.

    \b
    Examples:
        digestkit data sha1 "This is a test"
        printf 'abc' | digestkit data sha256
    """
    name = require_algorithm(ctx, algorithm)

    payload: str | bytes = text if text is not None else click.get_binary_stream("stdin").read()

    try:
        digest = ctx.service.compute_data(name, payload)
    except DigestException as e:
        ctx.logger.error("data digest failed: %s", e)
        click.echo(f"digestkit: {e}", err=True)
        raise SystemExit(e.exit_code) from e

    click.echo(digest)
