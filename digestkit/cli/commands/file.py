"""
Native Click implementation of the file command.

Usage: digestkit file ALGORITHM PATH...
"""

from __future__ import annotations

import click

from ...core.exceptions import DigestException
from ..context import DigestContext
from ._common import require_algorithm


@click.command("file")
@click.argument("algorithm")
@click.argument("paths", nargs=-1, required=True)
@click.pass_obj
def file(ctx: DigestContext, algorithm: str, paths: tuple[str, ...]) -> None:
    """Digest each file in PATHS.

    Prints one "<digest>  <path>" line per file. Unreadable files are
    reported on stderr and make the command exit with status 1. A failure
    of the hash primitive itself stops before the remaining files.

    \b
    Examples:
        digestkit file sha256 model.bin
        digestkit file md5 *.csv
    """
    name = require_algorithm(ctx, algorithm)

    exit_code = 0
    for path in paths:
        try:
            digest = ctx.service.compute_file(name, path)
        except DigestException as e:
            exit_code = max(exit_code, e.exit_code)
            ctx.logger.warning("file digest failed for %s: %s", path, e)
            click.echo(f"digestkit: {path}: {e.message}", err=True)
            if not e.recoverable:
                break
            continue
        click.echo(f"{digest}  {path}")

    if exit_code:
        raise SystemExit(exit_code)
