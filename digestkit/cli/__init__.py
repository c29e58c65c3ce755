"""
Click-based CLI for digestkit.

Usage:
    from digestkit.cli import cli
    cli()  # Invokes the CLI
"""

from __future__ import annotations

from pathlib import Path

import click

from ..core.exceptions import DigestConfigError
from .context import DigestContext

try:
    from importlib.metadata import version

    __version__ = version("digestkit")
except Exception:
    __version__ = "0.1.0"


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="digestkit")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file (default: discover .digestkit/config.toml).",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None) -> None:
    """digestkit - hex digests of data and files

    \b
    Commands:
        digestkit algorithms              List available algorithms
        digestkit data sha256 "text"      Digest a string (or stdin)
        digestkit file md5 a.bin b.bin    Digest files
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)

    try:
        ctx.obj = DigestContext.create(config_path)
    except DigestConfigError as e:
        raise click.ClickException(str(e)) from e


def register_commands() -> None:
    """Register all CLI commands with the main group."""
    from .commands import COMMANDS

    for cmd in COMMANDS:
        cli.add_command(cmd)


register_commands()


__all__ = [
    "DigestContext",
    "__version__",
    "cli",
    "register_commands",
]
