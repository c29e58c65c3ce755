"""
Click command implementations for digestkit CLI.

Each module corresponds to one command (e.g., file.py implements
'digestkit file'). Commands are registered with the main group by
register_commands() in digestkit.cli.
"""

from .algorithms import algorithms
from .data import data
from .file import file

COMMANDS = [
    algorithms,
    data,
    file,
]

__all__ = [
    "COMMANDS",
    "algorithms",
    "data",
    "file",
]
