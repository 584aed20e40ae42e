"""Output utilities for CLI commands with clear intent.

user_output is for human-facing messages (stderr), so the wrapped tool's stdout
stays clean. machine_output is for data meant to be piped (stdout).
"""

from typing import Any

import click


def user_output(message: Any = "", nl: bool = True) -> None:
    """Print a message for the user on stderr."""
    click.echo(message, nl=nl, err=True)


def machine_output(message: Any = "", nl: bool = True) -> None:
    """Print machine-readable data on stdout."""
    click.echo(message, nl=nl)


def error_prefix() -> str:
    return click.style("Error: ", fg="red", bold=True)
