import logging
import os
from pathlib import Path

import click

from modlock.cli.commands.init import init_cmd
from modlock.cli.commands.lock import lock_group
from modlock.cli.commands.verify import verify_cmd
from modlock.cli.error_boundary import cli_error_boundary
from modlock.cli.passthrough import PassthroughGroup
from modlock.core.context import ModlockContext, create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


def configure_logging(debug: bool) -> None:
    """Enable debug logging when --debug or MODLOCK_DEBUG is set."""
    if debug or os.getenv("MODLOCK_DEBUG"):
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


@cli_error_boundary
def _create_context(root: Path | None, dry_run: bool) -> ModlockContext:
    return create_context(root=root, dry_run=dry_run)


@click.group(cls=PassthroughGroup, context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="modlock")
@click.option(
    "-C",
    "--root",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Terraform working directory (default: current directory).",
)
@click.option(
    "--dry-run",
    is_flag=True,
    default=False,
    help="Show lock file changes without writing them.",
)
@click.option("--debug", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, root: Path | None, dry_run: bool, debug: bool) -> None:
    """Verify Terraform registry modules against a hash lock file."""
    configure_logging(debug)
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = _create_context(root, dry_run)


cli.add_command(init_cmd)
cli.add_command(lock_group)
cli.add_command(verify_cmd)


def main() -> None:
    """CLI entry point used by the `modlock` console script."""
    cli()
