"""Commands for inspecting and editing the module lock file."""

import json

import click
from rich.console import Console
from rich.table import Table

from modlock.cli.error_boundary import cli_error_boundary
from modlock.cli.output import error_prefix, machine_output, user_output
from modlock.core.context import ModlockContext


@click.group("lock")
def lock_group() -> None:
    """Inspect or edit the module lock file."""


@lock_group.command("show")
@click.option("--json", "as_json", is_flag=True, help="Print the lock as JSON on stdout.")
@click.pass_obj
@cli_error_boundary
def show_cmd(ctx: ModlockContext, as_json: bool) -> None:
    """Show recorded module hashes."""
    lock_path = ctx.config.lock_path
    lock = ctx.lock_store.load(lock_path)

    if as_json:
        machine_output(json.dumps(lock.root, indent=2, sort_keys=True))
        return

    if len(lock) == 0:
        user_output(f"No modules recorded in {lock_path}")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("module", style="cyan", no_wrap=True)
    table.add_column("sha256", no_wrap=True)
    for name in lock.names():
        table.add_row(name, lock.root[name])

    console = Console(stderr=True, width=200)
    console.print(table)


@lock_group.command("forget")
@click.argument("module_names", nargs=-1, required=True)
@click.pass_obj
@cli_error_boundary
def forget_cmd(ctx: ModlockContext, module_names: tuple[str, ...]) -> None:
    """Remove MODULE_NAMES from the lock file.

    Use this after an intentional module upgrade: the next `modlock init` records
    the new hash instead of failing.
    """
    lock_path = ctx.config.lock_path
    lock = ctx.lock_store.load(lock_path)

    unknown = [name for name in module_names if name not in lock]
    if unknown:
        user_output(error_prefix() + f"Not in {lock_path}: {', '.join(unknown)}")
        raise SystemExit(1)

    ctx.lock_store.save(lock_path, lock.without(list(module_names)))
    if not ctx.dry_run:
        for name in module_names:
            user_output(f"Removed {name} from {lock_path}")
