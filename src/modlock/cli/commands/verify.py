import click

from modlock.cli.commands.report import render_report
from modlock.cli.error_boundary import cli_error_boundary
from modlock.core.context import ModlockContext
from modlock.core.verification import verify_modules


@click.command("verify")
@click.option(
    "-j",
    "--jobs",
    type=click.IntRange(min=1),
    default=None,
    help="Number of modules to hash in parallel (default: from config, 1).",
)
@click.pass_obj
@cli_error_boundary
def verify_cmd(ctx: ModlockContext, jobs: int | None) -> None:
    """Verify downloaded registry modules without running terraform."""
    report = verify_modules(ctx.config, ctx.lock_store, jobs=jobs)
    render_report(ctx, report)
