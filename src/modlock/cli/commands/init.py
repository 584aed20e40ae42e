import logging

import click

from modlock.cli.commands.report import render_report
from modlock.cli.error_boundary import cli_error_boundary
from modlock.cli.output import error_prefix, user_output
from modlock.cli.passthrough import RawArgsCommand, run_passthrough
from modlock.core.context import ModlockContext
from modlock.core.verification import verify_modules

logger = logging.getLogger(__name__)

HELP_FLAGS = frozenset({"-h", "-help", "--help"})


@click.command("init", cls=RawArgsCommand, add_help_option=False)
@click.pass_context
def init_cmd(click_ctx: click.Context) -> None:
    """Run `terraform init`, then verify registry modules against the lock file.

    ARGS are passed to `terraform init` unchanged. The run fails if any registry
    module differs from its recorded hash.
    """
    ctx: ModlockContext = click_ctx.obj
    args = click_ctx.args
    if HELP_FLAGS.intersection(args):
        run_passthrough(ctx, ["init", *args])

    _init_and_verify(ctx, args)


@cli_error_boundary
def _init_and_verify(ctx: ModlockContext, args: list[str]) -> None:
    exit_code = ctx.terraform.run(["init", *args], ctx.cwd)
    if exit_code != 0:
        logger.debug("terraform init exited with %d, skipping verification", exit_code)
        user_output(error_prefix() + f"terraform init failed (exit code {exit_code})")
        raise SystemExit(exit_code)

    report = verify_modules(ctx.config, ctx.lock_store)
    render_report(ctx, report)
