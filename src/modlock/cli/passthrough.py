"""Click group that forwards unknown subcommands to Terraform."""

import click

from modlock.cli.error_boundary import cli_error_boundary
from modlock.core.context import ModlockContext


class RawArgsCommand(click.Command):
    """Command whose arguments are kept verbatim in ctx.args.

    Click's parser drops a bare `--` and rejects unknown options. Forwarded
    arguments must reach terraform untouched, so parsing is skipped entirely.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        ctx.args = list(args)
        return ctx.args


def run_passthrough(ctx: ModlockContext, args: list[str]) -> None:
    """Run terraform with args untouched and exit with its exit code."""
    exit_code = _run(ctx, args)
    raise SystemExit(exit_code)


@cli_error_boundary
def _run(ctx: ModlockContext, args: list[str]) -> int:
    return ctx.terraform.run(args, ctx.cwd)


def make_passthrough_command(name: str) -> click.Command:
    """Build a command that forwards `name` and its raw arguments to terraform."""

    @click.command(name, cls=RawArgsCommand, add_help_option=False)
    @click.pass_context
    def passthrough(click_ctx: click.Context) -> None:
        run_passthrough(click_ctx.obj, [name, *click_ctx.args])

    return passthrough


class PassthroughGroup(click.Group):
    """Click Group whose unknown subcommands are passed through to Terraform.

    Registered commands (init, verify, lock) are resolved normally. Anything else
    becomes a pass-through invocation with the remaining arguments left untouched.
    Terraform global options go after `--`, e.g. `modlock -- -chdir=infra plan`.
    """

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        command = super().get_command(ctx, cmd_name)
        if command is not None:
            return command
        return make_passthrough_command(cmd_name)

    def format_epilog(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        formatter.write_paragraph()
        formatter.write_text(
            "Any other command (plan, apply, fmt, ...) is passed to terraform unchanged."
        )
        super().format_epilog(ctx, formatter)
