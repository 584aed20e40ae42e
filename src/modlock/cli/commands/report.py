"""Rendering of verification reports."""

import click

from modlock.cli.output import user_output
from modlock.core.context import ModlockContext
from modlock.core.reconcile import ModuleStatus
from modlock.core.verification import VerificationReport


def render_report(ctx: ModlockContext, report: VerificationReport) -> None:
    """Print a human-readable summary of a successful verification pass."""
    if report.status == "no-modules-dir":
        user_output("No modules directory found. Skipping module check.")
        return
    if report.status == "no-metadata":
        user_output("No modules metadata file found. Skipping module check.")
        return
    if report.status == "no-registry-modules":
        user_output(
            "No Terraform modules from the registry were found. No lock file check needed."
        )
        return

    result = report.result
    if result is None:
        return

    for module in result.skipped:
        user_output(click.style("? ", fg="yellow") + f"{module.key} (not downloaded, skipped)")

    for outcome in result.outcomes:
        if outcome.status == ModuleStatus.NEW:
            user_output(click.style("+ ", fg="green") + f"{outcome.module_name} (new)")
        else:
            user_output(click.style("= ", dim=True) + f"{outcome.module_name} (unchanged)")

    lock_path = ctx.config.lock_path
    if report.lock_written and not ctx.dry_run:
        if report.lock_created:
            user_output(f"Created lock file {lock_path}")
        else:
            user_output(f"Updated lock file {lock_path}")

    user_output(
        click.style("✓ ", fg="green")
        + f"{len(result.outcomes)} registry module(s) verified"
    )
