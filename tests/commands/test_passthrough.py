"""Tests for forwarding unknown subcommands to terraform."""

from pathlib import Path

from click.testing import CliRunner

from modlock.cli.cli import cli
from modlock.core.context import ModlockContext
from modlock.core.lock_store import FakeLockStore
from modlock.core.terraform import FakeTerraform


def test_unknown_command_is_forwarded_verbatim() -> None:
    terraform = FakeTerraform()
    ctx = ModlockContext.for_test(terraform=terraform, cwd=Path("/infra"))

    runner = CliRunner()
    result = runner.invoke(cli, ["plan", "-out=tfplan", "-var", "region=eu-west-1"], obj=ctx)

    assert result.exit_code == 0
    assert terraform.run_calls == [
        (["plan", "-out=tfplan", "-var", "region=eu-west-1"], Path("/infra"))
    ]


def test_exit_code_is_propagated() -> None:
    ctx = ModlockContext.for_test(terraform=FakeTerraform(exit_code=2))

    runner = CliRunner()
    result = runner.invoke(cli, ["apply", "-auto-approve"], obj=ctx)

    assert result.exit_code == 2


def test_help_flag_after_passthrough_command_goes_to_terraform() -> None:
    terraform = FakeTerraform()
    ctx = ModlockContext.for_test(terraform=terraform)

    runner = CliRunner()
    runner.invoke(cli, ["fmt", "--help"], obj=ctx)

    assert terraform.run_calls[0][0] == ["fmt", "--help"]


def test_global_options_after_double_dash() -> None:
    terraform = FakeTerraform()
    ctx = ModlockContext.for_test(terraform=terraform)

    runner = CliRunner()
    result = runner.invoke(cli, ["--", "-chdir=infra", "plan"], obj=ctx)

    assert result.exit_code == 0
    assert terraform.run_calls[0][0] == ["-chdir=infra", "plan"]


def test_passthrough_never_touches_lock() -> None:
    store = FakeLockStore()
    ctx = ModlockContext.for_test(lock_store=store)

    runner = CliRunner()
    runner.invoke(cli, ["validate"], obj=ctx)

    assert store.load_calls == []
    assert store.save_calls == []


def test_root_help_mentions_passthrough() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"], obj=ModlockContext.for_test())

    assert result.exit_code == 0
    assert "verify" in result.output
    assert "passed to terraform unchanged" in result.output


def test_double_dash_inside_forwarded_args_is_kept() -> None:
    terraform = FakeTerraform()
    ctx = ModlockContext.for_test(terraform=terraform)

    runner = CliRunner()
    result = runner.invoke(cli, ["plan", "--", "-target=x"], obj=ctx)

    assert result.exit_code == 0
    assert terraform.run_calls[0][0] == ["plan", "--", "-target=x"]


def test_init_keeps_double_dash_in_args(tmp_path: Path) -> None:
    terraform = FakeTerraform()
    ctx = ModlockContext.for_test(terraform=terraform, cwd=tmp_path)

    runner = CliRunner()
    runner.invoke(cli, ["init", "-upgrade", "--", "extra"], obj=ctx)

    assert terraform.run_calls[0][0] == ["init", "-upgrade", "--", "extra"]
