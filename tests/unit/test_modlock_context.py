"""Tests for context creation."""

from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

from modlock.core.context import ModlockContext, create_context
from modlock.core.lock_store import DryRunLockStore, FakeLockStore, RealLockStore
from modlock.core.terraform import FakeTerraform, RealTerraform


def test_create_context_returns_real_implementations(tmp_path: Path) -> None:
    ctx = create_context(root=tmp_path, dry_run=False)

    assert isinstance(ctx.terraform, RealTerraform)
    assert isinstance(ctx.lock_store, RealLockStore)
    assert ctx.cwd == tmp_path.resolve()
    assert ctx.config.lock_path == tmp_path.resolve() / ".module_hashes.json"


def test_create_context_dry_run_wraps_lock_store(tmp_path: Path) -> None:
    ctx = create_context(root=tmp_path, dry_run=True)

    assert isinstance(ctx.lock_store, DryRunLockStore)
    assert ctx.dry_run is True


def test_create_context_rejects_invalid_config(tmp_path: Path) -> None:
    (tmp_path / ".modlock.toml").write_text("jobs = -1\n", encoding="utf-8")

    with pytest.raises(ValueError):
        create_context(root=tmp_path, dry_run=False)


def test_for_test_uses_fake_defaults() -> None:
    ctx = ModlockContext.for_test()

    assert isinstance(ctx.terraform, FakeTerraform)
    assert isinstance(ctx.lock_store, FakeLockStore)
    assert ctx.cwd == Path("/test/default/root")


def test_context_is_frozen() -> None:
    ctx = ModlockContext.for_test()

    with pytest.raises(FrozenInstanceError):
        ctx.dry_run = True  # type: ignore[misc]
