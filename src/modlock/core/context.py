"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from modlock.core.config import ModlockConfig, load_config
from modlock.core.lock_store.abc import LockStore
from modlock.core.lock_store.dry_run import DryRunLockStore
from modlock.core.lock_store.real import RealLockStore
from modlock.core.terraform.abc import Terraform
from modlock.core.terraform.real import RealTerraform


@dataclass(frozen=True)
class ModlockContext:
    """Immutable context holding all dependencies for modlock operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    terraform: Terraform
    lock_store: LockStore
    config: ModlockConfig
    cwd: Path  # Working root the wrapped terraform runs in
    dry_run: bool

    @staticmethod
    def for_test(
        terraform: Terraform | None = None,
        lock_store: LockStore | None = None,
        config: ModlockConfig | None = None,
        cwd: Path | None = None,
        dry_run: bool = False,
    ) -> "ModlockContext":
        """Create test context with optional pre-configured implementations.

        Unspecified integrations default to fakes so no subprocess is spawned and no
        lock file is written.

        Args:
            terraform: Optional Terraform implementation. If None, creates FakeTerraform.
            lock_store: Optional LockStore implementation. If None, creates FakeLockStore.
            config: Optional config. If None, uses defaults rooted at cwd.
            cwd: Optional working root. If None, uses Path("/test/default/root").
            dry_run: Whether to enable dry-run mode (default False).

        Returns:
            ModlockContext configured with provided values and test defaults

        Example:
            >>> ctx = ModlockContext.for_test(
            ...     terraform=FakeTerraform(exit_code=1),
            ...     config=ModlockConfig.for_root(tmp_path),
            ... )
        """
        from modlock.core.lock_store.fake import FakeLockStore
        from modlock.core.terraform.fake import FakeTerraform

        if config is None:
            root = cwd if cwd is not None else Path("/test/default/root")
            config = ModlockConfig.for_root(root)

        if cwd is None:
            cwd = config.root

        if terraform is None:
            terraform = FakeTerraform()

        if lock_store is None:
            lock_store = FakeLockStore()

        if dry_run and not isinstance(lock_store, DryRunLockStore):
            lock_store = DryRunLockStore(lock_store)

        return ModlockContext(
            terraform=terraform,
            lock_store=lock_store,
            config=config,
            cwd=cwd,
            dry_run=dry_run,
        )


def create_context(*, root: Path | None = None, dry_run: bool) -> ModlockContext:
    """Create production context with real implementations.

    Called once at CLI entry point to create the context for the entire
    command execution.

    Args:
        root: Working root (defaults to the current directory)
        dry_run: If True, wrap the lock store so writes are printed, not performed

    Returns:
        ModlockContext with real implementations

    Raises:
        ValueError: If .modlock.toml is malformed
    """
    resolved_root = (root if root is not None else Path.cwd()).resolve()
    config = load_config(resolved_root)

    lock_store: LockStore = RealLockStore()
    if dry_run:
        lock_store = DryRunLockStore(lock_store)

    return ModlockContext(
        terraform=RealTerraform(config.terraform),
        lock_store=lock_store,
        config=config,
        cwd=resolved_root,
        dry_run=dry_run,
    )
