"""Dry-run wrapper for lock store operations."""

from pathlib import Path

import click

from modlock.cli.output import user_output
from modlock.core.lock_store.abc import LockStore
from modlock.core.lock_store.types import ModuleLock


class DryRunLockStore(LockStore):
    """Dry-run wrapper for lock persistence.

    Read operations are delegated to the wrapped implementation.
    Write operations print dry-run messages instead of modifying the lock file.
    """

    def __init__(self, wrapped: LockStore) -> None:
        """Initialize dry-run wrapper with a real implementation.

        Args:
            wrapped: The lock store implementation to wrap
        """
        self._wrapped = wrapped

    def exists(self, path: Path) -> bool:
        """Delegate read operation to wrapped implementation."""
        return self._wrapped.exists(path)

    def load(self, path: Path) -> ModuleLock:
        """Delegate read operation to wrapped implementation."""
        return self._wrapped.load(path)

    def save(self, path: Path, lock: ModuleLock) -> None:
        """Print dry-run message instead of writing the lock file."""
        user_output(
            click.style("[DRY RUN] ", fg="yellow")
            + f"Would write {len(lock)} module hash(es) to {path}"
        )
