"""Lock file persistence for module digests."""

from modlock.core.lock_store.abc import LockStore
from modlock.core.lock_store.dry_run import DryRunLockStore
from modlock.core.lock_store.fake import FakeLockStore
from modlock.core.lock_store.real import RealLockStore
from modlock.core.lock_store.types import ModuleLock

__all__ = [
    "DryRunLockStore",
    "FakeLockStore",
    "LockStore",
    "ModuleLock",
    "RealLockStore",
]
