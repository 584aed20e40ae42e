"""One verification pass: metadata -> reconcile -> lock file.

Either the whole module set reconciles cleanly and the lock is updated, or an error
propagates and the lock file stays at its last trusted state.
"""

import logging
from dataclasses import dataclass
from typing import Literal

from modlock.core.config import ModlockConfig
from modlock.core.errors import NoMetadataError
from modlock.core.lock_store.abc import LockStore
from modlock.core.metadata import read_registry_modules
from modlock.core.reconcile import ReconcileResult, reconcile

logger = logging.getLogger(__name__)

VerificationStatus = Literal["no-modules-dir", "no-metadata", "no-registry-modules", "verified"]


@dataclass(frozen=True)
class VerificationReport:
    """Outcome of a successful verification pass.

    `result` is only set when status is "verified".
    """

    status: VerificationStatus
    result: ReconcileResult | None
    lock_written: bool
    lock_created: bool


def verify_modules(
    config: ModlockConfig,
    lock_store: LockStore,
    *,
    jobs: int | None = None,
) -> VerificationReport:
    """Verify every registry module against the lock and persist the updated lock.

    Args:
        config: Paths and registry settings for this invocation
        lock_store: Lock persistence implementation
        jobs: Fingerprint concurrency (defaults to config.jobs)

    Returns:
        VerificationReport describing what was checked

    Raises:
        MalformedMetadataError: If modules.json cannot be parsed
        CorruptLockFileError: If the existing lock file cannot be parsed
        UnreadableModuleError: If a module checkout cannot be read
        TamperDetectedError: If a module differs from its recorded digest
        PersistFailureError: If the updated lock cannot be written
    """
    if not config.modules_dir.exists():
        logger.debug("Modules directory %s does not exist", config.modules_dir)
        return VerificationReport(
            status="no-modules-dir", result=None, lock_written=False, lock_created=False
        )

    try:
        modules = read_registry_modules(config.metadata_path, config.registry_host)
    except NoMetadataError:
        logger.debug("Metadata file %s does not exist", config.metadata_path)
        return VerificationReport(
            status="no-metadata", result=None, lock_written=False, lock_created=False
        )

    if not modules:
        return VerificationReport(
            status="no-registry-modules", result=None, lock_written=False, lock_created=False
        )

    lock_existed = lock_store.exists(config.lock_path)
    lock = lock_store.load(config.lock_path)
    result = reconcile(
        modules,
        lock,
        config.modules_dir,
        jobs=jobs if jobs is not None else config.jobs,
    )

    should_write = len(result.lock) > 0 and (not lock_existed or result.lock != lock)
    if should_write:
        lock_store.save(config.lock_path, result.lock)
    else:
        logger.debug("Lock file %s already up to date", config.lock_path)

    return VerificationReport(
        status="verified",
        result=result,
        lock_written=should_write,
        lock_created=should_write and not lock_existed,
    )
