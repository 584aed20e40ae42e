"""Reconciliation of module checkouts against the lock.

This is the decision core: every registry module is fingerprinted and compared to its
recorded digest. A single mismatch aborts the whole pass and nothing is returned for
persistence, so a tampered digest can never become the new baseline.
"""

import logging
from collections.abc import Generator
from concurrent.futures import ThreadPoolExecutor
from contextlib import closing
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from modlock.core.errors import TamperDetectedError
from modlock.core.fingerprint import fingerprint_module
from modlock.core.lock_store.types import ModuleLock
from modlock.core.metadata import RegistryModule

logger = logging.getLogger(__name__)


class ModuleStatus(Enum):
    """Classification of a module that passed the integrity check."""

    NEW = "new"
    UNCHANGED = "unchanged"


@dataclass(frozen=True)
class ModuleDigest:
    """Freshly computed digest, keyed by the checkout directory name."""

    module_name: str
    digest: str


@dataclass(frozen=True)
class ModuleOutcome:
    """Result of reconciling one module."""

    module: RegistryModule
    module_name: str
    digest: str
    status: ModuleStatus


@dataclass(frozen=True)
class ReconcileResult:
    """Result of a clean reconciliation pass.

    Attributes:
        outcomes: One entry per fingerprinted module, in processing order
        skipped: Modules declared in the metadata but missing on disk
        lock: Updated lock (loaded entries plus newly recorded digests)
    """

    outcomes: list[ModuleOutcome]
    skipped: list[RegistryModule]
    lock: ModuleLock

    @property
    def new_modules(self) -> list[str]:
        return [o.module_name for o in self.outcomes if o.status == ModuleStatus.NEW]


def module_name_for(module_dir: Path) -> str:
    """Derive the lock key of a module from its checkout directory."""
    return module_dir.name


def processing_order(modules: list[RegistryModule]) -> list[RegistryModule]:
    """Sort modules into the fixed order used for fingerprinting and abort decisions."""
    return sorted(modules, key=lambda m: (module_name_for(Path(m.key)), m.key))


def reconcile(
    modules: list[RegistryModule],
    lock: ModuleLock,
    modules_dir: Path,
    *,
    jobs: int = 1,
) -> ReconcileResult:
    """Reconcile module checkouts against a loaded lock.

    Args:
        modules: Registry modules from the metadata record
        lock: Lock as loaded before this pass (not modified)
        modules_dir: Directory holding the module checkouts
        jobs: Number of modules to fingerprint concurrently

    Returns:
        ReconcileResult with the updated lock to persist

    Raises:
        TamperDetectedError: On the first module (in processing order) whose digest
            differs from the recorded one
        UnreadableModuleError: If a module checkout cannot be read
    """
    present: list[RegistryModule] = []
    present_dirs: list[Path] = []
    skipped: list[RegistryModule] = []
    for module in processing_order(modules):
        module_dir = modules_dir / module.key
        if not module_dir.exists():
            logger.warning("Module path %s not found, skipping", module_dir)
            skipped.append(module)
            continue
        present.append(module)
        present_dirs.append(module_dir)

    # Digests recorded during this pass; a name seen twice must match itself too.
    recorded: dict[str, str] = {}
    outcomes: list[ModuleOutcome] = []
    digests = _fingerprint_all(present_dirs, jobs)
    with closing(digests):
        for module, computed in zip(present, digests, strict=True):
            previous = recorded.get(computed.module_name, lock.get(computed.module_name))
            if previous is None:
                status = ModuleStatus.NEW
                recorded[computed.module_name] = computed.digest
            elif previous == computed.digest:
                status = ModuleStatus.UNCHANGED
            else:
                logger.debug(
                    "Digest mismatch for %s: recorded=%s current=%s",
                    computed.module_name,
                    previous,
                    computed.digest,
                )
                raise TamperDetectedError(computed.module_name, previous, computed.digest)

            logger.debug("Module %s: %s", computed.module_name, status.value)
            outcomes.append(
                ModuleOutcome(
                    module=module,
                    module_name=computed.module_name,
                    digest=computed.digest,
                    status=status,
                )
            )

    return ReconcileResult(
        outcomes=outcomes,
        skipped=skipped,
        lock=lock.with_entries(recorded),
    )


def _fingerprint_one(module_dir: Path) -> ModuleDigest:
    return ModuleDigest(
        module_name=module_name_for(module_dir),
        digest=fingerprint_module(module_dir),
    )


def _fingerprint_all(module_dirs: list[Path], jobs: int) -> Generator[ModuleDigest, None, None]:
    """Yield digests in the order of module_dirs.

    With jobs > 1 the work runs on a thread pool. Results are still yielded in input
    order, and outstanding work is cancelled once the generator is closed.
    """
    if jobs <= 1 or len(module_dirs) <= 1:
        for module_dir in module_dirs:
            yield _fingerprint_one(module_dir)
        return

    executor = ThreadPoolExecutor(max_workers=jobs, thread_name_prefix="modlock-fingerprint")
    try:
        futures = [executor.submit(_fingerprint_one, d) for d in module_dirs]
        for future in futures:
            yield future.result()
    finally:
        executor.shutdown(wait=True, cancel_futures=True)
