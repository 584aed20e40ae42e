"""In-memory lock store for tests."""

from pathlib import Path

from modlock.core.errors import CorruptLockFileError, PersistFailureError
from modlock.core.lock_store.abc import LockStore
from modlock.core.lock_store.types import ModuleLock


class FakeLockStore(LockStore):
    """In-memory fake implementation of lock persistence.

    Constructor Injection:
    - Initial lock files are provided via `locks`, keyed by path
    - `corrupt_paths` simulate unparseable files
    - `fail_saves` makes every save raise PersistFailureError

    Loads and saves are recorded for test assertions.
    """

    def __init__(
        self,
        *,
        locks: dict[Path, ModuleLock] | None = None,
        corrupt_paths: set[Path] | None = None,
        fail_saves: bool = False,
    ) -> None:
        self._locks = dict(locks) if locks else {}
        self._corrupt_paths = corrupt_paths or set()
        self._fail_saves = fail_saves
        self._load_calls: list[Path] = []
        self._save_calls: list[tuple[Path, ModuleLock]] = []

    @property
    def load_calls(self) -> list[Path]:
        """Paths passed to load(). For test assertions only."""
        return self._load_calls.copy()

    @property
    def save_calls(self) -> list[tuple[Path, ModuleLock]]:
        """(path, lock) pairs passed to save(). For test assertions only."""
        return self._save_calls.copy()

    def lock_at(self, path: Path) -> ModuleLock | None:
        """Current in-memory lock at path, or None if never written."""
        return self._locks.get(path)

    def exists(self, path: Path) -> bool:
        return path in self._locks or path in self._corrupt_paths

    def load(self, path: Path) -> ModuleLock:
        self._load_calls.append(path)
        if path in self._corrupt_paths:
            raise CorruptLockFileError(path, "simulated corruption")
        return self._locks.get(path, ModuleLock.empty())

    def save(self, path: Path, lock: ModuleLock) -> None:
        if self._fail_saves:
            raise PersistFailureError(path, "simulated write failure")
        self._save_calls.append((path, lock))
        self._locks[path] = lock
        self._corrupt_paths.discard(path)
