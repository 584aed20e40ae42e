"""Abstract interface for lock file persistence."""

from abc import ABC, abstractmethod
from pathlib import Path

from modlock.core.lock_store.types import ModuleLock


class LockStore(ABC):
    """Abstract interface for loading and saving the module lock.

    All implementations (real, fake and dry-run) must implement this interface.
    """

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """Check whether a lock file has been written at path."""
        ...

    @abstractmethod
    def load(self, path: Path) -> ModuleLock:
        """Load the lock from path.

        Args:
            path: Lock file path

        Returns:
            The persisted lock, or an empty lock if no file exists

        Raises:
            CorruptLockFileError: If the file exists but cannot be parsed
        """
        ...

    @abstractmethod
    def save(self, path: Path, lock: ModuleLock) -> None:
        """Overwrite the lock file with the full lock.

        A failed write must never leave a partially written file behind.

        Args:
            path: Lock file path
            lock: Complete lock to persist

        Raises:
            PersistFailureError: On any I/O error
        """
        ...
