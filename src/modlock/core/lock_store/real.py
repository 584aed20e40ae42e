"""File-backed lock store."""

import json
import logging
import os
from pathlib import Path

from pydantic import ValidationError

from modlock.core.errors import CorruptLockFileError, PersistFailureError
from modlock.core.lock_store.abc import LockStore
from modlock.core.lock_store.types import ModuleLock

logger = logging.getLogger(__name__)


def serialize_lock(lock: ModuleLock) -> str:
    """Render a lock as pretty JSON with sorted keys and a trailing newline."""
    return json.dumps(lock.root, indent=2, sort_keys=True) + "\n"


class RealLockStore(LockStore):
    """Production implementation storing the lock as a JSON file."""

    def exists(self, path: Path) -> bool:
        return path.exists()

    def load(self, path: Path) -> ModuleLock:
        if not path.exists():
            logger.debug("Lock file %s does not exist, starting empty", path)
            return ModuleLock.empty()

        try:
            raw = path.read_bytes()
        except OSError as e:
            raise CorruptLockFileError(path, str(e)) from e

        try:
            lock = ModuleLock.model_validate_json(raw)
        except ValidationError as e:
            raise CorruptLockFileError(path, e.errors()[0]["msg"]) from e

        logger.debug("Loaded %d lock entries from %s", len(lock), path)
        return lock

    def save(self, path: Path, lock: ModuleLock) -> None:
        """Save the lock atomically.

        Writes to a temporary file next to the target first, then renames it over
        the target so readers never observe a partial file.
        """
        temp_path = path.with_name(f".{path.name}.tmp")
        content = serialize_lock(lock)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with temp_path.open("w", encoding="utf-8") as f:
                f.write(content)
                f.flush()
                os.fsync(f.fileno())
            temp_path.replace(path)
        except OSError as e:
            temp_path.unlink(missing_ok=True)
            raise PersistFailureError(path, str(e)) from e

        logger.debug("Wrote %d lock entries to %s", len(lock), path)
