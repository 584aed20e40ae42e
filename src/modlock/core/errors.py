"""Error types raised by the module integrity core.

Every failure the core can signal derives from ModuleLockError, so the CLI error
boundary can turn any of them into a single terminal outcome with a readable cause.
"""

from pathlib import Path


class ModuleLockError(Exception):
    """Base class for all module integrity failures."""


class NoMetadataError(ModuleLockError):
    """The module metadata record does not exist.

    Benign: callers treat this as "nothing to verify".
    """

    def __init__(self, metadata_path: Path) -> None:
        super().__init__(f"No modules metadata file found at {metadata_path}")
        self.metadata_path = metadata_path


class MalformedMetadataError(ModuleLockError):
    """The module metadata record exists but is not in the expected shape."""

    def __init__(self, metadata_path: Path, reason: str) -> None:
        super().__init__(f"Malformed modules metadata file {metadata_path}: {reason}")
        self.metadata_path = metadata_path
        self.reason = reason


class UnreadableModuleError(ModuleLockError):
    """A module checkout (or a file inside it) could not be read."""

    def __init__(self, module_path: Path, reason: str) -> None:
        super().__init__(f"Cannot fingerprint module at {module_path}: {reason}")
        self.module_path = module_path
        self.reason = reason


class CorruptLockFileError(ModuleLockError):
    """The lock file exists but cannot be parsed.

    Never silently reset to an empty lock, otherwise a prior tamper record would be lost.
    """

    def __init__(self, lock_path: Path, reason: str) -> None:
        super().__init__(f"Corrupt lock file {lock_path}: {reason}")
        self.lock_path = lock_path
        self.reason = reason


class PersistFailureError(ModuleLockError):
    """Writing the lock file failed. The previous lock file is left untouched."""

    def __init__(self, lock_path: Path, reason: str) -> None:
        super().__init__(f"Failed to write lock file {lock_path}: {reason}")
        self.lock_path = lock_path
        self.reason = reason


class TamperDetectedError(ModuleLockError):
    """A module's content no longer matches its recorded digest."""

    def __init__(self, module_name: str, expected: str, actual: str) -> None:
        super().__init__(
            f"The module {module_name} has changed!\n"
            f"  recorded: {expected}\n"
            f"  current:  {actual}"
        )
        self.module_name = module_name
        self.expected = expected
        self.actual = actual


class TerraformNotFoundError(ModuleLockError):
    """The terraform executable could not be started."""

    def __init__(self, binary: str) -> None:
        super().__init__(f"Command not found: {binary} (is Terraform installed and on PATH?)")
        self.binary = binary
