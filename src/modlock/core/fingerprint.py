"""Content fingerprinting of module checkouts.

The digest covers file *contents* only, concatenated in a stable depth-first order
(entries sorted by name at every level). File names, modes and timestamps do not
contribute, so a rename without content change is invisible to the check.
"""

import hashlib
import os
from collections.abc import Iterator
from pathlib import Path

from modlock.core.errors import UnreadableModuleError

CHUNK_SIZE = 1024 * 1024


def is_hidden(name: str) -> bool:
    """Check if a directory entry is hidden (starts with a dot)."""
    return name.startswith(".")


def iter_module_files(module_dir: Path) -> Iterator[Path]:
    """Yield every non-hidden regular file under module_dir in fingerprint order.

    Hidden entries are skipped together with their subtree. Symlinked directories
    are not followed; symlinked files are yielded and read through.

    Raises:
        UnreadableModuleError: If a directory cannot be listed or a symlink is dangling
    """
    try:
        entries = sorted(os.scandir(module_dir), key=lambda entry: entry.name)
    except OSError as e:
        raise UnreadableModuleError(module_dir, str(e)) from e

    for entry in entries:
        if is_hidden(entry.name):
            continue
        path = Path(entry.path)
        try:
            if entry.is_dir(follow_symlinks=False):
                yield from iter_module_files(path)
            elif entry.is_file():
                yield path
            elif entry.is_symlink() and not os.path.exists(entry.path):
                raise UnreadableModuleError(path, "dangling symlink")
        except OSError as e:
            raise UnreadableModuleError(path, str(e)) from e


def fingerprint_module(module_dir: Path) -> str:
    """Compute the SHA-256 content digest of a module checkout.

    Args:
        module_dir: Root directory of the module checkout

    Returns:
        Lowercase hexadecimal digest

    Raises:
        UnreadableModuleError: If the root is missing or any file cannot be read
    """
    if not module_dir.is_dir():
        raise UnreadableModuleError(module_dir, "not a directory")

    hasher = hashlib.sha256()
    for file_path in iter_module_files(module_dir):
        try:
            with file_path.open("rb") as f:
                while chunk := f.read(CHUNK_SIZE):
                    hasher.update(chunk)
        except OSError as e:
            raise UnreadableModuleError(file_path, str(e)) from e
    return hasher.hexdigest()
