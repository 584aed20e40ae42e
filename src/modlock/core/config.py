"""Configuration data structures and loading.

Provides immutable configuration loaded from `<root>/.modlock.toml`. Every path the
engine touches lives here so tests can point it at temporary roots.
"""

import tomllib
from dataclasses import dataclass
from pathlib import Path

CONFIG_FILE_NAME = ".modlock.toml"

DEFAULT_REGISTRY_HOST = "registry.terraform.io"
DEFAULT_TERRAFORM = "terraform"
DEFAULT_MODULES_DIR = ".terraform/modules"
DEFAULT_METADATA_FILE = ".terraform/modules/modules.json"
DEFAULT_LOCK_FILE = ".module_hashes.json"

_STRING_KEYS = ("registry_host", "terraform", "modules_dir", "metadata_file", "lock_file")


@dataclass(frozen=True)
class ModlockConfig:
    """Immutable configuration for one invocation.

    Loaded once at CLI entry point and stored in ModlockContext.
    All paths are absolute.
    """

    root: Path
    modules_dir: Path
    metadata_path: Path
    lock_path: Path
    registry_host: str
    terraform: str
    jobs: int

    @staticmethod
    def for_root(root: Path, *, jobs: int = 1) -> "ModlockConfig":
        """Create a config with default locations under root."""
        return ModlockConfig(
            root=root,
            modules_dir=root / DEFAULT_MODULES_DIR,
            metadata_path=root / DEFAULT_METADATA_FILE,
            lock_path=root / DEFAULT_LOCK_FILE,
            registry_host=DEFAULT_REGISTRY_HOST,
            terraform=DEFAULT_TERRAFORM,
            jobs=jobs,
        )


def load_config(root: Path) -> ModlockConfig:
    """Load .modlock.toml from root if present; otherwise return defaults.

    Example config:
      registry_host = "registry.terraform.io"
      terraform = "tofu"
      lock_file = "infra/.module_hashes.json"
      jobs = 4

    Args:
        root: Working root of the Terraform configuration

    Returns:
        ModlockConfig with relative paths resolved against root

    Raises:
        ValueError: If the config file is malformed or has unknown keys
    """
    root = root.resolve()
    cfg_path = root / CONFIG_FILE_NAME
    if not cfg_path.exists():
        return ModlockConfig.for_root(root)

    try:
        data = tomllib.loads(cfg_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid TOML in {cfg_path}: {e}") from e

    unknown = sorted(set(data) - set(_STRING_KEYS) - {"jobs"})
    if unknown:
        raise ValueError(f"Unknown key(s) in {cfg_path}: {', '.join(unknown)}")

    for key in _STRING_KEYS:
        if key in data and (not isinstance(data[key], str) or not data[key]):
            raise ValueError(f"'{key}' in {cfg_path} must be a non-empty string")

    jobs = data.get("jobs", 1)
    if not isinstance(jobs, int) or isinstance(jobs, bool) or jobs < 1:
        raise ValueError(f"'jobs' in {cfg_path} must be a positive integer")

    return ModlockConfig(
        root=root,
        modules_dir=root / data.get("modules_dir", DEFAULT_MODULES_DIR),
        metadata_path=root / data.get("metadata_file", DEFAULT_METADATA_FILE),
        lock_path=root / data.get("lock_file", DEFAULT_LOCK_FILE),
        registry_host=data.get("registry_host", DEFAULT_REGISTRY_HOST),
        terraform=data.get("terraform", DEFAULT_TERRAFORM),
        jobs=jobs,
    )
