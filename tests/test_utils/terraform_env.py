"""Shared test utilities for setting up Terraform working directories.

This module provides helpers for creating simulated `terraform init` results
(modules.json plus module checkouts) without running Terraform.
"""

import json
from pathlib import Path

from modlock.core.config import ModlockConfig

REGISTRY_SOURCE = "registry.terraform.io/terraform-aws-modules/{name}/aws"


class SimulatedTerraformEnv:
    """Helper for managing a simulated Terraform working directory.

    Example usage:
        ```python
        env = SimulatedTerraformEnv(tmp_path)
        env.add_module("vpc", {"main.tf": "resource {}"})
        env.add_module("local", {"main.tf": ""}, source="./modules/local")
        env.write_metadata()
        report = verify_modules(env.config, RealLockStore())
        ```
    """

    def __init__(self, root: Path) -> None:
        self.root = root
        self.config = ModlockConfig.for_root(root)
        self._records: list[dict[str, str]] = [{"Key": "", "Source": "", "Dir": "."}]

    @property
    def modules_dir(self) -> Path:
        return self.config.modules_dir

    @property
    def lock_path(self) -> Path:
        return self.config.lock_path

    def add_module(
        self,
        key: str,
        files: dict[str, str | bytes],
        *,
        source: str | None = None,
        materialize: bool = True,
    ) -> Path:
        """Declare a module in the metadata and (optionally) write its checkout.

        Args:
            key: Module key (checkout directory relative to the modules dir)
            files: Relative file path -> content
            source: Module source; defaults to a registry source
            materialize: When False, only the metadata entry is recorded

        Returns:
            Path of the module checkout directory
        """
        module_dir = self.modules_dir / key
        self._records.append(
            {
                "Key": key,
                "Source": source if source is not None else REGISTRY_SOURCE.format(name=key),
                "Dir": str(module_dir.relative_to(self.root)),
            }
        )
        if materialize:
            write_tree(module_dir, files)
        return module_dir

    def write_metadata(self) -> Path:
        """Write modules.json for every declared module."""
        path = self.config.metadata_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps({"Modules": self._records}), encoding="utf-8")
        return path

    def write_lock(self, entries: dict[str, str]) -> Path:
        """Write a lock file with the given entries."""
        self.lock_path.write_text(json.dumps(entries, indent=2), encoding="utf-8")
        return self.lock_path


def write_tree(base: Path, files: dict[str, str | bytes]) -> None:
    """Write files (relative path -> content) under base, creating directories."""
    base.mkdir(parents=True, exist_ok=True)
    for rel_path, content in files.items():
        path = base / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
