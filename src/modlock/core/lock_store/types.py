"""Lock file model."""

import re

from pydantic import ConfigDict, RootModel, field_validator

DIGEST_PATTERN = re.compile(r"^[0-9a-f]{64}$")


class ModuleLock(RootModel[dict[str, str]]):
    """Mapping of module name to its last known good digest.

    Persisted as a flat JSON object. Instances are immutable: use `with_entries` and
    `without` to derive updated locks.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    @field_validator("root")
    @classmethod
    def validate_digests(cls, v: dict[str, str]) -> dict[str, str]:
        """Validate names are non-empty and digests are SHA-256 hex strings."""
        for name, digest in v.items():
            if not name:
                msg = "module name cannot be empty"
                raise ValueError(msg)
            if not DIGEST_PATTERN.match(digest):
                msg = f"invalid digest for module '{name}': {digest!r}"
                raise ValueError(msg)
        return v

    @staticmethod
    def empty() -> "ModuleLock":
        return ModuleLock({})

    def get(self, module_name: str) -> str | None:
        return self.root.get(module_name)

    def names(self) -> list[str]:
        return sorted(self.root)

    def with_entries(self, entries: dict[str, str]) -> "ModuleLock":
        """Return a new lock with entries added or replaced."""
        return ModuleLock({**self.root, **entries})

    def without(self, module_names: list[str]) -> "ModuleLock":
        """Return a new lock with the given module names removed."""
        return ModuleLock({k: v for k, v in self.root.items() if k not in module_names})

    def __contains__(self, module_name: object) -> bool:
        return module_name in self.root

    def __len__(self) -> int:
        return len(self.root)
