"""Parsing of Terraform's module resolution record (modules.json).

Terraform writes `.terraform/modules/modules.json` during `init`:

    {"Modules": [
        {"Key": "", "Source": "", "Dir": "."},
        {"Key": "vpc", "Source": "registry.terraform.io/terraform-aws-modules/vpc/aws",
         "Version": "5.1.2", "Dir": ".terraform/modules/vpc"}
    ]}

Only the `Key` and `Source` of each entry are consumed.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from modlock.core.errors import MalformedMetadataError, NoMetadataError

logger = logging.getLogger(__name__)


class ModuleRecord(BaseModel):
    """One entry of the `Modules` list."""

    model_config = ConfigDict(frozen=True, extra="ignore", strict=True)

    key: str = Field(alias="Key")
    source: str = Field(alias="Source")


class ModulesManifest(BaseModel):
    """Top-level structure of modules.json."""

    model_config = ConfigDict(frozen=True, extra="ignore", strict=True)

    modules: list[ModuleRecord] = Field(alias="Modules")


@dataclass(frozen=True)
class RegistryModule:
    """A module whose source points at the remote registry.

    `key` is the path of the module checkout relative to the modules directory.
    """

    source: str
    key: str


def is_registry_source(source: str, registry_host: str) -> bool:
    """Loose substring match of the registry host against a module source."""
    return registry_host in source


def read_registry_modules(metadata_path: Path, registry_host: str) -> list[RegistryModule]:
    """Read modules.json and return its registry-sourced modules in record order.

    Args:
        metadata_path: Path to modules.json
        registry_host: Host identifier of the remote registry

    Returns:
        Registry modules, in the order they appear in the record

    Raises:
        NoMetadataError: If the record does not exist
        MalformedMetadataError: If the record is not valid JSON of the expected shape
    """
    if not metadata_path.exists():
        raise NoMetadataError(metadata_path)

    try:
        raw = metadata_path.read_bytes()
    except OSError as e:
        raise MalformedMetadataError(metadata_path, str(e)) from e

    try:
        manifest = ModulesManifest.model_validate_json(raw)
    except ValidationError as e:
        raise MalformedMetadataError(metadata_path, _summarize(e)) from e

    modules = [
        RegistryModule(source=record.source, key=record.key)
        for record in manifest.modules
        if is_registry_source(record.source, registry_host)
    ]
    logger.debug(
        "Metadata: %d module(s) declared, %d from %s",
        len(manifest.modules),
        len(modules),
        registry_host,
    )
    return modules


def _summarize(error: ValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"])
    if location:
        return f"{first['msg']} at {location}"
    return first["msg"]
