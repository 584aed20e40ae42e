"""Production Terraform implementation using subprocess."""

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path

from modlock.core.errors import TerraformNotFoundError
from modlock.core.terraform.abc import Terraform

logger = logging.getLogger(__name__)


class RealTerraform(Terraform):
    """Runs the terraform executable with inherited standard streams."""

    def __init__(self, binary: str = "terraform") -> None:
        self._binary = binary

    def run(self, args: Sequence[str], cwd: Path) -> int:
        cmd = [self._binary, *args]
        logger.debug("Running %s in %s", " ".join(cmd), cwd)
        try:
            # Non-zero exits are the caller's to propagate, so check=False.
            result = subprocess.run(cmd, cwd=cwd, check=False)
        except FileNotFoundError as e:
            raise TerraformNotFoundError(self._binary) from e
        logger.debug("%s exited with %d", self._binary, result.returncode)
        return result.returncode
