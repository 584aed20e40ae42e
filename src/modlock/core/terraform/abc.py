"""Abstract interface for invoking the Terraform command-line tool."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path


class Terraform(ABC):
    """Abstract interface for Terraform invocations.

    Implementations pass arguments through untouched and let the tool own the
    terminal: standard streams are inherited, output is never captured.
    """

    @abstractmethod
    def run(self, args: Sequence[str], cwd: Path) -> int:
        """Run terraform with the given arguments.

        Args:
            args: Subcommand and arguments, passed through verbatim
            cwd: Working directory for the invocation

        Returns:
            Exit code of the terraform process

        Raises:
            TerraformNotFoundError: If the executable cannot be started
        """
        ...
