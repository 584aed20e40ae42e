"""Fake implementation of Terraform for testing."""

from collections.abc import Callable, Sequence
from pathlib import Path

from modlock.core.errors import TerraformNotFoundError
from modlock.core.terraform.abc import Terraform


class FakeTerraform(Terraform):
    """In-memory fake that records invocations instead of spawning processes.

    Constructor Injection:
    - exit_code: returned from every run() call
    - on_run: optional callback invoked with (args, cwd) before returning, used to
      simulate side effects such as `terraform init` materializing modules
    - installed: when False, run() raises TerraformNotFoundError

    Examples:
        >>> terraform = FakeTerraform(exit_code=2)
        >>> terraform.run(["plan"], Path("/repo"))
        2
        >>> terraform.run_calls
        [(['plan'], PosixPath('/repo'))]
    """

    def __init__(
        self,
        *,
        exit_code: int = 0,
        on_run: Callable[[list[str], Path], None] | None = None,
        installed: bool = True,
    ) -> None:
        self._exit_code = exit_code
        self._on_run = on_run
        self._installed = installed
        self._run_calls: list[tuple[list[str], Path]] = []

    @property
    def run_calls(self) -> list[tuple[list[str], Path]]:
        """Get the list of run() calls that were made.

        Returns list of (args, cwd) tuples.

        This property is for test assertions only.
        """
        return self._run_calls.copy()

    def run(self, args: Sequence[str], cwd: Path) -> int:
        if not self._installed:
            raise TerraformNotFoundError("terraform")
        self._run_calls.append((list(args), cwd))
        if self._on_run is not None:
            self._on_run(list(args), cwd)
        return self._exit_code
