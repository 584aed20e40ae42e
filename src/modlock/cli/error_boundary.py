"""Error boundary handling for CLI commands.

This module provides a decorator to catch well-known exceptions at CLI entry points
and display clean error messages without stack traces.
"""

import functools
import logging
from collections.abc import Callable
from typing import Any, TypeVar

from modlock.cli.output import error_prefix, user_output
from modlock.core.errors import ModuleLockError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Callable[..., Any])


def cli_error_boundary(func: T) -> T:
    """Decorator that catches well-known exceptions and displays clean error messages.

    Catches:
        - ModuleLockError: Every integrity failure (tamper, corrupt lock, ...)
        - ValueError: Invalid configuration
        - PermissionError: Permission denied errors

    All of them end the run with exit status 1. All other exceptions bubble up
    normally with full stack traces.

    Example:
        @click.command()
        @cli_error_boundary
        def my_command():
            ...
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except ModuleLockError as e:
            logger.debug("Exception details:", exc_info=True)
            user_output(error_prefix() + str(e))
            raise SystemExit(1) from None
        except ValueError as e:
            user_output(error_prefix() + str(e))
            raise SystemExit(1) from None
        except PermissionError as e:
            user_output(error_prefix() + str(e))
            raise SystemExit(1) from None

    return wrapper  # type: ignore[return-value]
