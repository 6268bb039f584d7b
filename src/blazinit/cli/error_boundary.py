"""Error boundary handling for CLI commands.

This module provides a decorator to catch well-known exceptions at CLI entry
points and display clean error messages without stack traces.
"""

import functools
from collections.abc import Callable
from typing import Any, TypeVar

from blazinit.cli.output import error_output
from blazinit.core.errors import BlazinitError

T = TypeVar("T", bound=Callable[..., Any])


def cli_error_boundary(func: T) -> T:
    """Decorator that catches well-known exceptions and displays clean error messages.

    Catches:
        - BlazinitError: NotFound, AlreadyExists, Malformed, ProtectedResource, IOFailure
        - ValueError: Invalid input (e.g. an unusable profile name)
        - PermissionError: Permission denied errors

    All other exceptions bubble up normally with full stack traces.

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
        except BlazinitError as e:
            error_output(str(e))
            raise SystemExit(1) from None
        except ValueError as e:
            error_output(str(e))
            raise SystemExit(1) from None
        except PermissionError as e:
            error_output(str(e))
            raise SystemExit(1) from None

    return wrapper  # type: ignore[return-value]
