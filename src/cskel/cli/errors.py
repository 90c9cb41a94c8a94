"""
Unified CLI Error Handling
==========================

Provides consistent error reporting and exit codes for the cskel command.
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click


class ExitCode(IntEnum):
    """Standard exit codes for the CLI."""
    SUCCESS = 0
    BUILD_ERROR = 1      # Translation failed
    INVALID_ARGS = 2     # Invalid arguments or missing files
    INTERNAL_ERROR = 3   # Unexpected internal error


def handle_cli_exception(error: Exception, verbose: bool = False) -> NoReturn:
    """
    Report an exception and exit with the matching exit code.

    Args:
        error: The exception that was raised
        verbose: If True, print the traceback for internal errors

    Raises:
        SystemExit: Always
    """
    from cskel.errors import CSkelError, CompilationError, UnknownTargetError

    if isinstance(error, CompilationError):
        # Already reads "Compilation Error: ..."
        click.echo(str(error), err=True)
        if verbose and error.cause is not None:
            traceback.print_exception(error.cause)
        sys.exit(ExitCode.BUILD_ERROR)

    elif isinstance(error, UnknownTargetError):
        click.echo(str(error), err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    elif isinstance(error, CSkelError):
        click.echo(str(error), err=True)
        sys.exit(ExitCode.BUILD_ERROR)

    elif isinstance(error, (FileNotFoundError, PermissionError)):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    else:
        click.echo(f"Internal error: {error}", err=True)
        if verbose:
            traceback.print_exc()
        sys.exit(ExitCode.INTERNAL_ERROR)
