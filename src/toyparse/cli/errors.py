"""
Unified CLI Error Handling
==========================

Maps toyparse exceptions to messages and exit codes for the CLI tools.
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click


class ExitCode(IntEnum):
    """Standard exit codes for CLI tools."""
    SUCCESS = 0
    REJECTED = 1         # Lexical or syntax error in the source
    INVALID_ARGS = 2     # Invalid arguments or unreadable source
    INTERNAL_ERROR = 3   # Unexpected internal error


def handle_cli_exception(error: Exception, verbose: bool = False) -> NoReturn:
    """
    Unified exception handler for the CLI tools.

    Formats the error message, optionally prints a traceback for internal
    errors in verbose mode, and exits with the matching exit code.

    Args:
        error: The exception that was raised
        verbose: If True, print full traceback for internal errors

    Raises:
        SystemExit: Always exits with an appropriate exit code
    """
    from toyparse.errors import SourceUnavailableError
    from toyparse.frontend.errors import FrontendError

    if isinstance(error, FrontendError):
        # Front-end errors already carry "error:" and location
        click.echo(str(error), err=True)
        sys.exit(ExitCode.REJECTED)

    elif isinstance(error, SourceUnavailableError):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    else:
        click.echo(f"Internal error: {error}", err=True)
        if verbose:
            traceback.print_exc()
        sys.exit(ExitCode.INTERNAL_ERROR)
