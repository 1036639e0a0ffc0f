"""Map a probe outcome to console output and a process exit code.

Connection failures are the expected result of a failed probe and go to
stdout so calling scripts can capture them. Argument errors and internal
failures go to stderr.
"""

from typing import Union

import click

from .exceptions import EXIT_FAILURE, ParseError
from .models import ConnectionRefused, Outcome, Success, UnexpectedFailure

Reportable = Union[Outcome, ParseError]


def _line(message: str) -> str:
    # libpq messages end with a newline of their own
    return f"Error: {message.rstrip()}"


def report(result: Reportable) -> int:
    """Print ``result`` and return the exit code for it."""
    if isinstance(result, Success):
        return 0

    if isinstance(result, ConnectionRefused):
        click.echo(_line(result.message))
        return result.status_code if result.status_code is not None else EXIT_FAILURE

    if isinstance(result, UnexpectedFailure):
        click.echo(_line(result.message), err=True)
        return EXIT_FAILURE

    if isinstance(result, ParseError):
        click.echo(_line(result.message), err=True)
        return result.exit_code

    raise TypeError(f"Cannot report {result!r}")
