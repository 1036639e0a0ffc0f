"""Command line option parsing.

Turns the raw argument vector into a :class:`ConnectionSpec`. Each option
has a short form that takes the next token (``-d sales``) and a long form
that carries its value after ``=`` (``--dbname=sales``). Long forms are
matched on their name as a prefix, so ``--dbnamefoo=x`` is read as
``--dbname``. Tokens that match no option are skipped.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Union

from .exceptions import ParseError, build_parse_error
from .models import ConnectionSpec
from .tokens import is_empty, trim

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Option:
    """One recognized option.

    Attributes:
        field: ConnectionSpec attribute the value is stored in
        label: Name used in the ``missing <label> argument`` message
        long: Long form, matched as a prefix and followed by ``=value``
        short: Short form, matched exactly and followed by a value token
    """

    field: str
    label: str
    long: str
    short: Optional[str] = None


OPTIONS = (
    Option("database", "database", "--dbname", "-d"),
    Option("username", "username", "--username", "-U"),
    Option("host", "hostname", "--hostname", "-h"),
    Option("hostaddr", "hostaddr", "--hostaddr"),
    Option("port", "port", "--port", "-p"),
    Option("timeout", "timeout", "--timeout", "-t"),
)


def _next_value(argv: Sequence[str], index: int, option: Option) -> str:
    """Value of a short option: the token after ``argv[index]``."""
    if index + 1 < len(argv) and not argv[index + 1].startswith("-"):
        value = trim(argv[index + 1])
        if not is_empty(value):
            return value
    raise build_parse_error(option.label)


def _equal_value(token: str, option: Option) -> str:
    """Value of a long option: everything after the first ``=``."""
    _, sep, rest = token.partition("=")
    if sep:
        value = trim(rest)
        if not is_empty(value):
            return value
    raise build_parse_error(option.label)


def _match(token: str) -> Optional[Option]:
    for option in OPTIONS:
        if option.short is not None and token == option.short:
            return option
        if token.startswith(option.long):
            return option
    return None


def scan(argv: Sequence[str]) -> ConnectionSpec:
    """Parse ``argv`` left to right, raising :class:`ParseError` on a bad value.

    Repeated options overwrite earlier ones.
    """
    values: Dict[str, str] = {}
    ignored: List[str] = []
    index = 0

    while index < len(argv):
        token = argv[index]
        option = _match(token)

        if option is None:
            ignored.append(token)
            index += 1
        elif token == option.short:
            values[option.field] = _next_value(argv, index, option)
            index += 2
        else:
            values[option.field] = _equal_value(token, option)
            index += 1

    if ignored:
        logger.debug(f"Ignoring unrecognized arguments: {ignored}")

    return ConnectionSpec(**values)


def parse_args(argv: Sequence[str]) -> Union[ConnectionSpec, ParseError]:
    """Parse the argument vector (program name excluded).

    Returns the parsed :class:`ConnectionSpec`, or the :class:`ParseError`
    describing the first option without a usable value. The error is
    returned rather than raised so the caller can hand either result
    straight to the reporter.
    """
    try:
        return scan(argv)
    except ParseError as exc:
        logger.debug(f"Argument error: {exc.message}")
        return exc
