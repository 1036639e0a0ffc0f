"""Top-level probe flow shared by the command line entry points."""

import logging
import sys
from typing import Any, Callable, Optional, Sequence

import click

from .config import Settings
from .connstr import build_connection_string
from .exceptions import ParseError
from .models import UnexpectedFailure
from .parser import parse_args
from .prober import ConnectionProber
from .reporter import report

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def check_connection(
    argv: Sequence[str],
    settings: Optional[Settings] = None,
    connect: Optional[Callable[..., Any]] = None,
) -> int:
    """Parse ``argv``, try one connection and report it.

    When ``settings`` is not given they are loaded from the environment
    and ``.env``, and logging is configured from them.
    Returns an exit code compatible with `sys.exit`.
    """

    parsed = parse_args(argv)
    if isinstance(parsed, ParseError):
        return report(parsed)

    try:
        if settings is None:
            settings = Settings.from_env()
            configure_logging(settings.log_level)

        if parsed.is_empty():
            logger.debug("No connection options given, using libpq defaults")

        if settings.debug_echo:
            click.echo(f"Conn string: {build_connection_string(parsed)}")

        prober = ConnectionProber(password=settings.password(), connect=connect)
        outcome = prober.probe(parsed)

    except Exception as exc:
        outcome = UnexpectedFailure(str(exc) or type(exc).__name__)

    return report(outcome)
