"""Command line interface for pg-check-conn."""

import sys
from typing import List, Tuple

import click

from . import __version__
from .exceptions import ParseError
from .parser import parse_args
from .runner import check_connection

ARGV_KEY = "pg_check_conn.argv"
HELP_FLAG = "--help"
VERSION_FLAG = "--version"

USAGE_EPILOG = """\b
Options:
  -d <name>  | --dbname=<name>     target database
  -U <user>  | --username=<user>   login role
  -h <host>  | --hostname=<host>   server host name
               --hostaddr=<addr>   numeric server address
  -p <port>  | --port=<port>       server port
  -t <secs>  | --timeout=<secs>    connect timeout in seconds
               --help              show this message and exit
               --version           show the version and exit

\b
Environment:
  PGPASSWORD   password (never pass it on the command line)
  PGDEBUG=1    print the connection string before connecting
  LOG_LEVEL    diagnostic logging level on stderr (default WARNING)
"""


class RawArgsCommand(click.Command):
    """Command that keeps the argument list exactly as given.

    click's own parser drops ``--`` and would act on ``--help`` even where
    it stands as a short option's value, so the probe parses the raw list.
    """

    def parse_args(self, ctx: click.Context, args: List[str]) -> List[str]:
        ctx.meta[ARGV_KEY] = list(args)
        return super().parse_args(ctx, args)


@click.command(
    cls=RawArgsCommand,
    # -h is the host name; --help is handled after argument checks
    add_help_option=False,
    context_settings={
        "ignore_unknown_options": True,
        "allow_extra_args": True,
    },
    epilog=USAGE_EPILOG,
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(ctx: click.Context, args: Tuple[str, ...]):
    """Verify a PostgreSQL server accepts a connection with the given credentials.

    Unlike pg_isready, this fails when the database or role does not exist
    or the password is wrong. Connection errors are printed to standard
    output and the exit code is the libpq connection status.
    """
    argv = ctx.meta.get(ARGV_KEY, list(args))

    # A bad option value is reported even when --help or --version follows.
    if not isinstance(parse_args(argv), ParseError):
        if HELP_FLAG in argv:
            click.echo(ctx.get_help())
            ctx.exit(0)
        if VERSION_FLAG in argv:
            click.echo(f"pg-check-conn, version {__version__}")
            ctx.exit(0)

    sys.exit(check_connection(argv))


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
