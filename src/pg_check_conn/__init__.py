"""
pg-check-conn

Verifies a PostgreSQL server is reachable and accepts the supplied
database, role and password. A stricter companion to pg_isready.
"""

__version__ = "1.0.0"

from .connstr import build_connection_string, connection_params
from .models import ConnectionRefused, ConnectionSpec, Success, UnexpectedFailure
from .parser import parse_args
from .prober import ConnectionProber
from .runner import check_connection

__all__ = [
    "ConnectionSpec",
    "ConnectionProber",
    "ConnectionRefused",
    "Success",
    "UnexpectedFailure",
    "build_connection_string",
    "check_connection",
    "connection_params",
    "parse_args",
]
