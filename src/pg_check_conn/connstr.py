"""Render a ConnectionSpec into libpq connection parameters.

See https://www.postgresql.org/docs/current/libpq-connect.html#LIBPQ-CONNSTRING
"""

from typing import Dict, Tuple

from .models import ConnectionSpec
from .tokens import is_empty

# (libpq keyword, ConnectionSpec attribute) in emission order.
# hostaddr and host may both be given; hostaddr skips the DNS lookup.
KEYWORDS: Tuple[Tuple[str, str], ...] = (
    ("dbname", "database"),
    ("user", "username"),
    ("hostaddr", "hostaddr"),
    ("host", "host"),
    ("port", "port"),
    ("connect_timeout", "timeout"),
)


def connection_params(spec: ConnectionSpec) -> Dict[str, str]:
    """Keyword parameters for the driver, skipping unset fields."""
    params: Dict[str, str] = {}
    for keyword, attr in KEYWORDS:
        value = getattr(spec, attr)
        if not is_empty(value):
            params[keyword] = value
    return params


def build_connection_string(spec: ConnectionSpec) -> str:
    """Flat ``key=value`` string, one trailing space per field.

    Values are not quoted. The string is meant for display; the prober
    passes :func:`connection_params` to the driver instead.
    """
    return "".join(f"{key}={value} " for key, value in connection_params(spec).items())
