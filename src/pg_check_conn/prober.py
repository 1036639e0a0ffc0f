"""Single-shot PostgreSQL connection attempt.

The prober calls the driver once, blocks until libpq gives up or succeeds
(``connect_timeout`` is the only deadline), and turns the result into an
:data:`~pg_check_conn.models.Outcome`. Whatever handle the driver returns
is closed before :meth:`ConnectionProber.probe` returns.
"""

import logging
from typing import Any, Callable, Optional

import psycopg2

from .connstr import connection_params
from .models import (
    ConnectionRefused,
    ConnectionSpec,
    Outcome,
    Success,
    UnexpectedFailure,
)

# libpq ConnStatusType values
CONNECTION_OK = 0
CONNECTION_BAD = 1


def _error_text(exc: BaseException) -> str:
    text = str(exc)
    return text if text else type(exc).__name__


class ConnectionProber:
    """Attempts one connection and classifies the result.

    Usage:
        prober = ConnectionProber(password=settings.password())
        outcome = prober.probe(spec)
    """

    def __init__(
        self,
        password: Optional[str] = None,
        connect: Optional[Callable[..., Any]] = None,
    ):
        """Initialize the prober.

        Args:
            password: Password passed to the driver, or None to let libpq
                use its own sources (PGPASSWORD, ~/.pgpass)
            connect: Driver connect function, ``psycopg2.connect`` by default
        """
        self._password = password
        self._connect = connect or psycopg2.connect
        self.logger = logging.getLogger(__name__)

    def probe(self, spec: ConnectionSpec) -> Outcome:
        params = connection_params(spec)
        self.logger.debug(
            f"Connecting with parameters {list(params)} "
            f"(password {'set' if self._password is not None else 'not set'})"
        )

        kwargs = dict(params)
        if self._password is not None:
            kwargs["password"] = self._password

        conn = None
        try:
            # An empty dsn lets libpq apply all of its defaults.
            conn = self._connect("", **kwargs)

            status = conn.info.status
            if status != CONNECTION_OK:
                return ConnectionRefused(conn.info.error_message or "connection failed", status)

            self.logger.info(f"Connected to {conn.info.dbname} as {conn.info.user}")
            return Success()

        except psycopg2.OperationalError as e:
            # libpq allocated a handle that ended up CONNECTION_BAD; psycopg2
            # frees it before raising.
            self.logger.debug(f"Connection refused: {e}")
            return ConnectionRefused(_error_text(e), CONNECTION_BAD)

        except psycopg2.Error as e:
            # Rejected before libpq was asked to connect (e.g. bad keyword).
            self.logger.debug(f"Connection parameters rejected: {e}")
            return ConnectionRefused(_error_text(e), None)

        except Exception as e:
            self.logger.debug(f"Unexpected error during connect: {type(e).__name__}", exc_info=True)
            return UnexpectedFailure(_error_text(e))

        finally:
            if conn is not None:
                conn.close()
