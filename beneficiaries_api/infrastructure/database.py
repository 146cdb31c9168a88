"""
Database connection management.

Wraps a SQLAlchemy engine built once from the configured connection
string. Every gateway call borrows exactly one connection and gives it
back before returning, whether the call succeeded or failed.

Stored procedures are an external, independently versioned contract;
this module only knows how to render a call to one with bound,
named parameters for the supported dialects.
"""

import logging
import re
from contextlib import contextmanager
from typing import Iterator, Optional, Sequence

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Connection
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from sqlalchemy.sql.elements import TextClause

from beneficiaries_api.core.config import ConfigurationError
from beneficiaries_api.domain.registry.errors import DataAccessError

logger = logging.getLogger(__name__)

MSSQL = "mssql"

# Substrings the procedures use to report a missing record.
MISSING_RECORD_MARKERS = ("no existe", "does not exist")

# PostgreSQL SQLSTATE for a call to a function that is not defined.
UNDEFINED_FUNCTION_SQLSTATE = "42883"

# Driver text for the same fault, for drivers that expose no SQLSTATE:
# "function sp_x(integer) does not exist".
_UNDEFINED_ROUTINE = re.compile(
    r"^(ERROR:\s+)?(function|procedure) [\w.\"]+\(.*\) does not exist", re.IGNORECASE
)


class ConnectionProvider:
    """Stateless factory for registry database connections.

    Safe to share across concurrent requests. Pooling is whatever the
    underlying SQLAlchemy engine provides.
    """

    def __init__(self, connection_string: Optional[str]) -> None:
        """Build the engine from a connection string.

        Args:
            connection_string: SQLAlchemy URL of the registry database.

        Raises:
            ConfigurationError: If the connection string is missing or blank.
        """
        if not connection_string or not connection_string.strip():
            raise ConfigurationError(
                "DATABASE_URL is not set; a connection string for the "
                "registry database is required"
            )
        self._engine = create_engine(connection_string, pool_pre_ping=True)
        logger.info("Connection provider ready (dialect=%s)", self.dialect_name)

    @property
    def dialect_name(self) -> str:
        """Name of the SQLAlchemy dialect in use (e.g. "postgresql", "mssql")."""
        return self._engine.dialect.name

    def connect(self) -> Connection:
        """Return a connection for a single read statement.

        Use as a context manager; the connection is released on exit.
        """
        return self._engine.connect()

    def transaction(self):
        """Return a context manager yielding a connection inside a transaction.

        Commits on success, rolls back on error, releases the connection
        on exit either way.
        """
        return self._engine.begin()

    def ping(self) -> bool:
        """Whether the database answers a trivial query."""
        try:
            with self._engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except SQLAlchemyError as exc:
            logger.warning("Database ping failed: %s", database_message(exc))
            return False
        return True

    def dispose(self) -> None:
        """Release every pooled connection. Called on shutdown."""
        self._engine.dispose()


def procedure_call(
    name: str, params: Sequence[str] = (), dialect: str = "postgresql"
) -> TextClause:
    """Render a stored-procedure invocation with named bind parameters.

    Args:
        name: Procedure name as defined in the database.
        params: Parameter names; each is bound from the value of the same key.
        dialect: SQLAlchemy dialect name of the target database.

    Returns:
        A TextClause ready for ``Connection.execute``.
    """
    if dialect == MSSQL:
        args = ", ".join(f"@{param} = :{param}" for param in params)
        return text(f"EXEC {name} {args}".rstrip())

    args = ", ".join(f'"{param}" => :{param}' for param in params)
    return text(f'SELECT * FROM "{name}"({args})')


def database_message(exc: SQLAlchemyError) -> str:
    """Return the first line of the driver's error message."""
    origin = getattr(exc, "orig", None) or exc
    lines = str(origin).strip().splitlines()
    return lines[0] if lines else type(exc).__name__


def is_missing_record_error(exc: SQLAlchemyError) -> bool:
    """Whether a database error is a procedure reporting a missing record."""
    if not isinstance(exc, DBAPIError):
        return False
    if getattr(exc.orig, "pgcode", None) == UNDEFINED_FUNCTION_SQLSTATE:
        return False
    message = database_message(exc)
    if _UNDEFINED_ROUTINE.match(message):
        return False
    lowered = message.lower()
    return any(marker in lowered for marker in MISSING_RECORD_MARKERS)


@contextmanager
def data_access(operation: str, entity_id: Optional[int] = None) -> Iterator[None]:
    """Turn SQLAlchemy failures inside the block into DataAccessError.

    Args:
        operation: Gateway operation name, reported to the client and logs.
        entity_id: Id of the affected record, if any.

    Raises:
        DataAccessError: Carrying the database's own message.
    """
    try:
        yield
    except SQLAlchemyError as exc:
        raise DataAccessError(operation, database_message(exc), entity_id) from exc
