"""
Logging configuration for the application.

One stdout handler, one format, configured once at startup.
Never logs request bodies, secrets or connection strings.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

QUIET_LOGGERS = ("uvicorn.access", "sqlalchemy.pool")


def configure_logging(level: str = "INFO", echo_sql: bool = False) -> None:
    """Configure application-wide logging.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
            Unknown names fall back to INFO.
        echo_sql: Log every statement sent to the database
            (stored-procedure calls and their bound parameters).
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if echo_sql else logging.WARNING
    )
