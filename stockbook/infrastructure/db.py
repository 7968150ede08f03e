"""SQLAlchemy access to the SQL mirror of the invoicing backend.

The mirror is optional: it is only used when ``STOCKBOOK_BACKEND`` is
``sqlalchemy``. The engine is created on first use from ``STOCKBOOK_DB_URL``
and shared for the lifetime of the process.
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from stockbook.application.ports.database import DatabaseEnginePort

LEDGER_DB_URL_VAR = "STOCKBOOK_DB_URL"


def _get_env_var(name: str) -> str:
    """Return a required setting, loading ``.env`` first.

    Args:
        name: Environment variable holding the setting.

    Returns:
        str: Non-empty value of the variable.

    Raises:
        RuntimeError: If the variable is unset or blank.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str, pool_size: int = 5) -> Engine:
    """Build a pooled engine for read-only reporting queries.

    Args:
        db_url: SQLAlchemy URL of the ledger mirror.
        pool_size: Persistent connections kept in the pool; the same number
            of overflow connections is allowed on top.

    Returns:
        Engine: Engine that pings connections before handing them out.
    """
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=pool_size,
        max_overflow=pool_size,
        pool_pre_ping=True,
        future=True,
    )


_ledger_engine: Optional[Engine] = None


def get_ledger_engine() -> Engine:
    """Return the process-wide ledger engine, creating it on first call."""
    global _ledger_engine
    if _ledger_engine is None:
        _ledger_engine = _create_engine(_get_env_var(LEDGER_DB_URL_VAR))
    return _ledger_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """Expose the shared ledger engine through DatabaseEnginePort."""

    def get_ledger_engine(self) -> Engine:
        return get_ledger_engine()


__all__ = [
    "LEDGER_DB_URL_VAR",
    "get_ledger_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
