"""Port for reaching the SQL mirror of the invoicing backend."""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Provides the engine used by the SQL ledger repository."""

    def get_ledger_engine(self) -> Engine:
        """Return an engine bound to the ledger mirror database."""


__all__ = ["DatabaseEnginePort"]
