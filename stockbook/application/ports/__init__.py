"""Application ports package."""

from .database import DatabaseEnginePort
from .ledger_repository import LedgerRepositoryPort, RawRecord

__all__ = [
    "DatabaseEnginePort",
    "LedgerRepositoryPort",
    "RawRecord",
]
