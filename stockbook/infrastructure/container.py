"""Composition root for wiring infrastructure adapters."""

from stockbook.application.ports.database import DatabaseEnginePort
from stockbook.application.ports.ledger_repository import LedgerRepositoryPort
from stockbook.application.use_cases.get_party_balances import (
    GetPartyBalancesUseCase,
)
from stockbook.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from stockbook.infrastructure.ledger_repository_factory import (
    create_ledger_repository,
)
from stockbook.infrastructure.logging.logger import get_app_logger
from stockbook.infrastructure.settings import LedgerSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_ledger_repository(
    settings: LedgerSettings | None = None,
) -> LedgerRepositoryPort:
    """Return the configured ledger repository."""
    resolved_settings = settings or LedgerSettings.from_env()
    db_port = (
        build_database_adapter()
        if resolved_settings.backend == "sqlalchemy"
        else None
    )
    return create_ledger_repository(
        db_port,
        logger=get_app_logger(),
        settings=resolved_settings,
    )


def build_party_balances_use_case(
    settings: LedgerSettings | None = None,
) -> GetPartyBalancesUseCase:
    """Return the party balances use case with the configured match mode."""
    resolved_settings = settings or LedgerSettings.from_env()
    return GetPartyBalancesUseCase(
        build_ledger_repository(resolved_settings),
        logger=get_app_logger(),
        match_by=resolved_settings.party_match,
    )


__all__ = [
    "build_database_adapter",
    "build_ledger_repository",
    "build_party_balances_use_case",
]
