"""Factory helpers to select the ledger repository backend."""

from stockbook.application.ports.database import DatabaseEnginePort
from stockbook.application.ports.ledger_repository import LedgerRepositoryPort
from stockbook.infrastructure.api_client import LedgerApiClient
from stockbook.infrastructure.api_ledger_repository import ApiLedgerRepository
from stockbook.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from stockbook.infrastructure.logging.logger import get_app_logger
from stockbook.infrastructure.settings import LedgerSettings
from stockbook.infrastructure.sql_ledger_repository import (
    SqlAlchemyLedgerRepository,
)


def create_ledger_repository(
    db_port: DatabaseEnginePort | None = None,
    logger=None,
    settings: LedgerSettings | None = None,
) -> LedgerRepositoryPort:
    """Return a ledger repository implementation based on configuration.

    Args:
        db_port: Optional port providing the ledger engine (SQL backend).
        logger: Optional logger compatible with logging.Logger-like API.
        settings: Optional settings override; read from the environment
            when omitted.

    Returns:
        LedgerRepositoryPort: Concrete repository implementation.

    Raises:
        ValueError: If the configured backend is not supported.
    """
    resolved_logger = logger or get_app_logger()
    resolved_settings = settings or LedgerSettings.from_env()
    backend = resolved_settings.backend

    if backend == "api":
        resolved_logger.info(
            f"Using API ledger backend at {resolved_settings.api_url}"
        )
        client = LedgerApiClient(
            resolved_settings.api_url,
            token=resolved_settings.api_token,
            timeout=resolved_settings.api_timeout,
            page_size=resolved_settings.page_size,
        )
        return ApiLedgerRepository(client)

    if backend == "sqlalchemy":
        resolved_logger.info("Using SQLAlchemy ledger backend")
        return SqlAlchemyLedgerRepository(
            db_port or SqlAlchemyDatabaseEngineAdapter()
        )

    raise ValueError(
        "Unsupported ledger backend: "
        f"{backend}. Expected api or sqlalchemy."
    )


__all__ = ["create_ledger_repository"]
