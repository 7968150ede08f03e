"""Simple CLI to validate the configured ledger backend.

This adapter is meant for local operations: it resolves the backend from
settings and runs a basic health check against it.
"""

from stockbook.infrastructure.api_client import LedgerApiClient
from stockbook.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from stockbook.infrastructure.logging.logger import get_app_logger
from stockbook.infrastructure.settings import LedgerSettings


def main() -> None:
    """Run a connectivity check against the configured backend."""
    logger = get_app_logger()
    settings = LedgerSettings.from_env()

    if settings.backend == "sqlalchemy":
        engine = SqlAlchemyDatabaseEngineAdapter().get_ledger_engine()
        logger.info(f"Ledger DB: {engine.url}")
        with engine.connect() as conn:
            conn.exec_driver_sql("SELECT 1")
        logger.info("Ledger database connection is working.")
        return

    client = LedgerApiClient(
        settings.api_url,
        token=settings.api_token,
        timeout=settings.api_timeout,
    )
    logger.info(f"Ledger API: {settings.api_url}")
    client.get_json("/products", {"page": 1, "limit": 1})
    logger.info("Ledger API connection is working.")


if __name__ == "__main__":
    main()
