"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

from stockbook.domain.constants import MATCH_BY_NAME, MATCH_MODES
from stockbook.infrastructure.logging.logger import get_app_logger

DEFAULT_API_URL = "http://localhost:5000/api"
SUPPORTED_BACKENDS = ("api", "sqlalchemy")
MAX_PAGE_SIZE = 100


@dataclass(frozen=True)
class LedgerSettings:
    """Settings for reaching the invoicing backend.

    Attributes:
        backend: Backend identifier (api or sqlalchemy).
        api_url: Base URL of the invoicing REST API.
        api_token: Optional bearer token for the API.
        api_timeout: Request timeout in seconds.
        page_size: Page size used when walking paginated collections,
            capped at the API limit of 100.
        party_match: How invoices are matched to parties (name or id).
    """

    backend: str = "api"
    api_url: str = DEFAULT_API_URL
    api_token: str | None = None
    api_timeout: float = 30.0
    page_size: int = 100
    party_match: str = MATCH_BY_NAME

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables and an optional .env.

        Returns:
            LedgerSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        backend = os.getenv("STOCKBOOK_BACKEND", "api").strip().lower()
        party_match = (
            os.getenv("STOCKBOOK_PARTY_MATCH", MATCH_BY_NAME).strip().lower()
        )
        if party_match not in MATCH_MODES:
            logger.warning(
                f"Unsupported STOCKBOOK_PARTY_MATCH '{party_match}'; "
                f"falling back to {MATCH_BY_NAME}"
            )
            party_match = MATCH_BY_NAME
        token = os.getenv("STOCKBOOK_API_TOKEN") or None
        page_size = cls._parse_number("STOCKBOOK_PAGE_SIZE", 100, int, logger)
        if page_size > MAX_PAGE_SIZE:
            logger.warning(
                f"STOCKBOOK_PAGE_SIZE {page_size} exceeds the API limit; "
                f"using {MAX_PAGE_SIZE}"
            )
            page_size = MAX_PAGE_SIZE
        return cls(
            backend=backend,
            api_url=os.getenv("STOCKBOOK_API_URL", DEFAULT_API_URL).strip(),
            api_token=token,
            api_timeout=cls._parse_number(
                "STOCKBOOK_API_TIMEOUT", 30.0, float, logger
            ),
            page_size=page_size,
            party_match=party_match,
        )

    @staticmethod
    def _parse_number(name: str, default, cast, logger):
        """Read a positive number from the environment.

        Args:
            name: Environment variable name.
            default: Value used when the variable is unset or invalid.
            cast: int or float.
            logger: Logger used for warnings.

        Returns:
            Parsed value, or default.
        """
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            value = cast(raw.strip())
        except ValueError:
            logger.warning(f"Invalid {name} '{raw}'; using {default}")
            return default
        if value <= 0:
            logger.warning(f"{name} must be positive; using {default}")
            return default
        return value


__all__ = [
    "LedgerSettings",
    "DEFAULT_API_URL",
    "MAX_PAGE_SIZE",
    "SUPPORTED_BACKENDS",
]
