"""HTTP client for the invoicing REST API."""

from collections.abc import Mapping
from typing import Any

import requests


class LedgerApiError(RuntimeError):
    """Raised when the invoicing API cannot be reached or answers badly."""


class LedgerApiClient:
    """Thin requests wrapper with bearer auth and pagination.

    List endpoints answer ``{"<key>": [...], "pagination": {"page", "pages"}}``;
    ``fetch_collection`` walks every page and returns the concatenated items.
    """

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        timeout: float = 30.0,
        page_size: int = 100,
        session: requests.Session | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._token = token
        self._timeout = timeout
        self._page_size = page_size
        self._session = session or requests.Session()

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    def get_json(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """Issue a GET request and decode the JSON body.

        Args:
            path: Endpoint path relative to the base URL.
            params: Optional query parameters.

        Returns:
            Any: Decoded JSON payload.

        Raises:
            LedgerApiError: On network errors, non-200 responses or bad JSON.
        """
        url = f"{self._base_url}/{path.lstrip('/')}"
        try:
            response = self._session.get(
                url,
                params=params,
                headers=self._headers(),
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            raise LedgerApiError(f"Request to {url} failed: {exc}") from exc
        if response.status_code != 200:
            raise LedgerApiError(
                f"GET {url} returned {response.status_code}: "
                f"{response.text[:200]}"
            )
        try:
            return response.json()
        except ValueError as exc:
            raise LedgerApiError(f"GET {url} returned invalid JSON") from exc

    def fetch_collection(self, path: str, key: str) -> list[dict[str, Any]]:
        """Fetch every page of a list endpoint.

        Args:
            path: Endpoint path, e.g. ``/invoices/sales``.
            key: Collection key in the response body, e.g. ``invoices``.

        Returns:
            list[dict[str, Any]]: Items from all pages, in server order.

        Raises:
            LedgerApiError: If a page does not carry the expected collection.
        """
        items: list[dict[str, Any]] = []
        page = 1
        while True:
            payload = self.get_json(
                path,
                {"page": page, "limit": self._page_size},
            )
            if isinstance(payload, list):
                return payload
            batch = payload.get(key) if isinstance(payload, Mapping) else None
            if not isinstance(batch, list):
                raise LedgerApiError(
                    f"Unexpected payload from {path}: missing '{key}' list"
                )
            items.extend(batch)
            pagination = payload.get("pagination") or {}
            pages = pagination.get("pages")
            if not batch or not isinstance(pages, int) or page >= pages:
                return items
            page += 1


__all__ = ["LedgerApiClient", "LedgerApiError"]
