"""Async HTTP client for the ``/api/form-data`` endpoint."""

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from formwizard.config import settings
from formwizard.schemas.wizard import COMPLETED_STATUS, FormData

logger = logging.getLogger(__name__)

FORM_DATA_PATH = "/api/form-data"


class FormSyncError(Exception):
    """A request to the persistence endpoint failed (transport or HTTP)."""

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class FormDataClient:
    """Thin wrapper over ``httpx.AsyncClient``.

    Pass ``http_client`` to reuse an existing client (tests hand in one
    bound to the ASGI app); otherwise one is created from ``base_url`` and
    closed by ``aclose()``. ``transport`` is handed to that client.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        http_client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(
            base_url=base_url or settings.api_base_url,
            timeout=timeout or settings.request_timeout_seconds,
            transport=transport,
        )

    async def __aenter__(self) -> "FormDataClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()

    async def _request(self, method: str, json: dict | None = None) -> FormData:
        try:
            response = await self._http.request(method, FORM_DATA_PATH, json=json)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise FormSyncError(
                f"{method} {FORM_DATA_PATH} returned {exc.response.status_code}",
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            raise FormSyncError(f"{method} {FORM_DATA_PATH} failed: {exc}") from exc

        try:
            return FormData.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            raise FormSyncError(f"Malformed form data response: {exc}") from exc

    async def fetch(self) -> FormData:
        return await self._request("GET")

    async def save(self, payload: dict[str, Any]) -> FormData:
        """POST a partial record, e.g. ``{"personalInfo": {...}}``."""
        return await self._request("POST", json=payload)

    async def complete(self) -> FormData:
        """Signal completion; the server resets its record."""
        return await self._request("POST", json={"status": COMPLETED_STATUS})
