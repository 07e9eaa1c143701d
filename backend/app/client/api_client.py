"""
CustomerDesk Client — HTTP API Client
=======================================

What:  Async client for the /customer endpoints.
How:   Wraps one httpx.AsyncClient. Any transport failure or non-2xx
       response becomes an ApiRequestError carrying the status code and the
       `{error, details}` envelope fields when the server sent them.
Who:   Used by CustomerPage and CustomerDetail.

No retries: every call is attempted exactly once.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from app.config import Settings, settings as default_settings
from app.exceptions import ApiRequestError

logger = logging.getLogger(__name__)


class CustomerApiClient:
    """
    Thin async wrapper over the customer API.

    Args:
        base_url:  API root, e.g. "http://localhost:8000"
        timeout:   Per-request timeout in seconds
        transport: Optional httpx transport (tests pass MockTransport or ASGITransport)
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, transport=transport)

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "CustomerApiClient":
        settings = settings or default_settings
        return cls(settings.api_base_url, settings.client_timeout_seconds, transport)

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "CustomerApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    # ── Operations ────────────────────────────────────────────────────────

    async def list_customers(self) -> List[Dict[str, Any]]:
        return await self._request("GET", "/customer", "Failed to fetch customers")

    async def get_customer(self, customer_id: str) -> Dict[str, Any]:
        return await self._request("GET", f"/customer/{customer_id}", "Failed to fetch customer")

    async def create_customer(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("POST", "/customer", "Failed to create customer", json=payload)

    async def update_customer(self, customer_id: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request(
            "PUT", f"/customer/{customer_id}", "Failed to update customer", json=payload
        )

    async def delete_customer(self, customer_id: str) -> Dict[str, Any]:
        return await self._request("DELETE", f"/customer/{customer_id}", "Failed to delete customer")

    # ── Internals ─────────────────────────────────────────────────────────

    async def _request(self, method: str, path: str, failure: str, **kwargs) -> Any:
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.error("%s %s failed: %s", method, path, str(e))
            raise ApiRequestError(message=failure, details=str(e)) from e

        if response.is_success:
            return response.json()

        message, details = failure, None
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            message = body.get("error") or failure
            details = body.get("details")

        logger.warning("%s %s returned %d: %s", method, path, response.status_code, message)
        raise ApiRequestError(message=message, status_code=response.status_code, details=details)
