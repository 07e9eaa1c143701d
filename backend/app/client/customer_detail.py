"""Controller for the single-customer detail page."""

import logging
from enum import Enum
from typing import Any, Dict, Optional

from app.client.api_client import CustomerApiClient
from app.exceptions import ApiRequestError

logger = logging.getLogger(__name__)


class DetailState(str, Enum):
    LOADING = "loading"
    LOADED = "loaded"
    NOT_FOUND = "not_found"
    ERROR = "error"


class CustomerDetail:
    """
    Loads one record: loading → loaded | not_found | error.

    `error` holds the message the page shows when loading did not succeed.
    """

    def __init__(self, api: CustomerApiClient, customer_id: str):
        self.api = api
        self.customer_id = customer_id
        self.state = DetailState.LOADING
        self.customer: Optional[Dict[str, Any]] = None
        self.error: Optional[str] = None

    async def load(self) -> None:
        self.state = DetailState.LOADING
        self.customer = None
        self.error = None
        try:
            self.customer = await self.api.get_customer(self.customer_id)
            self.state = DetailState.LOADED
        except ApiRequestError as e:
            if e.not_found:
                self.state = DetailState.NOT_FOUND
                self.error = "Customer not found"
            else:
                logger.error("Error fetching customer %s: %s", self.customer_id, e.message)
                self.state = DetailState.ERROR
                self.error = "Failed to load customer data"
