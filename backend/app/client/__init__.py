# Client package init
"""
CustomerDesk Client — UI Controllers
======================================

The browser-side logic of the customer pages, independent of any rendering:

    - CustomerApiClient: httpx client for the /customer endpoints
    - CustomerPage:      list page (add/edit dialog, delete confirmation, notices)
    - CustomerDetail:    detail page (loaded / not found / error)
"""

from app.client.api_client import CustomerApiClient
from app.client.customer_detail import CustomerDetail, DetailState
from app.client.customer_page import CustomerPage, FormData, Notice, PageState, Severity

__all__ = [
    "CustomerApiClient",
    "CustomerDetail",
    "CustomerPage",
    "DetailState",
    "FormData",
    "Notice",
    "PageState",
    "Severity",
]
