"""Tests for the customer detail page controller."""

import httpx
import pytest

from app.client.api_client import CustomerApiClient
from app.client.customer_detail import CustomerDetail, DetailState


def detail_for(status, payload, customer_id="a1"):
    transport = httpx.MockTransport(lambda request: httpx.Response(status, json=payload))
    return CustomerDetail(CustomerApiClient("http://api.test", transport=transport), customer_id)


class TestCustomerDetail:

    @pytest.mark.asyncio
    async def test_loaded(self):
        record = {"id": "a1", "name": "Alice", "dateOfBirth": "1990-01-01", "memberNum": 7, "interests": "chess"}
        detail = detail_for(200, record)
        assert detail.state == DetailState.LOADING

        await detail.load()

        assert detail.state == DetailState.LOADED
        assert detail.customer == record
        assert detail.error is None

    @pytest.mark.asyncio
    async def test_not_found(self):
        detail = detail_for(404, {"error": "Customer not found"})

        await detail.load()

        assert detail.state == DetailState.NOT_FOUND
        assert detail.error == "Customer not found"
        assert detail.customer is None

    @pytest.mark.asyncio
    async def test_server_error(self):
        detail = detail_for(500, {"error": "Failed to fetch customer", "details": "boom"})

        await detail.load()

        assert detail.state == DetailState.ERROR
        assert detail.error == "Failed to load customer data"

    @pytest.mark.asyncio
    async def test_against_backend(self, api_client):
        created = await api_client.create_customer(
            {"name": "Alice", "dateOfBirth": "1990-01-01", "memberNum": 7, "interests": "chess"}
        )

        found = CustomerDetail(api_client, created["id"])
        await found.load()
        missing = CustomerDetail(api_client, "no-such-customer")
        await missing.load()

        assert found.customer == created
        assert missing.state == DetailState.NOT_FOUND
