"""
CustomerDesk Backend — Test Configuration (conftest.py)
========================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── mock_db_session: Mock AsyncSession (no real DB needed)
    ├── mock_repository: CustomerRepository double with AsyncMock methods
    ├── sample_customer_data: Field values for one customer
    ├── database: Database on a temporary SQLite file, tables created
    ├── test_app: FastAPI app bound to `database`
    ├── test_client: HTTPX AsyncClient for API endpoint testing
    └── api_client: CustomerApiClient talking to `test_app` in-process
"""

import os

# Override settings for testing BEFORE any app imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test.db"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["DB_CREATE_TABLES"] = "false"

from datetime import date
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.client.api_client import CustomerApiClient
from app.database import Database
from app.main import create_app
from app.models.customer import Customer


# ══════════════════════════════════════════════════════════════════════════
# Unit-test doubles
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        result = await customer_service.list_customers(mock_db_session)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def mock_repository():
    """A CustomerRepository stand-in; configure return values per test."""
    repo = MagicMock()
    repo.get_all = AsyncMock(return_value=[])
    repo.get_by_id = AsyncMock(return_value=None)
    repo.create = AsyncMock()
    repo.update = AsyncMock(return_value=None)
    repo.delete = AsyncMock(return_value=False)
    return repo


@pytest.fixture
def sample_customer_data():
    """Field values matching the Customer model."""
    return {
        "id": uuid4(),
        "name": "Alice",
        "date_of_birth": date(1990, 1, 1),
        "member_num": 7,
        "interests": "chess",
    }


@pytest.fixture
def sample_customer(sample_customer_data):
    """A transient Customer ORM instance (not attached to any session)."""
    return Customer(**sample_customer_data)


# ══════════════════════════════════════════════════════════════════════════
# Integration fixtures (real app, SQLite database)
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def database(tmp_path):
    """A Database on a fresh SQLite file with the customers table created."""
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'customerdesk.db'}")
    await db.create_all()
    yield db
    await db.dispose()


@pytest.fixture
def test_app(database):
    return create_app(database=database)


@pytest_asyncio.fixture
async def test_client(test_app):
    """
    HTTPX AsyncClient routed straight into the FastAPI app.

    Usage:
        response = await test_client.get("/customer")
    """
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def api_client(test_app):
    """The UI's API client, wired to the in-process app."""
    client = CustomerApiClient("http://test", transport=ASGITransport(app=test_app))
    yield client
    await client.close()
