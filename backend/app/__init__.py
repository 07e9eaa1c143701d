"""
CustomerDesk Backend — Application Package Initializer
=======================================================

Architecture Note:
    This backend follows a layered architecture:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (CRUD Handler)     │  ← Error mapping, logging
    ├─────────────────────────────────────┤
    │   Repositories, Models & Schemas    │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    The `client` package sits on the other side of the HTTP boundary: the
    list and detail page controllers and the httpx client they call the API
    with.
"""

__version__ = "1.0.0"
