"""
CustomerDesk Backend — Pydantic Request/Response Schemas
==========================================================

What:  Pydantic models defining the JSON contract between the browser UI
       (or app.client) and the backend.
How:   FastAPI validates request bodies against CustomerCreate/CustomerUpdate
       before any handler runs, and serializes responses by alias, so the wire
       format uses camelCase (`dateOfBirth`, `memberNum`) while Python code
       uses snake_case.

Wire format of a record:
    {
        "id": "0b6f0c4e-...",
        "name": "Alice",
        "dateOfBirth": "1990-01-01",
        "memberNum": 7,
        "interests": "chess"
    }
"""

from datetime import date
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from app.models.customer import Customer

REQUIRED_FIELDS = ("name", "date_of_birth", "member_num", "interests")

# memberNum is stored in a 32-bit INTEGER column
MEMBER_NUM_MIN = -(2**31)
MEMBER_NUM_MAX = 2**31 - 1


class CamelModel(BaseModel):
    """Base for schemas exchanged as camelCase JSON."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


# ══════════════════════════════════════════════════════════════════════════
# Request Models — What clients send
# ══════════════════════════════════════════════════════════════════════════


class CustomerCreate(CamelModel):
    """
    Body of POST /customer. Every field is required.

    Text fields are trimmed, then must be non-empty. `memberNum` accepts
    integers (and integer-valued strings, as sent by HTML number inputs).
    """
    name: str = Field(min_length=1, max_length=255, description="Customer name")
    date_of_birth: date = Field(description="Date of birth (YYYY-MM-DD)")
    member_num: int = Field(ge=MEMBER_NUM_MIN, le=MEMBER_NUM_MAX, description="Membership number")
    interests: str = Field(min_length=1, description="Free-text interests")


class CustomerUpdate(CamelModel):
    """
    Body of PUT /customer/{id}. Any subset of the fields.

    A field that is present must satisfy the same rules as on create:
    sending `null` for a required field is rejected rather than clearing it.
    """
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    date_of_birth: Optional[date] = None
    member_num: Optional[int] = Field(default=None, ge=MEMBER_NUM_MIN, le=MEMBER_NUM_MAX)
    interests: Optional[str] = Field(default=None, min_length=1)

    @model_validator(mode="before")
    @classmethod
    def reject_explicit_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            for field in REQUIRED_FIELDS:
                alias = to_camel(field)
                for key in (alias, field):
                    if key in data and data[key] is None:
                        raise ValueError(f"{alias} is required and cannot be null")
        return data

    def changes(self) -> dict:
        """Fields the client actually sent, keyed by column name."""
        return self.model_dump(exclude_unset=True)


# ══════════════════════════════════════════════════════════════════════════
# Response Models — What the API returns
# ══════════════════════════════════════════════════════════════════════════


class CustomerResponse(CamelModel):
    """Full representation of a stored customer."""
    id: str = Field(description="Record identifier (UUID)")
    name: str
    date_of_birth: date
    member_num: int
    interests: str

    @classmethod
    def from_model(cls, customer: Customer) -> "CustomerResponse":
        return cls(
            id=str(customer.id),
            name=customer.name,
            date_of_birth=customer.date_of_birth,
            member_num=customer.member_num,
            interests=customer.interests,
        )


class MessageResponse(BaseModel):
    """Confirmation body, e.g. after a delete."""
    message: str


class ErrorResponse(BaseModel):
    """
    Error envelope for every failed request.

    Examples:
        {"error": "Customer not found"}
        {"error": "Failed to create customer", "details": "NOT NULL constraint failed"}
    """
    error: str = Field(description="Human-readable summary")
    details: Optional[str] = Field(default=None, description="Underlying error message")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and load balancer probes."""
    status: str = Field(description="healthy or unhealthy")
    version: str
    database: str = Field(description="connected or disconnected")
    uptime_seconds: float
