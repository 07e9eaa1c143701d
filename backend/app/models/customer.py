"""
CustomerDesk Backend — Customer SQLAlchemy Model
==================================================

What:  ORM model representing the `customers` table.
How:   Inherits from DeclarativeBase; Alembic migration 001 creates the same table.
Who:   Used by CustomerRepository for CRUD operations.

Table Design:
    - UUID primary key assigned on insert, never changed afterwards
    - All four business columns NOT NULL: a stored record always has them
    - member_num is indexed but NOT unique: duplicate member numbers are allowed
"""

import uuid
from datetime import date

from sqlalchemy import Date, Index, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Customer(Base):
    """
    A customer record.

    Lifecycle:
        1. Created from a submitted form (all fields present)
        2. Updated in place by identifier (full or partial field replacement)
        3. Deleted by identifier (hard delete)
    """

    __tablename__ = "customers"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
        comment="Identifier assigned at creation; used for all addressing",
    )

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Customer display name",
    )

    date_of_birth: Mapped[date] = mapped_column(
        Date,
        nullable=False,
        comment="Calendar date of birth",
    )

    member_num: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Membership number (not unique)",
    )

    interests: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Free-text interests and hobbies",
    )

    __table_args__ = (
        Index("idx_customers_member_num", "member_num"),
    )

    def __repr__(self) -> str:
        return f"<Customer(id={self.id}, name='{self.name}', member_num={self.member_num})>"
