import uuid
from datetime import date
from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.customer import Customer


def parse_customer_id(customer_id: str) -> Optional[uuid.UUID]:
    """Parse an identifier from a URL; None if it cannot name any record."""
    try:
        return uuid.UUID(str(customer_id))
    except (ValueError, AttributeError, TypeError):
        return None


class CustomerRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_all(self) -> List[Customer]:
        """Get all customers in store order"""
        result = await self.db.execute(select(Customer))
        return list(result.scalars().all())

    async def get_by_id(self, customer_id: str) -> Optional[Customer]:
        """Get customer by ID"""
        key = parse_customer_id(customer_id)
        if key is None:
            return None
        result = await self.db.execute(select(Customer).where(Customer.id == key))
        return result.scalar_one_or_none()

    async def create(
        self,
        name: str,
        date_of_birth: date,
        member_num: int,
        interests: str,
    ) -> Customer:
        """Create a new customer"""
        customer = Customer(
            name=name,
            date_of_birth=date_of_birth,
            member_num=member_num,
            interests=interests,
        )
        self.db.add(customer)
        # Flush assigns the row now so constraint errors surface here,
        # not at the request's commit
        await self.db.flush()
        return customer

    async def update(self, customer_id: str, **kwargs) -> Optional[Customer]:
        """Update customer fields that were provided"""
        customer = await self.get_by_id(customer_id)
        if not customer:
            return None

        for key, value in kwargs.items():
            if hasattr(customer, key):
                setattr(customer, key, value)

        await self.db.flush()
        return customer

    async def delete(self, customer_id: str) -> bool:
        """
        Delete customer by ID.

        A single DELETE ... RETURNING: of two concurrent deletes of the same
        row, only one sees it returned.
        """
        key = parse_customer_id(customer_id)
        if key is None:
            return False
        result = await self.db.execute(
            delete(Customer).where(Customer.id == key).returning(Customer.id)
        )
        return result.first() is not None
