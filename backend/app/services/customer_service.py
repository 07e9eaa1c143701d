"""
CustomerDesk Backend — Customer Service (CRUD Handler)
========================================================

What:  The five customer operations: list, get-one, create, update, delete.
How:   Each call builds a CustomerRepository over the request's session,
       performs exactly one store operation, and maps the outcome:
         - missing record        → NotFoundError  (404)
         - any store exception   → DatabaseError  (500, underlying text as details)
Who:   Called by the /customer route handlers.
When:  Once per request; no state is kept between calls.

Input validation already happened in the route layer (Pydantic), so every
exception seen here is a store failure.

Writes commit before returning, so the response is only built once the
change is durable and a failed commit surfaces as a DatabaseError.
"""

import logging
from typing import Callable, List

from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import DatabaseError, NotFoundError
from app.repositories.customer_repo import CustomerRepository
from app.schemas.customer import (
    CustomerCreate,
    CustomerResponse,
    CustomerUpdate,
    MessageResponse,
)

logger = logging.getLogger(__name__)


class CustomerService:
    """
    Business logic layer for customer records.

    Error Handling Strategy:
        NotFoundError propagates untouched. Everything else raised by the
        repository is logged with its traceback and wrapped in DatabaseError
        carrying the operation summary and `str(exc)`.
    """

    def __init__(self, repository_factory: Callable[[AsyncSession], CustomerRepository] = CustomerRepository):
        self.repository_factory = repository_factory

    async def list_customers(self, db: AsyncSession) -> List[CustomerResponse]:
        try:
            customers = await self.repository_factory(db).get_all()
        except Exception as e:
            logger.error("Error fetching customers: %s", str(e), exc_info=True)
            raise DatabaseError(message="Failed to fetch customers", details=str(e))

        logger.info("Fetched %d customers", len(customers))
        return [CustomerResponse.from_model(c) for c in customers]

    async def get_customer(self, db: AsyncSession, customer_id: str) -> CustomerResponse:
        """
        Retrieve a single customer by ID.

        Raises:
            NotFoundError: no record has this identifier (or it is malformed)
            DatabaseError: the lookup itself failed
        """
        try:
            customer = await self.repository_factory(db).get_by_id(customer_id)
        except Exception as e:
            logger.error("Error fetching customer %s: %s", customer_id, str(e), exc_info=True)
            raise DatabaseError(message="Failed to fetch customer", details=str(e))

        if customer is None:
            raise NotFoundError(resource="Customer", resource_id=customer_id)

        return CustomerResponse.from_model(customer)

    async def create_customer(self, db: AsyncSession, data: CustomerCreate) -> CustomerResponse:
        """
        Persist a new customer and return it with its assigned identifier.

        Raises:
            DatabaseError: insert failed (constraint violation, connection lost, ...)
        """
        logger.info("Creating customer: %s", data.model_dump(mode="json"))
        try:
            customer = await self.repository_factory(db).create(
                name=data.name,
                date_of_birth=data.date_of_birth,
                member_num=data.member_num,
                interests=data.interests,
            )
            await db.commit()
        except Exception as e:
            logger.error("Error creating customer: %s", str(e), exc_info=True)
            raise DatabaseError(message="Failed to create customer", details=str(e))

        logger.info("Customer created successfully: %r", customer)
        return CustomerResponse.from_model(customer)

    async def update_customer(
        self,
        db: AsyncSession,
        customer_id: str,
        data: CustomerUpdate,
    ) -> CustomerResponse:
        """
        Replace the provided fields of an existing customer.

        Raises:
            NotFoundError: no record has this identifier
            DatabaseError: the update failed
        """
        changes = data.changes()
        logger.info("Updating customer %s with %s", customer_id, changes)
        try:
            customer = await self.repository_factory(db).update(customer_id, **changes)
            await db.commit()
        except Exception as e:
            logger.error("Error updating customer %s: %s", customer_id, str(e), exc_info=True)
            raise DatabaseError(message="Failed to update customer", details=str(e))

        if customer is None:
            logger.info("Customer not found with ID: %s", customer_id)
            raise NotFoundError(resource="Customer", resource_id=customer_id)

        logger.info("Customer updated successfully: %r", customer)
        return CustomerResponse.from_model(customer)

    async def delete_customer(self, db: AsyncSession, customer_id: str) -> MessageResponse:
        """
        Delete a customer by ID.

        Raises:
            NotFoundError: no record has this identifier (including one that
                           a concurrent request already deleted)
            DatabaseError: the delete failed
        """
        logger.info("Deleting customer %s", customer_id)
        try:
            deleted = await self.repository_factory(db).delete(customer_id)
            await db.commit()
        except Exception as e:
            logger.error("Error deleting customer %s: %s", customer_id, str(e), exc_info=True)
            raise DatabaseError(message="Failed to delete customer", details=str(e))

        if not deleted:
            logger.info("Customer not found with ID: %s", customer_id)
            raise NotFoundError(resource="Customer", resource_id=customer_id)

        logger.info("Customer deleted successfully: %s", customer_id)
        return MessageResponse(message="Customer deleted successfully")


# ── Singleton Instance ────────────────────────────────────────────────────
# Stateless: the session arrives with each call
customer_service = CustomerService()
