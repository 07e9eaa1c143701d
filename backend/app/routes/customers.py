"""
CustomerDesk Backend — Customer Route Handlers
================================================

What:  The customer collection and item resources.
How:   FastAPI validates bodies against the Pydantic schemas, then each
       handler delegates to CustomerService. Errors are raised as
       application exceptions and formatted by the global handlers.
Who:   Called by the browser UI and by app.client.CustomerApiClient.

Routes:
    GET    /customer          → 200 [record, ...]
    POST   /customer          → 201 record
    GET    /customer/{id}     → 200 record | 404
    PUT    /customer/{id}     → 200 record | 404
    DELETE /customer/{id}     → 200 {message} | 404
"""

import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.customer import (
    CustomerCreate,
    CustomerResponse,
    CustomerUpdate,
    ErrorResponse,
    MessageResponse,
)
from app.services.customer_service import customer_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/customer", tags=["Customers"])

_SERVER_ERROR = {500: {"description": "Store failure", "model": ErrorResponse}}
_NOT_FOUND = {404: {"description": "Customer not found", "model": ErrorResponse}}
_INVALID = {400: {"description": "Invalid customer data", "model": ErrorResponse}}


@router.get(
    "",
    response_model=List[CustomerResponse],
    responses=_SERVER_ERROR,
    summary="List all customers",
)
async def list_customers(
    db: AsyncSession = Depends(get_db_session),
) -> List[CustomerResponse]:
    return await customer_service.list_customers(db)


@router.post(
    "",
    status_code=201,
    response_model=CustomerResponse,
    responses={**_INVALID, **_SERVER_ERROR},
    summary="Create a customer",
)
async def create_customer(
    body: CustomerCreate,
    db: AsyncSession = Depends(get_db_session),
) -> CustomerResponse:
    """
    Create a customer from a complete record body.

    Returns the stored record including its newly assigned `id`.
    """
    return await customer_service.create_customer(db, body)


@router.get(
    "/{customer_id}",
    response_model=CustomerResponse,
    responses={**_NOT_FOUND, **_SERVER_ERROR},
    summary="Get a single customer by ID",
)
async def get_customer(
    customer_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> CustomerResponse:
    """
    `customer_id` is taken as a plain string: an identifier that is not a
    valid UUID is reported as 404, the same as an unknown one.
    """
    return await customer_service.get_customer(db, customer_id)


@router.put(
    "/{customer_id}",
    response_model=CustomerResponse,
    responses={**_INVALID, **_NOT_FOUND, **_SERVER_ERROR},
    summary="Update a customer",
)
async def update_customer(
    customer_id: str,
    body: CustomerUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> CustomerResponse:
    return await customer_service.update_customer(db, customer_id, body)


@router.delete(
    "/{customer_id}",
    response_model=MessageResponse,
    responses={**_NOT_FOUND, **_SERVER_ERROR},
    summary="Delete a customer",
)
async def delete_customer(
    customer_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    return await customer_service.delete_customer(db, customer_id)
