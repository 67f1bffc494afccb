"""
Customer endpoints.

These routes expose the CRUD API for customers under
``/api/customer``.  Handlers only delegate to ``CustomerService`` and
choose the success status; failures raised by the service
(``InvalidInputError``, ``CustomerNotFoundError``) and body validation
errors are turned into HTTP 400 by the handlers registered in
``main.create_app``.
"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Query, status

from customer_api.app.core.config import settings
from customer_api.app.schemas.customer import (
    CustomerCreate,
    CustomerPage,
    CustomerRead,
    CustomerUpdate,
)
from customer_api.app.services.customer_service import CustomerService

router = APIRouter()


@router.post("/add", response_model=CustomerRead, status_code=status.HTTP_201_CREATED)
async def add_customer(customer_in: CustomerCreate) -> CustomerRead:
    """Create a new customer.

    ``id``, ``version`` and both dates must be omitted or null; the
    response carries the values assigned by the store.
    """
    return await CustomerService.add_customer(customer_in)


@router.get("/get/{customer_id}", response_model=CustomerRead)
async def get_customer(customer_id: UUID) -> CustomerRead:
    """Retrieve a single customer by id."""
    return await CustomerService.get_customer(customer_id)


@router.put("/update", response_model=CustomerRead)
async def update_customer(customer_in: CustomerUpdate) -> CustomerRead:
    """Update name and table number of an existing customer."""
    return await CustomerService.update_customer(customer_in)


@router.delete("/delete/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_customer(customer_id: UUID) -> None:
    """Delete a customer."""
    await CustomerService.delete_customer(customer_id)
    return None


@router.get("/all/{customer_name}", response_model=List[CustomerRead])
async def search_customers(customer_name: str) -> List[CustomerRead]:
    """Return customers whose name contains ``customer_name``.

    An empty list is a valid answer.
    """
    return await CustomerService.search_customers(customer_name)


@router.get("/all", response_model=List[CustomerRead])
async def list_customers() -> List[CustomerRead]:
    """Return every customer once."""
    return await CustomerService.list_customers()


@router.get("/page", response_model=CustomerPage)
async def list_customers_page(
    page: int = Query(0, ge=0),
    size: Optional[int] = Query(None, ge=1, le=1000),
) -> CustomerPage:
    """Return one page of customers, ordered by creation date.

    ``page`` counts from zero; ``size`` defaults to the configured
    page size.
    """
    return await CustomerService.list_customers_page(
        page=page, size=size or settings.default_page_size
    )
