"""
Service layer for customers.

Each method handles one use case: it checks its arguments, makes the
repository call and maps entities to ``CustomerRead`` schemas.  Failed
preconditions raise ``InvalidInputError`` or ``CustomerNotFoundError``;
the API layer reports both as HTTP 400.

Repository calls are blocking sqlite3 work, so they are handed to the
thread pool with ``run_in_threadpool`` and the event loop keeps serving
other requests meanwhile.

``update_customer`` refuses unknown ids even though ``save`` would
insert them.  Concurrent updates of the same customer are not checked
against ``version``: the last write wins.
"""

from __future__ import annotations

import logging
import math
from typing import List, Optional
from uuid import UUID

from fastapi.concurrency import run_in_threadpool

from customer_api.app.core.db import SQLITE_MAX_INTEGER
from customer_api.app.core.exceptions import CustomerNotFoundError, InvalidInputError
from customer_api.app.repositories.customer_repository import CustomerRepository
from customer_api.app.schemas.customer import (
    CustomerCreate,
    CustomerPage,
    CustomerRead,
    CustomerUpdate,
)
from customer_api.app.services.customer_mapper import (
    customer_create_to_entity,
    customer_update_to_entity,
    entities_to_customer_reads,
    entity_to_customer_read,
)


class CustomerService:
    """Service class for managing customers."""

    @classmethod
    async def add_customer(cls, data: Optional[CustomerCreate]) -> CustomerRead:
        """Persist a new customer and return it with its assigned id."""
        logger = logging.getLogger(__name__)
        if data is None:
            raise InvalidInputError("The customer informations were not provided.")
        customer = await run_in_threadpool(CustomerRepository.save, customer_create_to_entity(data))
        logger.info("Created customer %s", customer.id)
        return entity_to_customer_read(customer)

    @classmethod
    async def get_customer(cls, customer_id: Optional[UUID]) -> CustomerRead:
        if customer_id is None:
            raise InvalidInputError("This UUID is not valid.")
        customer = await run_in_threadpool(CustomerRepository.find_by_id, customer_id)
        if customer is None:
            raise CustomerNotFoundError("This UUID is unknown.")
        return entity_to_customer_read(customer)

    @classmethod
    async def update_customer(cls, data: Optional[CustomerUpdate]) -> CustomerRead:
        """Replace name and table number of an existing customer.

        The existence check and the write are one UPDATE statement, so
        a customer deleted in the meantime stays deleted.  The store
        bumps ``version`` and ``last_modified_date``.
        """
        logger = logging.getLogger(__name__)
        if data is None:
            raise InvalidInputError("The customer informations were not provided.")
        customer = await run_in_threadpool(CustomerRepository.update, customer_update_to_entity(data))
        if customer is None:
            raise CustomerNotFoundError("This UUID is unknown.")
        logger.info("Updated customer %s (version %s)", customer.id, customer.base.version)
        return entity_to_customer_read(customer)

    @classmethod
    async def delete_customer(cls, customer_id: Optional[UUID]) -> None:
        logger = logging.getLogger(__name__)
        if customer_id is None:
            raise InvalidInputError("This UUID is not valid.")
        if not await run_in_threadpool(CustomerRepository.exists_by_id, customer_id):
            raise CustomerNotFoundError("This UUID is unknown.")
        await run_in_threadpool(CustomerRepository.delete_by_id, customer_id)
        logger.info("Deleted customer %s", customer_id)

    @classmethod
    async def search_customers(cls, pattern: Optional[str]) -> List[CustomerRead]:
        """Return customers whose name contains ``pattern``; may be empty."""
        if pattern is None:
            raise InvalidInputError("The customer name was not provided.")
        customers = await run_in_threadpool(CustomerRepository.find_all_by_customer_name_like, pattern)
        return entities_to_customer_reads(customers)

    @classmethod
    async def list_customers(cls) -> List[CustomerRead]:
        """Return every stored customer once, oldest first."""
        unique = dict.fromkeys(await run_in_threadpool(CustomerRepository.find_all))
        return entities_to_customer_reads(unique)

    @classmethod
    async def list_customers_page(cls, page: int, size: int) -> CustomerPage:
        """Return page ``page`` (zero-based) holding at most ``size`` customers."""
        if page is None or page < 0:
            raise InvalidInputError("The page index must be zero or greater.")
        if size is None or size < 1:
            raise InvalidInputError("The page size must be at least one.")
        offset = page * size
        if offset > SQLITE_MAX_INTEGER or size > SQLITE_MAX_INTEGER:
            raise InvalidInputError("The page index is out of range.")
        total = await run_in_threadpool(CustomerRepository.count)
        customers = await run_in_threadpool(CustomerRepository.find_page, size, offset)
        return CustomerPage(
            content=entities_to_customer_reads(customers),
            page=page,
            size=size,
            total_elements=total,
            total_pages=math.ceil(total / size),
        )
