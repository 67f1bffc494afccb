"""
Field-by-field conversion between customer schemas and entities.

The field set is small and fixed, so every copy is spelled out.  Store
owned fields (version, dates) only ever flow from entity to schema.
"""

from typing import Iterable, List

from customer_api.app.models.customer import Customer, EntityBase
from customer_api.app.schemas.customer import CustomerCreate, CustomerRead, CustomerUpdate


def customer_create_to_entity(data: CustomerCreate) -> Customer:
    """Build an unsaved entity; the store assigns id, version and dates."""
    return Customer(customer_name=data.customer_name, table_number=data.table_number)


def customer_update_to_entity(data: CustomerUpdate) -> Customer:
    """Build an entity that targets the stored row with ``data.id``."""
    return Customer(
        customer_name=data.customer_name,
        table_number=data.table_number,
        base=EntityBase(id=data.id),
    )


def entity_to_customer_read(customer: Customer) -> CustomerRead:
    """Copy a saved entity into the response schema."""
    return CustomerRead(
        id=customer.base.id,
        version=customer.base.version,
        created_date=customer.base.created_date,
        last_modified_date=customer.base.last_modified_date,
        customer_name=customer.customer_name,
        table_number=customer.table_number,
    )


def entities_to_customer_reads(customers: Iterable[Customer]) -> List[CustomerRead]:
    return [entity_to_customer_read(customer) for customer in customers]
