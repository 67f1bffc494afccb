"""
Pydantic schemas for customers.

These models are the wire representation of a customer.  JSON keys
are camelCase (``customerName``, ``tableNumber``, ``createdDate`` ...);
snake_case field names are accepted as well when building models in
Python.  Identity, version and timestamps belong to the store, so
request bodies may leave them out or send ``null`` but never a value.
"""

from datetime import datetime
from typing import Any, List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel


CUSTOMER_NAME_MIN_LENGTH = 10
CUSTOMER_NAME_MAX_LENGTH = 100
TABLE_NUMBER_MIN_LENGTH = 1
TABLE_NUMBER_MAX_LENGTH = 2


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class _CustomerFields(CamelModel):
    customer_name: str = Field(
        ...,
        min_length=CUSTOMER_NAME_MIN_LENGTH,
        max_length=CUSTOMER_NAME_MAX_LENGTH,
        description="Name of the customer",
    )
    table_number: str = Field(
        ...,
        min_length=TABLE_NUMBER_MIN_LENGTH,
        max_length=TABLE_NUMBER_MAX_LENGTH,
        description="Number of the table",
    )

    @field_validator("customer_name", "table_number")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v


class _CustomerPayload(_CustomerFields):
    version: Optional[int] = Field(None, description="Assigned by the server; must be absent")
    created_date: Optional[datetime] = Field(None, description="Assigned by the server; must be absent")
    last_modified_date: Optional[datetime] = Field(None, description="Assigned by the server; must be absent")

    @field_validator("version", "created_date", "last_modified_date", mode="before")
    @classmethod
    def validate_server_owned(cls, v: Any, info: ValidationInfo) -> Any:
        if v is not None:
            raise ValueError(f"{info.field_name} is assigned by the server and must be null")
        return v


class CustomerCreate(_CustomerPayload):
    """Schema for creating a new customer."""

    id: Optional[UUID] = Field(None, description="Assigned by the server; must be absent")

    @field_validator("id", mode="before")
    @classmethod
    def validate_id_absent(cls, v: Any) -> Any:
        if v is not None:
            raise ValueError("id is assigned by the server and must be null")
        return v


class CustomerUpdate(_CustomerPayload):
    """Schema for updating an existing customer.

    The ``id`` selects the record; name and table number replace the
    stored values.
    """

    id: UUID = Field(..., description="Id of the customer to update")


class CustomerRead(CamelModel):
    """Schema for reading a customer."""

    id: UUID
    version: int
    created_date: datetime
    last_modified_date: datetime
    customer_name: str
    table_number: str


class CustomerPage(CamelModel):
    """One page of customers, ``page`` counting from zero."""

    content: List[CustomerRead]
    page: int
    size: int
    total_elements: int
    total_pages: int
