"""
Customer entity.

Identity and audit fields live in ``EntityBase``, which entities hold as
their ``base`` field instead of inheriting from it.  Entities are frozen
and hashable; two entities are equal when all of their fields are.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID


@dataclass(frozen=True)
class EntityBase:
    """Identity and audit fields owned by the store.

    Every field is ``None`` until the entity has been saved once.
    """

    id: Optional[UUID] = None
    version: Optional[int] = None
    created_date: Optional[datetime] = None
    last_modified_date: Optional[datetime] = None

    @property
    def is_new(self) -> bool:
        return self.id is None


@dataclass(frozen=True)
class Customer:
    customer_name: str
    table_number: str
    base: EntityBase = field(default_factory=EntityBase)

    @property
    def id(self) -> Optional[UUID]:
        return self.base.id
