"""
SQL access for customers.

``CustomerRepository`` is the only place that talks to the
``customers`` table.  It works on ``Customer`` entities and leaves the
argument checks to ``CustomerService``.  Each method runs in its own
``get_cursor`` transaction and uses parameterized statements.

``save`` is an upsert (an unknown id is inserted under that id) while
``update`` only ever touches an existing row; the service uses the
latter so a concurrent delete cannot be undone by an update.
"""

from __future__ import annotations

import sqlite3
from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID, uuid4

from customer_api.app.core.db import get_cursor
from customer_api.app.models.customer import Customer, EntityBase

ORDERING = "ORDER BY created_date ASC, rowid ASC"


class CustomerRepository:
    """Persistence operations for ``Customer`` entities."""

    @classmethod
    def save(cls, customer: Customer) -> Customer:
        """Insert or update ``customer`` and return the stored entity.

        A new entity gets a random UUID, version 0 and both timestamps.
        An entity whose id is already stored has its version incremented
        and ``last_modified_date`` refreshed; ``created_date`` is kept.
        An entity carrying an id that is not stored yet is inserted
        under that id.
        """
        now = _now()
        customer_id = str(customer.id or uuid4())
        with get_cursor() as cursor:
            cursor.execute(
                """
                INSERT INTO customers (id, version, created_date, last_modified_date, customer_name, table_number)
                VALUES (?, 0, ?, ?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    customer_name = excluded.customer_name,
                    table_number = excluded.table_number,
                    version = customers.version + 1,
                    last_modified_date = excluded.last_modified_date
                """,
                (customer_id, now, now, customer.customer_name, customer.table_number),
            )
            return cls._fetch(cursor, customer_id)

    @classmethod
    def update(cls, customer: Customer) -> Optional[Customer]:
        """Overwrite name and table number of the stored row with ``customer.id``.

        Bumps ``version`` and ``last_modified_date``.  Returns ``None``
        without writing anything when the id is not stored.
        """
        with get_cursor() as cursor:
            cursor.execute(
                """
                UPDATE customers
                SET customer_name = ?, table_number = ?, version = version + 1, last_modified_date = ?
                WHERE id = ?
                """,
                (customer.customer_name, customer.table_number, _now(), str(customer.id)),
            )
            if cursor.rowcount == 0:
                return None
            return cls._fetch(cursor, str(customer.id))

    @classmethod
    def find_by_id(cls, customer_id: UUID) -> Optional[Customer]:
        with get_cursor() as cursor:
            row = cursor.execute(
                "SELECT * FROM customers WHERE id = ?", (str(customer_id),)
            ).fetchone()
        return cls._row_to_customer(row) if row else None

    @classmethod
    def exists_by_id(cls, customer_id: UUID) -> bool:
        with get_cursor() as cursor:
            row = cursor.execute(
                "SELECT 1 FROM customers WHERE id = ?", (str(customer_id),)
            ).fetchone()
        return row is not None

    @classmethod
    def delete_by_id(cls, customer_id: UUID) -> None:
        """Delete the customer; an unknown id is silently ignored."""
        with get_cursor() as cursor:
            cursor.execute("DELETE FROM customers WHERE id = ?", (str(customer_id),))

    @classmethod
    def find_all(cls) -> List[Customer]:
        """Return all customers, oldest first."""
        with get_cursor() as cursor:
            rows = cursor.execute(f"SELECT * FROM customers {ORDERING}").fetchall()
        return [cls._row_to_customer(row) for row in rows]

    @classmethod
    def find_all_by_customer_name_like(cls, pattern: str) -> List[Customer]:
        """Return customers whose name contains ``pattern``, oldest first.

        Matching is SQLite ``LIKE``: case-insensitive for ASCII letters,
        and ``%``/``_`` inside ``pattern`` act as wildcards.
        """
        with get_cursor() as cursor:
            rows = cursor.execute(
                f"SELECT * FROM customers WHERE customer_name LIKE ? {ORDERING}",
                (f"%{pattern}%",),
            ).fetchall()
        return [cls._row_to_customer(row) for row in rows]

    @classmethod
    def count(cls) -> int:
        with get_cursor() as cursor:
            return cursor.execute("SELECT COUNT(*) AS total FROM customers").fetchone()["total"]

    @classmethod
    def find_page(cls, limit: int, offset: int) -> List[Customer]:
        """Return at most ``limit`` customers after skipping ``offset``, oldest first.

        Both values must fit in a SQLite INTEGER.
        """
        with get_cursor() as cursor:
            rows = cursor.execute(
                f"SELECT * FROM customers {ORDERING} LIMIT ? OFFSET ?",
                (limit, offset),
            ).fetchall()
        return [cls._row_to_customer(row) for row in rows]

    @classmethod
    def _fetch(cls, cursor: sqlite3.Cursor, customer_id: str) -> Customer:
        row = cursor.execute("SELECT * FROM customers WHERE id = ?", (customer_id,)).fetchone()
        return cls._row_to_customer(row)

    @staticmethod
    def _row_to_customer(row: sqlite3.Row) -> Customer:
        """Convert a database row to a ``Customer`` entity."""
        return Customer(
            customer_name=row["customer_name"],
            table_number=row["table_number"],
            base=EntityBase(
                id=UUID(row["id"]),
                version=row["version"],
                created_date=datetime.fromisoformat(row["created_date"]),
                last_modified_date=datetime.fromisoformat(row["last_modified_date"]),
            ),
        )


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()
