"""
Data access for the ``customer`` table.

``CustomerDAO`` is the storage contract the service depends on and
``CustomerSQLiteDataAccessService`` is its SQLite implementation.
Each method opens its own connection, runs one parameterized
statement, commits and closes, so no transaction spans two calls.
Errors raised by ``sqlite3`` are not caught here.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import List, Optional, Protocol

from customer_manager_api.app.core.db import get_connection
from customer_manager_api.app.schemas.customer import CustomerCreate, CustomerRead

logger = logging.getLogger(__name__)

# Columns a partial update may touch, in statement order.
UPDATABLE_COLUMNS = ("name", "email", "age")

# SQLite INTEGER is a signed 64-bit value; larger ids cannot be stored.
SQLITE_MIN_INTEGER = -(2**63)
SQLITE_MAX_INTEGER = 2**63 - 1


def _storable_id(customer_id: int) -> bool:
    return SQLITE_MIN_INTEGER <= customer_id <= SQLITE_MAX_INTEGER


class CustomerDAO(Protocol):
    """Storage contract for customers."""

    def select_all_customers(self) -> List[CustomerRead]: ...

    def select_customer_by_id(self, customer_id: int) -> Optional[CustomerRead]: ...

    def exists_customer_with_email(self, email: str) -> bool: ...

    def exists_customer_with_id(self, customer_id: int) -> bool: ...

    def insert_customer(self, customer: CustomerCreate) -> None: ...

    def update_customer(self, customer_id: int, changes: dict) -> None: ...

    def delete_customer_by_id(self, customer_id: int) -> None: ...


class CustomerSQLiteDataAccessService:
    """SQLite implementation of :class:`CustomerDAO`."""

    def __init__(self, db_path: Optional[str] = None) -> None:
        # ``None`` means the location configured in settings.
        self.db_path = db_path

    def select_all_customers(self) -> List[CustomerRead]:
        conn = get_connection(self.db_path)
        try:
            rows = conn.execute(
                "SELECT id, name, email, age, gender FROM customer"
            ).fetchall()
            return [self._row_to_customer(row) for row in rows]
        finally:
            conn.close()

    def select_customer_by_id(self, customer_id: int) -> Optional[CustomerRead]:
        if not _storable_id(customer_id):
            return None
        conn = get_connection(self.db_path)
        try:
            row = conn.execute(
                "SELECT id, name, email, age, gender FROM customer WHERE id = ?",
                (customer_id,),
            ).fetchone()
            if not row:
                return None
            return self._row_to_customer(row)
        finally:
            conn.close()

    def exists_customer_with_email(self, email: str) -> bool:
        return self._count("SELECT count(id) FROM customer WHERE email = ?", email) > 0

    def exists_customer_with_id(self, customer_id: int) -> bool:
        if not _storable_id(customer_id):
            return False
        return self._count("SELECT count(id) FROM customer WHERE id = ?", customer_id) > 0

    def insert_customer(self, customer: CustomerCreate) -> None:
        conn = get_connection(self.db_path)
        try:
            cursor = conn.execute(
                "INSERT INTO customer (name, email, age, gender) VALUES (?, ?, ?, ?)",
                (
                    customer.name,
                    customer.email,
                    customer.age,
                    customer.gender.value if customer.gender else None,
                ),
            )
            conn.commit()
            logger.debug("insert customer id=%s", cursor.lastrowid)
        finally:
            conn.close()

    def update_customer(self, customer_id: int, changes: dict) -> None:
        """Write the changed columns of one customer in a single statement.

        ``changes`` maps column names to new values.  Only ``name``,
        ``email`` and ``age`` may be updated; an empty mapping issues no
        statement, as does an id outside the SQLite integer range.
        """
        unknown = set(changes) - set(UPDATABLE_COLUMNS)
        if unknown:
            raise ValueError(f"cannot update customer columns: {sorted(unknown)}")
        columns = [column for column in UPDATABLE_COLUMNS if column in changes]
        if not columns or not _storable_id(customer_id):
            return
        # Column names come from UPDATABLE_COLUMNS, never from the caller.
        assignments = ", ".join(f"{column} = ?" for column in columns)
        params = [changes[column] for column in columns] + [customer_id]
        conn = get_connection(self.db_path)
        try:
            cursor = conn.execute(
                f"UPDATE customer SET {assignments} WHERE id = ?", params
            )
            conn.commit()
            logger.debug("update customer id=%s columns=%s rows=%s", customer_id, columns, cursor.rowcount)
        finally:
            conn.close()

    def delete_customer_by_id(self, customer_id: int) -> None:
        if not _storable_id(customer_id):
            return
        conn = get_connection(self.db_path)
        try:
            cursor = conn.execute("DELETE FROM customer WHERE id = ?", (customer_id,))
            conn.commit()
            logger.debug("delete customer id=%s rows=%s", customer_id, cursor.rowcount)
        finally:
            conn.close()

    def _count(self, sql: str, value) -> int:
        conn = get_connection(self.db_path)
        try:
            return conn.execute(sql, (value,)).fetchone()[0]
        finally:
            conn.close()

    @staticmethod
    def _row_to_customer(row: sqlite3.Row) -> CustomerRead:
        """Convert a database row to a CustomerRead schema instance."""
        return CustomerRead(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            age=row["age"],
            gender=row["gender"],
        )
