"""
Data access for employees of the directory variant.

``EmployeeService`` performs single-row create/read/update/delete
operations against the ``employees`` table.  The database path is
passed in at construction time; every operation opens its own
connection and runs as one transaction.

All queries use parameterized statements.  A missing row is reported
by raising ``NotFoundError``.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import List

from employee_api.app.core.db import fits_integer_column, get_cursor
from employee_api.app.core.errors import NotFoundError
from employee_api.app.services.mapper import EmployeeRecord, row_to_record

logger = logging.getLogger(__name__)


class EmployeeService:
    """Service class for managing employees."""

    def __init__(self, db_path: str) -> None:
        self.db_path = db_path

    async def create(self, record: EmployeeRecord) -> EmployeeRecord:
        """Insert a new employee and return it with its assigned ``id``.

        Any ``id`` already set on ``record`` is ignored.
        """
        with get_cursor(self.db_path) as cursor:
            cursor.execute(
                "INSERT INTO employees (name, email, department) VALUES (?, ?, ?)",
                (record.name, record.email, record.department),
            )
            employee_id = cursor.lastrowid
        logger.info("Created employee %s", employee_id)
        return replace(record, id=employee_id)

    async def get_by_id(self, employee_id: int) -> EmployeeRecord:
        self._ensure_storable(employee_id)
        with get_cursor(self.db_path) as cursor:
            row = cursor.execute(
                "SELECT id, name, email, department FROM employees WHERE id = ?",
                (employee_id,),
            ).fetchone()
        if row is None:
            logger.warning("Employee %s not found", employee_id)
            raise NotFoundError("Employee", employee_id)
        return row_to_record(row)

    async def list_all(self) -> List[EmployeeRecord]:
        """Return every employee in store order."""
        with get_cursor(self.db_path) as cursor:
            rows = cursor.execute(
                "SELECT id, name, email, department FROM employees ORDER BY id"
            ).fetchall()
        return [row_to_record(row) for row in rows]

    async def update(self, employee_id: int, record: EmployeeRecord) -> EmployeeRecord:
        """Overwrite every mutable field of an existing employee.

        There are no partial updates: ``name``, ``email`` and
        ``department`` all take the values from ``record``.  The
        identifier is preserved.
        """
        self._ensure_storable(employee_id)
        with get_cursor(self.db_path) as cursor:
            cursor.execute(
                "UPDATE employees SET name = ?, email = ?, department = ? WHERE id = ?",
                (record.name, record.email, record.department, employee_id),
            )
            if cursor.rowcount == 0:
                logger.warning("Employee %s not found", employee_id)
                raise NotFoundError("Employee", employee_id)
        logger.info("Updated employee %s", employee_id)
        return replace(record, id=employee_id)

    async def delete(self, employee_id: int) -> None:
        self._ensure_storable(employee_id)
        with get_cursor(self.db_path) as cursor:
            cursor.execute("DELETE FROM employees WHERE id = ?", (employee_id,))
            if cursor.rowcount == 0:
                logger.warning("Employee %s not found", employee_id)
                raise NotFoundError("Employee", employee_id)
        logger.info("Deleted employee %s", employee_id)

    @staticmethod
    def _ensure_storable(employee_id: int) -> None:
        # No row can carry an id outside the INTEGER range.
        if not fits_integer_column(employee_id):
            logger.warning("Employee %s not found", employee_id)
            raise NotFoundError("Employee", employee_id)
