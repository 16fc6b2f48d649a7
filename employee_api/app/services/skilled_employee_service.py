"""
Data access for employees of the skills variant.

An employee in this deployment may own one row of the ``skills``
table, referenced by ``skilled_employees.skills_id``.  The skills row
has no life of its own: ``SkilledEmployeeService`` inserts, rewrites
and removes it in the same transaction as its owner.
"""

from __future__ import annotations

import logging
import sqlite3
from dataclasses import replace
from typing import List, Optional

from employee_api.app.core.db import fits_integer_column, get_cursor
from employee_api.app.core.errors import NotFoundError
from employee_api.app.services.mapper import (
    SkilledEmployeeRecord,
    SkillsRecord,
    skilled_row_to_record,
)

logger = logging.getLogger(__name__)

_SELECT_EMPLOYEE = """
    SELECT e.id, e.name, e.email, s.id AS skills_id, s.skills AS skills
    FROM skilled_employees e
    LEFT JOIN skills s ON s.id = e.skills_id
"""


class SkilledEmployeeService:
    """Service class for managing employees and their owned skills."""

    def __init__(self, db_path: str) -> None:
        self.db_path = db_path

    async def create(self, record: SkilledEmployeeRecord) -> SkilledEmployeeRecord:
        """Insert an employee, and its skills if any, in one transaction."""
        with get_cursor(self.db_path) as cursor:
            skills = self._insert_skills(cursor, record.skills)
            cursor.execute(
                "INSERT INTO skilled_employees (name, email, skills_id) VALUES (?, ?, ?)",
                (record.name, record.email, skills.id if skills else None),
            )
            employee_id = cursor.lastrowid
        logger.info("Created employee %s", employee_id)
        return replace(record, id=employee_id, skills=skills)

    async def get_by_id(self, employee_id: int) -> SkilledEmployeeRecord:
        with get_cursor(self.db_path) as cursor:
            row = self._fetch(cursor, employee_id)
        return skilled_row_to_record(row)

    async def list_all(self) -> List[SkilledEmployeeRecord]:
        with get_cursor(self.db_path) as cursor:
            rows = cursor.execute(_SELECT_EMPLOYEE + " ORDER BY e.id").fetchall()
        return [skilled_row_to_record(row) for row in rows]

    async def update(
        self, employee_id: int, record: SkilledEmployeeRecord
    ) -> SkilledEmployeeRecord:
        """Overwrite name, email and skills of an existing employee.

        The owned skills record is rewritten in place when both the
        stored employee and ``record`` have one, so its ``id`` is kept.
        It is created when only ``record`` has one and deleted when
        ``record`` has none.
        """
        with get_cursor(self.db_path) as cursor:
            current = self._fetch(cursor, employee_id)
            current_skills_id = current["skills_id"]

            skills: Optional[SkillsRecord]
            if record.skills is None:
                skills = None
            elif current_skills_id is not None:
                cursor.execute(
                    "UPDATE skills SET skills = ? WHERE id = ?",
                    (record.skills.skills, current_skills_id),
                )
                skills = replace(record.skills, id=current_skills_id)
            else:
                skills = self._insert_skills(cursor, record.skills)

            cursor.execute(
                "UPDATE skilled_employees SET name = ?, email = ?, skills_id = ? WHERE id = ?",
                (record.name, record.email, skills.id if skills else None, employee_id),
            )
            if record.skills is None and current_skills_id is not None:
                cursor.execute("DELETE FROM skills WHERE id = ?", (current_skills_id,))
        logger.info("Updated employee %s", employee_id)
        return replace(record, id=employee_id, skills=skills)

    async def delete(self, employee_id: int) -> None:
        """Delete an employee together with its owned skills record."""
        with get_cursor(self.db_path) as cursor:
            current = self._fetch(cursor, employee_id)
            cursor.execute("DELETE FROM skilled_employees WHERE id = ?", (employee_id,))
            if current["skills_id"] is not None:
                cursor.execute("DELETE FROM skills WHERE id = ?", (current["skills_id"],))
        logger.info("Deleted employee %s", employee_id)

    @staticmethod
    def _fetch(cursor: sqlite3.Cursor, employee_id: int) -> sqlite3.Row:
        row = None
        if fits_integer_column(employee_id):
            row = cursor.execute(
                _SELECT_EMPLOYEE + " WHERE e.id = ?", (employee_id,)
            ).fetchone()
        if row is None:
            logger.warning("Employee %s not found", employee_id)
            raise NotFoundError("Employee", employee_id)
        return row

    @staticmethod
    def _insert_skills(
        cursor: sqlite3.Cursor, skills: Optional[SkillsRecord]
    ) -> Optional[SkillsRecord]:
        if skills is None:
            return None
        cursor.execute("INSERT INTO skills (skills) VALUES (?)", (skills.skills,))
        return replace(skills, id=cursor.lastrowid)
