"""
Mapping between the transfer schemas and persisted records.

Records are plain dataclasses mirroring the table rows.  Every mapping
here is a field-for-field copy: converting a validated payload to a
record and back yields the same values, apart from the ``id`` which
only the store assigns.
"""

import sqlite3
from dataclasses import dataclass
from typing import Optional

from ..schemas.employee import EmployeeCreate, EmployeeRead
from ..schemas.skills import (
    SkilledEmployeeCreate,
    SkilledEmployeeRead,
    SkillsRead,
)


@dataclass
class EmployeeRecord:
    """Row of the ``employees`` table."""

    name: str
    email: str
    department: str
    id: Optional[int] = None


@dataclass
class SkillsRecord:
    """Row of the ``skills`` table."""

    skills: Optional[str]
    id: Optional[int] = None


@dataclass
class SkilledEmployeeRecord:
    """Row of the ``skilled_employees`` table with its owned skills."""

    name: str
    email: str
    skills: Optional[SkillsRecord] = None
    id: Optional[int] = None


def to_internal(data: EmployeeCreate, employee_id: Optional[int] = None) -> EmployeeRecord:
    return EmployeeRecord(
        id=employee_id,
        name=data.name,
        email=data.email,
        department=data.department,
    )


def to_external(record: EmployeeRecord) -> EmployeeRead:
    return EmployeeRead(
        id=record.id,
        name=record.name,
        email=record.email,
        department=record.department,
    )


def row_to_record(row: sqlite3.Row) -> EmployeeRecord:
    return EmployeeRecord(
        id=row["id"],
        name=row["name"],
        email=row["email"],
        department=row["department"],
    )


def skilled_to_internal(
    data: SkilledEmployeeCreate, employee_id: Optional[int] = None
) -> SkilledEmployeeRecord:
    skills = None
    if data.skills is not None:
        skills = SkillsRecord(skills=data.skills.skills)
    return SkilledEmployeeRecord(
        id=employee_id,
        name=data.name,
        email=data.email,
        skills=skills,
    )


def skilled_to_external(record: SkilledEmployeeRecord) -> SkilledEmployeeRead:
    skills = None
    if record.skills is not None:
        skills = SkillsRead(id=record.skills.id, skills=record.skills.skills)
    return SkilledEmployeeRead(
        id=record.id,
        name=record.name,
        email=record.email,
        skills=skills,
    )


def skilled_row_to_record(row: sqlite3.Row) -> SkilledEmployeeRecord:
    """Convert a ``skilled_employees`` row joined with ``skills``.

    The row must expose ``skills_id`` and ``skills`` columns; both are
    ``NULL`` when the employee owns no skills record.
    """
    skills = None
    if row["skills_id"] is not None:
        skills = SkillsRecord(id=row["skills_id"], skills=row["skills"])
    return SkilledEmployeeRecord(
        id=row["id"],
        name=row["name"],
        email=row["email"],
        skills=skills,
    )
