"""
Pydantic models for employee data (directory variant).

``EmployeeFields`` declares the shared fields; ``EmployeeCreate``
adds the field rules enforced on inbound payloads, and
``EmployeeRead`` extends the fields with the store-assigned ``id``
for responses.  Rules live only on the inbound schema: records read
back from the store are not re-checked.
"""

from typing import Any, List

from pydantic import BaseModel, Field, field_validator

from .validation import (
    FieldViolation,
    collect_violations,
    email_address,
    parse_payload,
    required_text,
)


class EmployeeFields(BaseModel):
    name: str = Field(..., examples=["Ann Smith"])
    email: str = Field(..., examples=["ann@example.com"])
    department: str = Field(..., examples=["Engineering"])


class EmployeeCreate(EmployeeFields):
    """Schema for creating or replacing an employee.

    Any ``id`` in the payload is ignored; identifiers are assigned by
    the store.
    """

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, v: Any) -> str:
        return required_text(v, "Name", 2, 50)

    @field_validator("email", mode="before")
    @classmethod
    def validate_email(cls, v: Any) -> str:
        return email_address(v)

    @field_validator("department", mode="before")
    @classmethod
    def validate_department(cls, v: Any) -> str:
        return required_text(v, "Department", 2, 30)


class EmployeeRead(EmployeeFields):
    """Schema for reading an employee from the API."""

    id: int

    model_config = {
        "from_attributes": True,
    }


def validate_employee(payload: Any) -> List[FieldViolation]:
    """Return the field violations of ``payload``; empty when valid."""
    return collect_violations(EmployeeCreate, payload)


def parse_employee(payload: Any) -> EmployeeCreate:
    """Validate ``payload`` or raise ``ValidationError``."""
    return parse_payload(EmployeeCreate, payload)
