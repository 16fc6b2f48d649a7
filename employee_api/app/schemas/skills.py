"""
Pydantic models for the skills variant.

In this deployment an employee has no department; instead it may own
a single skills record holding a free-text description.  The skills
record is part of the employee payload: it is created, replaced and
deleted together with its owner, so there is no separate skills
resource.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator

from .validation import (
    FieldViolation,
    collect_violations,
    email_address,
    parse_payload,
    required_text,
)


class SkillsCreate(BaseModel):
    """Skills as sent by clients.  ``id`` is ignored if present."""

    skills: Optional[str] = Field(None, examples=["Java, Spring Boot"])

    @field_validator("skills", mode="before")
    @classmethod
    def validate_skills(cls, v: Any) -> Optional[str]:
        if v is not None and not isinstance(v, str):
            raise ValueError("Skills must be a string")
        return v


class SkillsRead(BaseModel):
    id: int
    skills: Optional[str] = None

    model_config = {
        "from_attributes": True,
    }


class SkilledEmployeeCreate(BaseModel):
    """Schema for creating or replacing an employee with skills."""

    name: str = Field(..., examples=["Pavan"])
    email: str = Field(..., examples=["pavan@example.com"])
    skills: Optional[SkillsCreate] = None

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, v: Any) -> str:
        return required_text(v, "Name", 2, 50)

    @field_validator("email", mode="before")
    @classmethod
    def validate_email(cls, v: Any) -> str:
        return email_address(v)


class SkilledEmployeeRead(BaseModel):
    """Schema for reading an employee with skills from the API."""

    id: int
    name: str
    email: str
    skills: Optional[SkillsRead] = None

    model_config = {
        "from_attributes": True,
    }


def validate_skilled_employee(payload: Any) -> List[FieldViolation]:
    """Return the field violations of ``payload``; empty when valid."""
    return collect_violations(SkilledEmployeeCreate, payload)


def parse_skilled_employee(payload: Any) -> SkilledEmployeeCreate:
    """Validate ``payload`` or raise ``ValidationError``."""
    return parse_payload(SkilledEmployeeCreate, payload)
