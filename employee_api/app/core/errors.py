"""
Domain errors raised by the service and validation layers.

The API layer translates these into HTTP responses through the
exception handlers registered in ``main.create_app``:
``NotFoundError`` becomes 404 and ``ValidationError`` becomes 422.
"""

from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from ..schemas.validation import FieldViolation


class EmployeeApiError(Exception):
    """Base class for errors surfaced by the employee API."""


class NotFoundError(EmployeeApiError):
    """Raised when an operation references an identifier with no row."""

    def __init__(self, object_type: str, object_id: int) -> None:
        self.object_type = object_type
        self.object_id = object_id
        super().__init__(f"{object_type} not found with ID: {object_id}")


class ValidationError(EmployeeApiError):
    """Raised when an inbound payload violates the transfer schema.

    ``violations`` holds one ``FieldViolation`` per offending field.
    """

    def __init__(self, violations: List["FieldViolation"]) -> None:
        self.violations = violations
        fields = ", ".join(v.field for v in violations)
        super().__init__(f"Validation failed for: {fields}")
