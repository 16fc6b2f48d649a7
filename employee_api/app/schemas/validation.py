"""
Explicit validation of inbound payloads.

The transfer schemas in this package carry their field rules as
pydantic validators.  The helpers here run a schema against a raw
payload and turn every failure into a ``FieldViolation`` so that
callers receive a flat, structured list instead of pydantic's error
format.  ``parse_payload`` is what the routing layer uses: it returns
the validated model or raises ``ValidationError`` before any service
is reached.
"""

from typing import Any, List, Optional, Type, TypeVar

import pydantic
from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel

from ..core.errors import ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


class FieldViolation(BaseModel):
    """A single rejected field and the reason it was rejected."""

    field: str
    message: str


def required_text(
    value: Any,
    label: str,
    min_length: Optional[int] = None,
    max_length: Optional[int] = None,
) -> str:
    """Check that ``value`` is non-blank text within the length bounds."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValueError(f"{label} is required")
    if not isinstance(value, str):
        raise ValueError(f"{label} must be a string")
    if min_length is not None and max_length is not None:
        if not min_length <= len(value) <= max_length:
            raise ValueError(
                f"{label} must be between {min_length} and {max_length} characters"
            )
    return value


def email_address(value: Any, label: str = "Email") -> str:
    """Check that ``value`` is a non-blank, well-formed email address.

    The address is returned as given; normalisation is left to the
    client so that what is stored is exactly what was sent.
    """
    value = required_text(value, label)
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        raise ValueError("Invalid email format") from None
    return value


def violation_from_error(error: dict) -> FieldViolation:
    """Convert one pydantic or FastAPI error dict to a ``FieldViolation``."""
    loc = [str(part) for part in error.get("loc", ())]
    field = ".".join(loc) if loc else "body"
    if error.get("type") == "missing":
        label = loc[-1].replace("_", " ").capitalize() if loc else "Body"
        return FieldViolation(field=field, message=f"{label} is required")
    ctx = error.get("ctx") or {}
    if isinstance(ctx.get("error"), ValueError):
        return FieldViolation(field=field, message=str(ctx["error"]))
    return FieldViolation(field=field, message=error.get("msg", "Invalid value"))


def collect_violations(model: Type[BaseModel], payload: Any) -> List[FieldViolation]:
    """Validate ``payload`` against ``model`` and list every violation.

    An empty list means the payload is valid.
    """
    try:
        model.model_validate(payload)
    except pydantic.ValidationError as exc:
        return [violation_from_error(error) for error in exc.errors()]
    return []


def parse_payload(model: Type[ModelT], payload: Any) -> ModelT:
    """Return ``payload`` validated as ``model``.

    Raises
    ------
    ValidationError
        If any field is missing or malformed.
    """
    try:
        return model.model_validate(payload)
    except pydantic.ValidationError as exc:
        raise ValidationError(
            [violation_from_error(error) for error in exc.errors()]
        ) from None
