from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Optional

from pydantic import ValidationError

from app.schemas.contact import ContactCreate, FieldError

FIELDS = ("name", "email", "company", "message")

# Form copy shown next to the inputs on the site, keyed by (field, error type).
_MESSAGES = {
    ("name", "string_too_short"): "Name is required",
    ("email", "value_error"): "Invalid email address",
    ("message", "string_too_short"): "Message must be at least 10 characters",
}


class ContactValidationError(ValueError):
    def __init__(self, errors: list[FieldError]) -> None:
        super().__init__("Validation failed")
        self.errors = errors


@dataclass
class ValidationResult:
    value: Optional[ContactCreate] = None
    errors: list[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.value is not None and not self.errors

    def unwrap(self) -> ContactCreate:
        if self.value is None or self.errors:
            raise ContactValidationError(self.errors)
        return self.value


def _field_error(err: Mapping[str, Any]) -> FieldError:
    loc = tuple(err.get("loc") or ())
    if loc and loc[0] == "body":
        loc = loc[1:]
    name = loc[0] if loc and isinstance(loc[0], str) else "body"
    code = str(err.get("type", "value_error"))

    if code == "missing":
        message = f"{name.capitalize()} is required"
    else:
        message = _MESSAGES.get((name, code), str(err.get("msg", "Invalid value")))
    return FieldError(field=name, message=message, code=code)


def field_errors(errors: Sequence[Mapping[str, Any]]) -> list[FieldError]:
    """Map pydantic (or FastAPI request) error dicts to field errors."""
    return [_field_error(err) for err in errors]


def validate_contact(payload: Any) -> ValidationResult:
    """Check a raw contact form payload.

    Every field is checked, so a failed result lists all offending fields at
    once. On success only ``name``, ``email``, ``company`` and ``message`` are
    kept; anything else in the payload (including ``id`` or ``submittedAt``)
    is dropped.
    """
    if not isinstance(payload, Mapping):
        return ValidationResult(
            errors=[FieldError(field="body", message="Expected a JSON object", code="model_type")]
        )

    data = {k: payload[k] for k in FIELDS if k in payload}
    try:
        value = ContactCreate.model_validate(data)
    except ValidationError as e:
        return ValidationResult(errors=field_errors(e.errors()))
    return ValidationResult(value=value)
