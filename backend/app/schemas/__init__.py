from __future__ import annotations

from app.schemas.contact import (
    ContactCreate,
    ContactCreated,
    ContactList,
    ContactOut,
    ErrorResponse,
    FieldError,
)

__all__ = [
    "ContactCreate",
    "ContactOut",
    "ContactCreated",
    "ContactList",
    "FieldError",
    "ErrorResponse",
]
