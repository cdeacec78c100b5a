from __future__ import annotations

from datetime import datetime
from typing import Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, Field, field_validator


class ContactCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = Field(min_length=1, max_length=100)
    email: str
    company: Optional[str] = Field(default=None, max_length=100)
    message: str = Field(min_length=10, max_length=1000)

    # Syntax check only; the address is kept exactly as typed.
    @field_validator("email")
    @classmethod
    def check_email(cls, value: str) -> str:
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError as e:
            raise ValueError(str(e)) from e
        return value


class ContactOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    email: str
    company: Optional[str] = None
    message: str
    submitted_at: datetime = Field(serialization_alias="submittedAt")


class FieldError(BaseModel):
    field: str
    message: str
    code: str


class ContactCreated(BaseModel):
    success: bool = True
    data: ContactOut


class ContactList(BaseModel):
    success: bool = True
    data: list[ContactOut]


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
    details: Optional[list[FieldError]] = None
