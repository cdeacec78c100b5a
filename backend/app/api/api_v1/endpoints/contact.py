"""Contact form submissions from the landing site."""

from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.api.deps import get_store
from app.core.logging import get_logger
from app.crud.contact_submission import SubmissionStore
from app.schemas.contact import ContactCreated, ContactList, ContactOut, ErrorResponse, FieldError
from app.services.validation import ContactValidationError, validate_contact

logger = get_logger(__name__)

router = APIRouter(tags=["contact"])

_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}


def render(model: BaseModel, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=model.model_dump(mode="json", by_alias=True, exclude_none=True),
    )


def error_response(
    status_code: int, error: str, details: Optional[list[FieldError]] = None
) -> JSONResponse:
    return render(ErrorResponse(error=error, details=details), status_code)


@router.post(
    "/contact",
    status_code=status.HTTP_201_CREATED,
    response_model=ContactCreated,
    responses=_ERROR_RESPONSES,
)
def submit_contact(
    payload: Any = Body(None),
    store: SubmissionStore = Depends(get_store),
) -> JSONResponse:
    try:
        contact_in = validate_contact(payload).unwrap()
        submission = store.create(contact_in)
    except ContactValidationError as e:
        logger.info("Rejected contact submission (fields: %s)", ", ".join(err.field for err in e.errors))
        return error_response(status.HTTP_400_BAD_REQUEST, "Validation failed", e.errors)
    except Exception:
        logger.exception("Failed to store contact submission")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to submit contact form")

    logger.info("Stored contact submission %s (%d held)", submission.id, len(store))
    return render(ContactCreated(data=ContactOut.model_validate(submission)), status.HTTP_201_CREATED)


@router.get(
    "/contact-submissions",
    response_model=ContactList,
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}},
)
def list_contact_submissions(store: SubmissionStore = Depends(get_store)) -> JSONResponse:
    try:
        submissions = store.list()
        body = ContactList(data=[ContactOut.model_validate(s) for s in submissions])
    except Exception:
        logger.exception("Failed to list contact submissions")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to fetch submissions")
    return render(body)
