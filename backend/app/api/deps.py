from __future__ import annotations

from fastapi import Request

from app.crud.contact_submission import SubmissionStore


def get_store(request: Request) -> SubmissionStore:
    return request.app.state.store
