from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response

from app.api.api_v1 import api_router
from app.api.api_v1.endpoints.contact import error_response
from app.core.config import settings
from app.core.logging import get_logger, setup_logging
from app.crud.contact_submission import SubmissionStore
from app.services.validation import field_errors

logger = get_logger(__name__)


def cors_headers(
    origin: Optional[str], request_headers: Optional[str], allowed: Sequence[str]
) -> dict[str, str]:
    """Headers to add for a browser request from ``origin``; empty when refused."""
    if "*" in allowed:
        allow_origin = origin or "*"
    elif origin and origin in allowed:
        allow_origin = origin
    else:
        return {}

    return {
        "Access-Control-Allow-Origin": allow_origin,
        "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
        "Access-Control-Allow-Headers": request_headers or "*",
        "Access-Control-Allow-Credentials": "false",
    }


def create_app(store: Optional[SubmissionStore] = None) -> FastAPI:
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(title=settings.PROJECT_NAME)
    app.state.store = store if store is not None else SubmissionStore()

    @app.middleware("http")
    async def cors_middleware(request: Request, call_next):
        if request.method == "OPTIONS":
            response = Response(status_code=200)
        else:
            response = await call_next(request)

        response.headers.update(
            cors_headers(
                request.headers.get("origin"),
                request.headers.get("Access-Control-Request-Headers"),
                settings.CORS_ORIGINS,
            )
        )
        return response

    # Malformed JSON never reaches the validator; answer in the same envelope.
    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.info("Rejected malformed request to %s", request.url.path)
        return error_response(status.HTTP_400_BAD_REQUEST, "Validation failed", field_errors(exc.errors()))

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    app.include_router(api_router, prefix=settings.API_V1_STR)

    return app


app = create_app()
