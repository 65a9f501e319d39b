"""Maps domain exceptions onto HTTP status codes and envelope bodies."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from cms.application.schemas import ApiResponse
from cms.domain.exceptions import (
    CmsError,
    DuplicateEntityError,
    EntityNotFoundError,
    HttpError,
    InvalidCredentialsError,
    NetworkError,
    NotAuthenticatedError,
    PermissionDeniedError,
)

logger = logging.getLogger(__name__)

# First match wins: subclasses before their bases.
_STATUS_CODES: list[tuple[type[CmsError], int]] = [
    (InvalidCredentialsError, 401),
    (NotAuthenticatedError, 401),
    (PermissionDeniedError, 403),
    (EntityNotFoundError, 404),
    (DuplicateEntityError, 409),
    (HttpError, 502),
    (NetworkError, 502),
]


def status_for(exc: CmsError) -> int:
    for error_type, status_code in _STATUS_CODES:
        if isinstance(exc, error_type):
            return status_code
    return 400


async def cms_error_handler(request: Request, exc: CmsError) -> JSONResponse:
    status_code = status_for(exc)
    logger.info("%s %s → %d: %s", request.method, request.url.path, status_code, exc.message)
    return JSONResponse(
        status_code=status_code,
        content=ApiResponse.fail(exc).model_dump(exclude_none=True),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render request validation failures as a 422 envelope.

    ``message`` is the first error; ``error`` lists every error as ``loc: msg``.
    """
    errors = exc.errors()
    details = [
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg', '')}"
        for err in errors
    ]
    message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
    logger.info("%s %s → 422: %s", request.method, request.url.path, message)
    envelope = ApiResponse(success=False, message=message, error="; ".join(details) or None)
    return JSONResponse(status_code=422, content=envelope.model_dump(exclude_none=True))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CmsError, cms_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
