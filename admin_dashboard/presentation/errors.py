"""
Exception handlers for FastAPI applications.

Maps domain errors that reach the HTTP boundary onto status codes, using the
same envelope as authorization rejections:

    {"error": {"code", "message", "details"}, "meta": {"request_id"}}

UnauthorizedError raised inside a route body maps to 403, matching the
rejections produced by route authorization.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from admin_dashboard.domain.exceptions import (
    ConflictError,
    DomainException,
    InvalidOperationError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)

logger = logging.getLogger(__name__)

STATUS_BY_EXCEPTION: dict[type[DomainException], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    UnauthorizedError: status.HTTP_403_FORBIDDEN,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ConflictError: status.HTTP_409_CONFLICT,
    InvalidOperationError: status.HTTP_409_CONFLICT,
}


async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    """
    Handle domain exceptions.

    Converts a DomainException to an HTTP response with the consistent
    error envelope.
    """
    status_code = STATUS_BY_EXCEPTION.get(type(exc), status.HTTP_400_BAD_REQUEST)

    logger.warning(
        f"Domain exception: {exc.code} - {exc.message} "
        f"(request_id={getattr(request.state, 'request_id', 'unknown')})"
    )

    details = {}
    if isinstance(exc, NotFoundError):
        details = {"entity": exc.entity_name, "identifier": str(exc.identifier)}

    return JSONResponse(
        status_code=status_code,
        content={
            "error": {
                "code": exc.code,
                "message": exc.message,
                "details": details,
            },
            "meta": {
                "request_id": getattr(request.state, "request_id", None),
            },
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register the domain exception handlers on an application."""
    for exception_class in STATUS_BY_EXCEPTION:
        app.add_exception_handler(exception_class, domain_exception_handler)
