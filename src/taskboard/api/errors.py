"""
Mapping from application and validation errors to HTTP responses.
"""

import logging
from typing import Any, Dict, List

from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from taskboard.core.exceptions import (
    ApplicationException,
    ConflictException,
    DatabaseException,
    NotFoundException,
)

logger = logging.getLogger("API_ERRORS")


ERROR_STATUS = [
    (NotFoundException, status.HTTP_404_NOT_FOUND, "NOT_FOUND"),
    (ConflictException, status.HTTP_409_CONFLICT, "CONFLICT"),
    (DatabaseException, status.HTTP_500_INTERNAL_SERVER_ERROR, "DATABASE_ERROR"),
]


def classify(exc: ApplicationException):
    """Return ``(status_code, error_code)`` for an application exception."""
    for exc_type, status_code, error_code in ERROR_STATUS:
        if isinstance(exc, exc_type):
            return status_code, error_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR, "INTERNAL_ERROR"


def to_http_exception(exc: ApplicationException) -> HTTPException:
    status_code, _ = classify(exc)
    if status_code >= 500:
        logger.error(f"{exc.__class__.__name__}: {exc.message}", exc_info=exc)
    return HTTPException(status_code=status_code, detail=exc.message)


def validation_error_details(errors) -> List[Dict[str, Any]]:
    """
    Pydantic error entries without the rejected ``input``.

    The input is left out because it may not be JSON-encodable (``1e999``
    decodes to infinity).
    """
    return [{"loc": list(err["loc"]), "msg": err["msg"], "type": err["type"]} for err in errors]


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": validation_error_details(exc.errors())},
    )
