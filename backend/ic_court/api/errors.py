"""
Translation of domain and request-validation errors into JSON responses.

Every error body has the shape {"error", "message", "status_code"};
validation failures add "details", one entry per offending field.
Unclassified storage errors are not handled here and surface as 500s
after the service layer has logged them.
"""
from typing import Any, Dict, List, Optional
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ic_court.core.exceptions import CourtError, DuplicateError, NotFoundError, PermissionDeniedError

logger = logging.getLogger(__name__)

VALIDATION_ERROR = "validation_error"

STATUS_CODES = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    DuplicateError: status.HTTP_409_CONFLICT,
    PermissionDeniedError: status.HTTP_403_FORBIDDEN,
}

# Request locations that prefix a field path but are not part of it
REQUEST_PARTS = {"body", "query", "path"}


def build_error_body(error: str, message: str, status_code: int,
                     details: Optional[List[Dict[str, Any]]] = None) -> Dict[str, Any]:
    body = {"error": error, "message": message, "status_code": status_code}
    if details is not None:
        body["details"] = details
    return body


def error_response(exc: CourtError) -> JSONResponse:
    status_code = STATUS_CODES.get(type(exc), status.HTTP_400_BAD_REQUEST)
    return JSONResponse(
        status_code=status_code,
        content=build_error_body(exc.code, str(exc), status_code),
    )


def field_path(loc) -> Optional[str]:
    """("body", "attendees", 0) -> "attendees.0"; None when the error is on the whole payload."""
    parts = [str(part) for part in loc]
    if parts and parts[0] in REQUEST_PARTS:
        parts = parts[1:]
    return ".".join(parts) or None


def validation_error_response(exc: RequestValidationError) -> JSONResponse:
    details = [
        {"field": field_path(error.get("loc", ())), "message": error.get("msg", "Invalid value")}
        for error in exc.errors()
    ]
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    return JSONResponse(
        status_code=status_code,
        content=build_error_body(VALIDATION_ERROR, "Request validation failed", status_code, details),
    )


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(CourtError)
    async def court_error_handler(request: Request, exc: CourtError) -> JSONResponse:
        logger.info("%s %s -> %s: %s", request.method, request.url.path, exc.code, exc)
        return error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.info("%s %s -> %s: %d invalid field(s)",
                    request.method, request.url.path, VALIDATION_ERROR, len(exc.errors()))
        return validation_error_response(exc)
