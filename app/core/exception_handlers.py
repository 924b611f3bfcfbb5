"""Exception handlers for the FastAPI app.

Every error body has the shape of ApiTokenServiceException.to_dict():
{"error": <code>, "message": <text>, "details": {...}}. Register once with
register_exception_handlers(app).
"""

import logging
from http import HTTPStatus
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import get_settings
from app.domain.exceptions import ApiTokenServiceException

logger = logging.getLogger(__name__)

_ERROR_CODE_STATUS: dict[str, int] = {
    "RESOURCE_NOT_FOUND": 404,
    "VALIDATION_ERROR": 400,
    "INVALID_PERMISSIONS": 400,
    "MISSING_PERMISSIONS": 400,
    "PERSISTENCE_ERROR": 409,
    "CONFIGURATION_ERROR": 500,
    "SQL_NOT_CONFIGURED": 503,
}


def _error_body(error: str, message: str, details: dict[str, Any] | None = None) -> dict:
    return {"error": error, "message": message, "details": details or {}}


def _domain_exception_handler(
    request: Request, exc: ApiTokenServiceException
) -> JSONResponse:
    """Status from the error code; unknown codes are client errors (400)."""
    status = _ERROR_CODE_STATUS.get(exc.error_code, 400)
    if status >= 500:
        logger.error(
            "%s %s failed: %s (%s)",
            request.method,
            request.url.path,
            exc.error_code,
            exc.message,
        )
    elif status == 409:
        logger.info("%s %s conflict: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=status, content=exc.to_dict())


def _request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """422 with one message per offending body/path field, keyed by field name."""
    fields: dict[str, str] = {}
    for error in exc.errors():
        loc = [
            str(part)
            for part in error.get("loc", ())
            if part not in ("body", "path", "query")
        ]
        fields.setdefault(".".join(loc) or "body", error.get("msg", "invalid"))
    return JSONResponse(
        status_code=422,
        content=_error_body(
            "VALIDATION_ERROR",
            f"Invalid API token request: {', '.join(sorted(fields))}",
            {"fields": fields},
        ),
    )


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Framework HTTP errors (unknown route, wrong method) as NOT_FOUND / METHOD_NOT_ALLOWED etc."""
    try:
        error = HTTPStatus(exc.status_code).name
    except ValueError:
        error = "HTTP_ERROR"
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(error, str(exc.detail), {"path": request.url.path}),
        headers=getattr(exc, "headers", None),
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """500; the exception text is only exposed when debug is on."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    message = str(exc) if get_settings().debug else "Internal server error"
    return JSONResponse(status_code=500, content=_error_body("INTERNAL_ERROR", message))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiTokenServiceException, _domain_exception_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
