from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from profilescan.api.schemas.profile import ErrorResponse
from profilescan.core.errors import InternalError, ProfileScanError

logger = logging.getLogger(__name__)


def _error_response(
    status_code: int,
    error: str,
    details: str | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    body = ErrorResponse(error=error, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True), headers=headers)


async def handle_profile_scan_error(request: Request, exc: ProfileScanError) -> JSONResponse:
    return _error_response(exc.status_code, exc.message, exc.details)


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    messages = [str(item.get("msg", "")) for item in exc.errors() if item.get("msg")]
    return _error_response(400, "Invalid request", "; ".join(messages) or None)


async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


# Last resort only: this runs in ServerErrorMiddleware, outside CORS, so routes
# convert their own unexpected errors to InternalError first.
async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    fallback = InternalError()
    return _error_response(fallback.status_code, fallback.message)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ProfileScanError, handle_profile_scan_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
