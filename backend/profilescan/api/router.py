from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request
from starlette.datastructures import UploadFile

from profilescan.api.dependencies import provide_max_upload_bytes, provide_scan_service
from profilescan.api.schemas.health import HealthResponse
from profilescan.api.schemas.profile import ErrorResponse, ProfileData, UploadResponse
from profilescan.application.services import ProfileScanService, read_upload
from profilescan.core.errors import InternalError, ProfileScanError

logger = logging.getLogger(__name__)

router = APIRouter()

_UPLOAD_FIELD = "screenshot"
_ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Upload rejected by intake validation"},
    500: {"model": ErrorResponse, "description": "Recognition failed"},
}
# The form is parsed by hand so that a non-file "screenshot" part counts as no upload.
_UPLOAD_REQUEST_BODY = {
    "requestBody": {
        "content": {
            "multipart/form-data": {
                "schema": {
                    "type": "object",
                    "properties": {_UPLOAD_FIELD: {"type": "string", "format": "binary"}},
                    "required": [_UPLOAD_FIELD],
                }
            }
        },
        "required": True,
    }
}


@router.get("/", response_model=HealthResponse, tags=["health"])
async def health() -> HealthResponse:
    return HealthResponse(status="healthy", timestamp=datetime.now(timezone.utc).isoformat())


# /api/upload is kept for clients built against the older path.
@router.post(
    "/upload",
    response_model=UploadResponse,
    responses=_ERROR_RESPONSES,
    openapi_extra=_UPLOAD_REQUEST_BODY,
    tags=["profile"],
)
@router.post(
    "/api/upload",
    response_model=UploadResponse,
    responses=_ERROR_RESPONSES,
    openapi_extra=_UPLOAD_REQUEST_BODY,
    tags=["profile"],
)
async def upload_screenshot(
    request: Request,
    service: ProfileScanService = Depends(provide_scan_service),
    max_upload_bytes: int = Depends(provide_max_upload_bytes),
) -> UploadResponse:
    async with request.form() as form:
        part = form.get(_UPLOAD_FIELD)
        upload = part if isinstance(part, UploadFile) else None
        image = await read_upload(upload, max_bytes=max_upload_bytes)

    try:
        profile = await service.scan(image)
    except ProfileScanError:
        raise
    except Exception as exc:
        logger.exception("Scan of %s crashed", image.filename or "<unnamed>")
        raise InternalError() from exc
    return UploadResponse(success=True, data=ProfileData.from_record(profile))
