from __future__ import annotations

import asyncio
import logging
from typing import Protocol

from profilescan.core.errors import InvalidType, MissingFile, OcrFailure, OcrTimeout, PayloadTooLarge, ProfileScanError
from profilescan.domain.extractor import extract_profile
from profilescan.domain.models import ProfileRecord, UploadedImage
from profilescan.infra.ports.ocr import OCRPort
from profilescan.utils.ids import new_public_id

logger = logging.getLogger(__name__)

_ALLOWED_MIME_PREFIX = "image/"


class UploadStream(Protocol):
    filename: str | None
    content_type: str | None
    size: int | None

    async def read(self, size: int = -1) -> bytes:
        ...


def _require_image_type(content_type: str | None) -> None:
    if not content_type or not content_type.lower().startswith(_ALLOWED_MIME_PREFIX):
        raise InvalidType()


def validate_upload(
    *,
    filename: str | None,
    content_type: str | None,
    payload: bytes | None,
    max_bytes: int,
) -> UploadedImage:
    """Intake checks, in order: presence, media type, size."""
    if payload is None:
        raise MissingFile()
    _require_image_type(content_type)
    if len(payload) > max_bytes:
        raise PayloadTooLarge(max_bytes)

    return UploadedImage(
        payload=payload,
        content_type=content_type,
        size=len(payload),
        filename=filename,
    )


async def read_upload(upload: UploadStream | None, *, max_bytes: int) -> UploadedImage:
    """Run intake on a form part without buffering more than ``max_bytes + 1`` bytes."""
    if upload is None:
        raise MissingFile()
    _require_image_type(upload.content_type)
    if upload.size is not None and upload.size > max_bytes:
        raise PayloadTooLarge(max_bytes)

    payload = await upload.read(max_bytes + 1)
    return validate_upload(
        filename=upload.filename,
        content_type=upload.content_type,
        payload=payload,
        max_bytes=max_bytes,
    )


class ProfileScanService:
    def __init__(self, *, ocr: OCRPort, ocr_lang: str = "eng", timeout_seconds: float = 20.0):
        self.ocr = ocr
        self.ocr_lang = ocr_lang
        self.timeout_seconds = timeout_seconds

    async def recognize(self, image: UploadedImage, *, scan_id: str | None = None) -> str:
        """Run one engine call off the event loop, bounded by the timeout."""
        try:
            return await asyncio.wait_for(
                asyncio.to_thread(self.ocr.recognize, image.payload, lang=self.ocr_lang),
                timeout=self.timeout_seconds,
            )
        except ProfileScanError:
            raise
        except (asyncio.TimeoutError, TimeoutError) as exc:
            raise OcrTimeout(self.timeout_seconds, details=str(exc) or None) from exc
        except Exception as exc:
            logger.exception("OCR engine %s crashed for %s", self.ocr.provider_name, scan_id)
            raise OcrFailure(details=str(exc) or exc.__class__.__name__) from exc

    async def scan(self, image: UploadedImage) -> ProfileRecord:
        scan_id = new_public_id("scan_")
        logger.info(
            "%s recognizing %s (%s, %d bytes) with %s",
            scan_id,
            image.filename or "<unnamed>",
            image.content_type,
            image.size,
            self.ocr.provider_name,
        )
        try:
            text = await self.recognize(image, scan_id=scan_id)
        except ProfileScanError as exc:
            logger.warning("%s failed (%s): %s %s", scan_id, exc.kind, exc.message, exc.details or "")
            raise

        profile = extract_profile(text)
        logger.info(
            "%s extracted profile from %d chars (name=%s)",
            scan_id,
            len(text),
            bool(profile.name),
        )
        return profile
