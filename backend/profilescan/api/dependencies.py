from __future__ import annotations

from functools import lru_cache

from profilescan.application.services import ProfileScanService
from profilescan.core.config import get_settings
from profilescan.infra.ocr.mock import MockOCR
from profilescan.infra.ports.ocr import OCRPort


@lru_cache(maxsize=1)
def get_ocr() -> OCRPort:
    settings = get_settings()
    if settings.ocr_backend == "vision":
        from profilescan.infra.ocr.google_vision import GoogleVisionOCR

        try:
            return GoogleVisionOCR(timeout_seconds=settings.ocr_timeout_seconds)
        except Exception as exc:
            raise RuntimeError(
                "Failed to initialize Vision OCR. Check GOOGLE_APPLICATION_CREDENTIALS "
                "and verify the service account has Vision API access."
            ) from exc
    if settings.ocr_backend == "tesseract":
        from profilescan.infra.ocr.tesseract import TesseractOCR

        return TesseractOCR(
            tesseract_cmd=settings.tesseract_cmd,
            timeout_seconds=settings.ocr_timeout_seconds,
        )
    return MockOCR()


def get_scan_service() -> ProfileScanService:
    settings = get_settings()
    return ProfileScanService(
        ocr=get_ocr(),
        ocr_lang=settings.ocr_lang,
        timeout_seconds=settings.ocr_timeout_seconds,
    )


async def provide_scan_service() -> ProfileScanService:
    return get_scan_service()


async def provide_max_upload_bytes() -> int:
    return get_settings().max_upload_bytes
