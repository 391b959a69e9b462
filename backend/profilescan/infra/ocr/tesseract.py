from __future__ import annotations

import io
import logging

import pytesseract
from PIL import Image, UnidentifiedImageError

from profilescan.core.errors import OcrFailure, OcrTimeout
from profilescan.infra.ports.ocr import OCRPort

logger = logging.getLogger(__name__)


class TesseractOCR(OCRPort):
    """Local Tesseract engine fed from an in-memory buffer."""

    provider_name = "tesseract"

    def __init__(self, *, tesseract_cmd: str | None = None, timeout_seconds: float = 20.0):
        if tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = tesseract_cmd
        self.timeout_seconds = max(1.0, float(timeout_seconds))

    def recognize(self, image_bytes: bytes, *, lang: str) -> str:
        try:
            with Image.open(io.BytesIO(image_bytes)) as image:
                text = pytesseract.image_to_string(image, lang=lang, timeout=self.timeout_seconds)
        except UnidentifiedImageError as exc:
            raise OcrFailure("Could not decode image", details=str(exc)) from exc
        except pytesseract.TesseractNotFoundError as exc:
            raise OcrFailure("Tesseract is not installed or it's not in PATH", details=str(exc)) from exc
        except pytesseract.TesseractError as exc:
            raise OcrFailure(details=str(exc.message or exc)) from exc
        except RuntimeError as exc:
            # pytesseract kills the subprocess and raises a bare RuntimeError on timeout.
            if "timeout" in str(exc).lower():
                raise OcrTimeout(self.timeout_seconds, details=str(exc)) from exc
            raise OcrFailure(details=str(exc)) from exc

        logger.debug("Tesseract recognized %d chars (lang=%s)", len(text or ""), lang)
        return text or ""
