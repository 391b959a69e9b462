from __future__ import annotations

from typing import Any

from profilescan.core.errors import OcrFailure, OcrTimeout
from profilescan.infra.ports.ocr import OCRPort

_LANG_HINT_MAP = {
    "eng": "en",
    "hin": "hi",
    "kor": "ko",
    "jpn": "ja",
    "chi_sim": "zh-CN",
    "chi_tra": "zh-TW",
}


def to_vision_language_hints(ocr_lang: str) -> list[str]:
    # Tesseract style: "eng+hin" -> Vision style hints: ["en", "hi"]
    hints: list[str] = []
    for item in (ocr_lang or "").replace(",", "+").split("+"):
        key = item.strip().lower()
        if not key:
            continue
        hints.append(_LANG_HINT_MAP.get(key, key))
    return hints


class GoogleVisionOCR(OCRPort):
    provider_name = "google_vision"

    def __init__(self, *, timeout_seconds: float = 20.0):
        try:
            from google.api_core import exceptions as api_exceptions  # type: ignore
            from google.cloud import vision  # type: ignore
        except ImportError as exc:  # pragma: no cover
            raise RuntimeError("google-cloud-vision package is not installed") from exc

        self._vision = vision
        self._api_exceptions = api_exceptions
        self._client = vision.ImageAnnotatorClient()
        self.timeout_seconds = max(1.0, float(timeout_seconds))

    def recognize(self, image_bytes: bytes, *, lang: str) -> str:
        image = self._vision.Image(content=image_bytes)
        kwargs: dict[str, Any] = {"image": image, "timeout": self.timeout_seconds}
        hints = to_vision_language_hints(lang)
        if hints:
            kwargs["image_context"] = self._vision.ImageContext(language_hints=hints)

        try:
            response = self._client.document_text_detection(**kwargs)
        except self._api_exceptions.DeadlineExceeded as exc:
            raise OcrTimeout(self.timeout_seconds, details=str(exc)) from exc
        except self._api_exceptions.GoogleAPIError as exc:
            raise OcrFailure(details=str(exc)) from exc

        if getattr(response, "error", None) and response.error.message:
            raise OcrFailure(details=f"Google Vision OCR error: {response.error.message}")

        annotation = response.full_text_annotation
        return (annotation.text or "") if annotation else ""
