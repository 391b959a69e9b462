import io

import pytest
import pytesseract
from PIL import Image

from profilescan.core.errors import OcrFailure, OcrTimeout
from profilescan.infra.ocr.google_vision import to_vision_language_hints
from profilescan.infra.ocr.mock import DEFAULT_MOCK_TEXT, MockOCR
from profilescan.infra.ocr.tesseract import TesseractOCR


def _png_bytes() -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", (32, 16), "white").save(buffer, format="PNG")
    return buffer.getvalue()


def test_mock_ocr_returns_canned_text():
    assert MockOCR().recognize(b"img-bytes", lang="eng") == DEFAULT_MOCK_TEXT
    assert MockOCR("custom").recognize(b"", lang="eng") == "custom"


def test_tesseract_passes_language_and_timeout(monkeypatch):
    seen = {}

    def fake_image_to_string(image, lang=None, timeout=0, **kwargs):
        seen["size"] = image.size
        seen["lang"] = lang
        seen["timeout"] = timeout
        return "Jane Doe\n"

    monkeypatch.setattr(pytesseract, "image_to_string", fake_image_to_string)

    text = TesseractOCR(timeout_seconds=7).recognize(_png_bytes(), lang="eng")

    assert text == "Jane Doe\n"
    assert seen == {"size": (32, 16), "lang": "eng", "timeout": 7.0}


def test_tesseract_rejects_undecodable_bytes(monkeypatch):
    monkeypatch.setattr(pytesseract, "image_to_string", lambda *a, **k: pytest.fail("engine called"))

    with pytest.raises(OcrFailure) as excinfo:
        TesseractOCR().recognize(b"definitely not an image", lang="eng")

    assert excinfo.value.message == "Could not decode image"
    assert excinfo.value.details


def test_tesseract_process_timeout_maps_to_ocr_timeout(monkeypatch):
    def fake_image_to_string(*args, **kwargs):
        raise RuntimeError("Tesseract process timeout")

    monkeypatch.setattr(pytesseract, "image_to_string", fake_image_to_string)

    with pytest.raises(OcrTimeout) as excinfo:
        TesseractOCR(timeout_seconds=3).recognize(_png_bytes(), lang="eng")

    assert excinfo.value.timeout_seconds == 3.0
    assert excinfo.value.status_code == 500


def test_tesseract_engine_errors_map_to_ocr_failure(monkeypatch):
    def missing_binary(*args, **kwargs):
        raise pytesseract.TesseractNotFoundError()

    monkeypatch.setattr(pytesseract, "image_to_string", missing_binary)
    with pytest.raises(OcrFailure) as excinfo:
        TesseractOCR().recognize(_png_bytes(), lang="eng")
    assert "not installed" in excinfo.value.message

    def bad_language(*args, **kwargs):
        raise pytesseract.TesseractError(1, "Failed loading language 'xxx'")

    monkeypatch.setattr(pytesseract, "image_to_string", bad_language)
    with pytest.raises(OcrFailure) as excinfo:
        TesseractOCR().recognize(_png_bytes(), lang="xxx")
    assert excinfo.value.details == "Failed loading language 'xxx'"


def test_vision_language_hints():
    assert to_vision_language_hints("eng") == ["en"]
    assert to_vision_language_hints("eng+hin") == ["en", "hi"]
    assert to_vision_language_hints("eng, fra") == ["en", "fra"]
    assert to_vision_language_hints("") == []
