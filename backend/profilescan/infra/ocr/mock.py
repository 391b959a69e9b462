from __future__ import annotations

from profilescan.infra.ports.ocr import OCRPort

DEFAULT_MOCK_TEXT = "\n".join(
    [
        "[mock] Profile Name",
        "[mock] bio line",
        "120 Followers",
        "80 Following",
        "Mumbai, India",
    ]
)


class MockOCR(OCRPort):
    provider_name = "mock"

    def __init__(self, text: str = DEFAULT_MOCK_TEXT):
        self.text = text

    def recognize(self, image_bytes: bytes, *, lang: str) -> str:
        return self.text
