from __future__ import annotations

from abc import ABC, abstractmethod


class OCRPort(ABC):
    provider_name = "unknown"

    @abstractmethod
    def recognize(self, image_bytes: bytes, *, lang: str) -> str:
        """Return the engine's transcription of one image as a single string.

        Implementations raise ``OcrFailure`` or ``OcrTimeout`` and release any
        temporary resource they acquired before doing so.
        """
