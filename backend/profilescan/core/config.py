from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

_DEFAULT_CORS_ORIGINS = ",".join(
    [
        "http://localhost:3000",
        "http://localhost:3001",
        "https://shaadistoryfrontend.vercel.app",
    ]
)
_DEFAULT_MAX_UPLOAD_BYTES = 5 * 1024 * 1024
_DEFAULT_OCR_TIMEOUT_SECONDS = 20.0
_SUPPORTED_OCR_BACKENDS = {"tesseract", "vision", "mock"}


def _load_dotenv() -> None:
    if os.getenv("PROFILESCAN_SKIP_DOTENV") == "1":
        return

    env_path = Path(__file__).resolve().parents[2] / ".env"
    if not env_path.exists():
        return

    from dotenv import load_dotenv

    load_dotenv(env_path, override=True)


def _split_csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def _parse_positive_int(value: str | None, default: int) -> int:
    if value is None:
        return default
    raw = value.strip()
    if not raw:
        return default
    try:
        parsed = int(raw)
    except ValueError:
        return default
    return parsed if parsed > 0 else default


def _parse_positive_float(value: str | None, default: float) -> float:
    if value is None:
        return default
    raw = value.strip()
    if not raw:
        return default
    try:
        parsed = float(raw)
    except ValueError:
        return default
    return parsed if parsed > 0 else default


@dataclass(frozen=True)
class Settings:
    env: str
    app_name: str
    host: str
    port: int
    cors_origins: list[str]
    max_upload_bytes: int
    ocr_backend: str
    ocr_lang: str
    ocr_timeout_seconds: float
    tesseract_cmd: str | None
    log_level: str

    @property
    def cors_allow_all(self) -> bool:
        return "*" in self.cors_origins


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    _load_dotenv()

    ocr_backend = os.getenv("PROFILESCAN_OCR_BACKEND", "tesseract").strip().lower()
    if ocr_backend not in _SUPPORTED_OCR_BACKENDS:
        raise RuntimeError(
            f"Unsupported PROFILESCAN_OCR_BACKEND={ocr_backend!r}. "
            f"Expected one of: {', '.join(sorted(_SUPPORTED_OCR_BACKENDS))}."
        )

    return Settings(
        env=os.getenv("PROFILESCAN_ENV", "development"),
        app_name="Profile Scan API",
        host=os.getenv("PROFILESCAN_HOST", "0.0.0.0").strip() or "0.0.0.0",
        port=_parse_positive_int(os.getenv("PORT"), default=3000),
        cors_origins=_split_csv(os.getenv("PROFILESCAN_CORS_ORIGINS", _DEFAULT_CORS_ORIGINS)),
        max_upload_bytes=_parse_positive_int(
            os.getenv("PROFILESCAN_MAX_UPLOAD_BYTES"), default=_DEFAULT_MAX_UPLOAD_BYTES
        ),
        ocr_backend=ocr_backend,
        ocr_lang=os.getenv("PROFILESCAN_OCR_LANG", "eng").strip() or "eng",
        ocr_timeout_seconds=_parse_positive_float(
            os.getenv("PROFILESCAN_OCR_TIMEOUT_SECONDS"), default=_DEFAULT_OCR_TIMEOUT_SECONDS
        ),
        tesseract_cmd=os.getenv("TESSERACT_CMD", "").strip() or None,
        log_level=os.getenv("PROFILESCAN_LOG_LEVEL", "INFO").strip().upper() or "INFO",
    )
