"""Error taxonomy for the upload -> recognize -> extract pipeline."""

from __future__ import annotations


class ProfileScanError(Exception):
    status_code = 500
    kind = "internal_error"

    def __init__(self, message: str, *, details: str | None = None):
        super().__init__(message)
        self.message = message
        self.details = details


class IntakeError(ProfileScanError):
    status_code = 400


class MissingFile(IntakeError):
    kind = "missing_file"

    def __init__(self, message: str = "No file uploaded", **kwargs):
        super().__init__(message, **kwargs)


class InvalidType(IntakeError):
    kind = "invalid_type"

    def __init__(self, message: str = "Only image files are allowed", **kwargs):
        super().__init__(message, **kwargs)


class PayloadTooLarge(IntakeError):
    kind = "payload_too_large"

    def __init__(self, max_bytes: int, **kwargs):
        super().__init__(f"File too large. Maximum size is {max_bytes} bytes", **kwargs)
        self.max_bytes = max_bytes


class RecognitionError(ProfileScanError):
    status_code = 500


class OcrTimeout(RecognitionError):
    kind = "ocr_timeout"

    def __init__(self, timeout_seconds: float, **kwargs):
        super().__init__(f"Text recognition timed out after {timeout_seconds:g}s", **kwargs)
        self.timeout_seconds = timeout_seconds


class OcrFailure(RecognitionError):
    kind = "ocr_failure"

    def __init__(self, message: str = "Failed to process image", **kwargs):
        super().__init__(message, **kwargs)


class InternalError(ProfileScanError):
    def __init__(self, message: str = "Internal server error", **kwargs):
        super().__init__(message, **kwargs)
