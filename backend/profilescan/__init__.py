"""Profile screenshot OCR service."""

__version__ = "1.0.0"
