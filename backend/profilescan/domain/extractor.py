"""Line heuristics that turn raw OCR text from a profile screenshot into a
:class:`ProfileRecord`.

The extractor is total: noisy or empty text degrades to empty fields and
never raises.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

from profilescan.domain.models import ProfileRecord

# Only real line breaks; Tesseract's \x0c page separator stays inside a line.
_LINE_BREAK = re.compile(r"\r\n|\r|\n")
_BIO_MAX_LINES = 3
_FOLLOWERS_KEYWORDS = ("followers",)
_FOLLOWING_KEYWORDS = ("following",)
_LOCATION_KEYWORDS = ("india", "city", "location")


def split_lines(text: str | None) -> list[str]:
    """Return trimmed, non-empty lines in document order."""
    if not text:
        return []
    return [line.strip() for line in _LINE_BREAK.split(text) if line.strip()]


def _first_matching(lines: Sequence[str], keywords: Iterable[str]) -> str:
    keywords = tuple(keywords)
    for line in lines:
        lowered = line.lower()
        if any(keyword in lowered for keyword in keywords):
            return line
    return ""


def extract_profile(text: str | None) -> ProfileRecord:
    lines = split_lines(text)
    return ProfileRecord(
        name=lines[0] if lines else "",
        bio=" ".join(lines[1 : 1 + _BIO_MAX_LINES]),
        followers=_first_matching(lines, _FOLLOWERS_KEYWORDS),
        following=_first_matching(lines, _FOLLOWING_KEYWORDS),
        guess_location=_first_matching(lines, _LOCATION_KEYWORDS),
    )
