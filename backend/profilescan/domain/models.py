from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class UploadedImage:
    payload: bytes = field(repr=False)
    content_type: str
    size: int
    filename: str | None = None


@dataclass(frozen=True)
class ProfileRecord:
    name: str = ""
    bio: str = ""
    followers: str = ""
    following: str = ""
    guess_location: str = ""
