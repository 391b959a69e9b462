from __future__ import annotations

from pydantic import BaseModel

from profilescan.domain.models import ProfileRecord


class ProfileData(BaseModel):
    name: str = ""
    bio: str = ""
    followers: str = ""
    following: str = ""
    guessLocation: str = ""

    @classmethod
    def from_record(cls, record: ProfileRecord) -> "ProfileData":
        return cls(
            name=record.name,
            bio=record.bio,
            followers=record.followers,
            following=record.following,
            guessLocation=record.guess_location,
        )


class UploadResponse(BaseModel):
    success: bool = True
    data: ProfileData


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
    details: str | None = None
