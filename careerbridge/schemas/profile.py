# careerbridge/schemas/profile.py
from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


def _blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class ExperienceLevel(str, Enum):
    FRESHER = "fresher"
    JUNIOR = "junior"
    MID = "mid"

    @classmethod
    def parse(cls, raw: str) -> "ExperienceLevel":
        """Case-insensitive parse; raises ValueError for anything unrecognised."""
        s = str(raw).strip().lower()
        for level in cls:
            if level.value == s:
                return level
        raise ValueError(f"Unknown experience level: {raw}")


class CareerTrack(str, Enum):
    WEB_DEVELOPMENT = "web_development"
    DATA = "data"
    DESIGN = "design"
    MARKETING = "marketing"

    @classmethod
    def parse(cls, raw: str) -> "CareerTrack":
        """Accepts 'Web Development', 'web-development', 'webdevelopment', ..."""
        s = str(raw).strip().lower().replace("-", "_").replace(" ", "_")
        if s == "webdevelopment":
            return cls.WEB_DEVELOPMENT
        for track in cls:
            if track.value == s:
                return track
        raise ValueError(f"Unknown career track: {raw}")


def parse_experience(raw) -> Optional[ExperienceLevel]:
    """None/blank means 'unknown'; enum members pass through."""
    if _blank(raw):
        return None
    if isinstance(raw, ExperienceLevel):
        return raw
    return ExperienceLevel.parse(raw)


def parse_track(raw) -> Optional[CareerTrack]:
    if _blank(raw):
        return None
    if isinstance(raw, CareerTrack):
        return raw
    return CareerTrack.parse(raw)


class CandidateProfile(BaseModel):
    full_name: Optional[str] = None
    skills: List[str] = Field(default_factory=list)
    experience_level: Optional[ExperienceLevel] = None
    preferred_track: Optional[CareerTrack] = None
    target_roles: List[str] = Field(default_factory=list)

    model_config = {
        "str_strip_whitespace": True,
        "extra": "ignore",
    }

    @field_validator("experience_level", mode="before")
    @classmethod
    def _experience(cls, v):
        return parse_experience(v)

    @field_validator("preferred_track", mode="before")
    @classmethod
    def _track(cls, v):
        return parse_track(v)
