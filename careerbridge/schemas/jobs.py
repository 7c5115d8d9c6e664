from typing import Optional, List
from pydantic import BaseModel, Field, field_validator

from careerbridge.schemas.profile import ExperienceLevel, parse_experience


class JobPosting(BaseModel):
    id: Optional[int] = None
    title: str
    company: Optional[str] = None
    location: Optional[str] = None
    description: str = ""
    required_skills: List[str] = Field(default_factory=list)
    experience_level: Optional[ExperienceLevel] = None   # None scores as an unmodeled pair
    job_type: Optional[str] = None                       # "internship" | "part_time" | "full_time" | "freelance"
    salary_min: Optional[int] = None
    salary_max: Optional[int] = None

    # Other listing fields (responsibilities, benefits, ...) pass through untouched
    model_config = {
        "str_strip_whitespace": True,
        "extra": "allow",
    }

    @field_validator("experience_level", mode="before")
    @classmethod
    def _experience(cls, v):
        return parse_experience(v)

    @field_validator("description", mode="before")
    @classmethod
    def _description(cls, v):
        return v or ""
