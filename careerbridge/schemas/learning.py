from typing import Optional, List
from pydantic import BaseModel, Field


class LearningResource(BaseModel):
    id: Optional[int] = None
    title: Optional[str] = None
    platform: Optional[str] = None
    url: Optional[str] = None
    related_skills: List[str] = Field(default_factory=list)
    cost: Optional[str] = None                           # "free" | "paid" | ...

    model_config = {
        "extra": "allow",
    }


class ResourceRecommendation(BaseModel):
    resource: LearningResource
    relevance_score: float = Field(..., ge=0, le=100)
    target_skills: List[str] = Field(default_factory=list)   # skills new to the candidate
