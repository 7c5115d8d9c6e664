from typing import List
from pydantic import BaseModel, Field

from careerbridge.schemas.jobs import JobPosting
from careerbridge.schemas.learning import LearningResource


class MatchScores(BaseModel):
    """The three sub-scores plus their weighted combination, all 0-100."""
    skill_overlap: float = Field(..., ge=0, le=100)
    experience_alignment: float = Field(..., ge=0, le=100)
    track_alignment: float = Field(..., ge=0, le=100)
    match_score: float = Field(..., ge=0, le=100)


class Explanation(BaseModel):
    explanation: str
    strengths: List[str] = Field(default_factory=list)
    improvements: List[str] = Field(default_factory=list)


class MatchAnalysis(BaseModel):
    match_score: float = Field(..., ge=0, le=100)
    skill_overlap: float = Field(..., ge=0, le=100)
    experience_alignment: float = Field(..., ge=0, le=100)
    track_alignment: float = Field(..., ge=0, le=100)
    matched_skills: List[str] = Field(default_factory=list)
    missing_skills: List[str] = Field(default_factory=list)
    match_explanation: str = ""
    strengths: List[str] = Field(default_factory=list)
    improvement_areas: List[str] = Field(default_factory=list)

    def scores(self) -> MatchScores:
        return MatchScores(
            skill_overlap=self.skill_overlap,
            experience_alignment=self.experience_alignment,
            track_alignment=self.track_alignment,
            match_score=self.match_score,
        )


class JobRecommendation(MatchAnalysis):
    job: JobPosting


class SkillGapResult(BaseModel):
    required_skills: List[str] = Field(default_factory=list)
    matching_skills: List[str] = Field(default_factory=list)
    skill_gaps: List[str] = Field(default_factory=list)
    match_percentage: float = Field(0.0, ge=0, le=100)


class SkillGapReport(SkillGapResult):
    target_role: str
    user_skills: List[str] = Field(default_factory=list)
    recommended_resources: List[LearningResource] = Field(default_factory=list)
