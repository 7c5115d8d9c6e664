# careerbridge/schemas/__init__.py
from careerbridge.schemas.profile import CandidateProfile, CareerTrack, ExperienceLevel
from careerbridge.schemas.jobs import JobPosting
from careerbridge.schemas.learning import LearningResource, ResourceRecommendation
from careerbridge.schemas.matching import (
    Explanation,
    JobRecommendation,
    MatchAnalysis,
    MatchScores,
    SkillGapReport,
    SkillGapResult,
)
