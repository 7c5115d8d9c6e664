# careerbridge/services/prompts.py
from careerbridge.schemas.jobs import JobPosting
from careerbridge.schemas.matching import MatchScores
from careerbridge.schemas.profile import CandidateProfile

SYSTEM_PROMPT = (
    "You are a career advisor helping candidates understand job matches. "
    "Provide clear, actionable feedback."
)

MATCH_EXPLANATION_TEMPLATE = """Analyze the job match between a candidate and a job posting.

Candidate Profile:
- Skills: {user_skills}
- Experience Level: {user_experience}
- Preferred Track: {user_track}

Job Requirements:
- Title: {job_title}
- Required Skills: {job_skills}
- Experience Level: {job_experience}
- Description: {job_description}

Match Score: {match_score:.1f}%

Provide a concise, professional explanation (2-3 sentences) explaining why this is a good match or what's missing.
Focus on specific skills, experience alignment, and career track fit.
Format: Start with overall assessment, then mention key strengths, then areas for improvement."""

DESCRIPTION_PREVIEW_CHARS = 200
NOT_SPECIFIED = "Not specified"


def build_match_prompt(candidate: CandidateProfile, job: JobPosting, scores: MatchScores) -> str:
    return MATCH_EXPLANATION_TEMPLATE.format(
        user_skills=", ".join(candidate.skills),
        user_experience=candidate.experience_level.value if candidate.experience_level else NOT_SPECIFIED,
        user_track=candidate.preferred_track.value if candidate.preferred_track else NOT_SPECIFIED,
        job_title=job.title,
        job_skills=", ".join(job.required_skills),
        job_experience=job.experience_level.value if job.experience_level else NOT_SPECIFIED,
        job_description=(job.description or "")[:DESCRIPTION_PREVIEW_CHARS],
        match_score=scores.match_score,
    )
