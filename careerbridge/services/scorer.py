# careerbridge/services/scorer.py
"""
Deterministic job-match scoring.

match_score = 0.6 * skill_overlap + 0.2 * experience_alignment + 0.2 * track_alignment

Every sub-score is 0-100. Missing inputs degrade to a neutral 50 instead of failing.
"""
import logging
from typing import Iterable, Optional, Union

from careerbridge import config
from careerbridge.constants import (
    EXPERIENCE_ALIGNMENT,
    NEUTRAL_SCORE,
    TRACK_KEYWORDS,
    W_EXPERIENCE,
    W_SKILL,
    W_TRACK,
)
from careerbridge.schemas.jobs import JobPosting
from careerbridge.schemas.matching import MatchAnalysis, MatchScores
from careerbridge.schemas.profile import (
    CandidateProfile,
    CareerTrack,
    ExperienceLevel,
    parse_experience,
    parse_track,
)
from careerbridge.services import explain
from careerbridge.utils.skills import SkillSet

logger = logging.getLogger(__name__)

Skills = Union[SkillSet, Iterable[str]]

EXTRA_SKILL_BONUS_SCALE = 10.0


def _as_skillset(skills: Optional[Skills]) -> SkillSet:
    return skills if isinstance(skills, SkillSet) else SkillSet(skills)


def skill_overlap(candidate_skills: Skills, required_skills: Skills, *, bonus_cap: Optional[float] = None) -> float:
    """
    Share of required skills the candidate has, 0-100.

    No requirements means trivially satisfied (100). A candidate with strictly more
    skills than required gets a small bonus, capped at ``bonus_cap`` points.
    """
    candidate = _as_skillset(candidate_skills)
    required = _as_skillset(required_skills)
    if not required:
        return 100.0

    matched = len(candidate.keys & required.keys)
    overlap = matched / len(required) * 100.0

    bonus = 0.0
    if len(candidate) > len(required):
        cap = config.EXTRA_SKILL_BONUS_CAP if bonus_cap is None else bonus_cap
        bonus = min(cap, (len(candidate) - len(required)) / len(required) * EXTRA_SKILL_BONUS_SCALE)

    return min(100.0, overlap + bonus)


def _or_unknown(parse, raw):
    """Unrecognised text scores like a missing value."""
    try:
        return parse(raw)
    except ValueError:
        logger.debug("Unrecognised value %r treated as unknown", raw)
        return None


def experience_alignment(
    candidate_level: Union[ExperienceLevel, str, None],
    job_level: Union[ExperienceLevel, str, None],
) -> float:
    """Closeness of two experience tiers; see constants.EXPERIENCE_ALIGNMENT."""
    candidate = _or_unknown(parse_experience, candidate_level)
    if candidate is None:
        return NEUTRAL_SCORE
    job = _or_unknown(parse_experience, job_level)
    if candidate == job:
        return 100.0
    return EXPERIENCE_ALIGNMENT.get((candidate, job), NEUTRAL_SCORE)


def track_alignment(track: Union[CareerTrack, str, None], job_title: str) -> float:
    """100 when the job title mentions a keyword of the preferred track, else 50."""
    preferred = _or_unknown(parse_track, track)
    if preferred is None:
        return NEUTRAL_SCORE
    title = (job_title or "").lower()
    keywords = TRACK_KEYWORDS[preferred]
    return 100.0 if any(k in title for k in keywords) else NEUTRAL_SCORE


def combine(overlap: float, experience: float, track: float) -> float:
    return max(0.0, min(100.0, W_SKILL * overlap + W_EXPERIENCE * experience + W_TRACK * track))


def compute_scores(candidate: CandidateProfile, job: JobPosting) -> MatchScores:
    overlap = skill_overlap(candidate.skills, job.required_skills)
    experience = experience_alignment(candidate.experience_level, job.experience_level)
    track = track_alignment(candidate.preferred_track, job.title)
    total = combine(overlap, experience, track)
    logger.debug(
        "score job=%r overlap=%.2f experience=%.1f track=%.1f -> %.2f",
        job.title, overlap, experience, track, total,
    )
    return MatchScores(
        skill_overlap=overlap,
        experience_alignment=experience,
        track_alignment=track,
        match_score=total,
    )


def score(candidate: CandidateProfile, job: JobPosting) -> MatchAnalysis:
    """Full match analysis with the local (heuristic) explanation."""
    scores = compute_scores(candidate, job)
    skills = explain.reconcile(candidate, job)
    explained = explain.HeuristicExplainer().compose(candidate, job, scores, skills)

    return MatchAnalysis(
        match_score=scores.match_score,
        skill_overlap=scores.skill_overlap,
        experience_alignment=scores.experience_alignment,
        track_alignment=scores.track_alignment,
        matched_skills=skills.matched,
        missing_skills=skills.missing,
        match_explanation=explained.explanation,
        strengths=explained.strengths,
        improvement_areas=explained.improvements,
    )
