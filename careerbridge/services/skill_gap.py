# careerbridge/services/skill_gap.py
import logging
from typing import Iterable, List, Optional, Sequence

from careerbridge.constants import DEFAULT_ROLE, ROLE_KEYWORDS
from careerbridge.schemas.jobs import JobPosting
from careerbridge.schemas.matching import SkillGapResult
from careerbridge.utils.skills import SkillSet

logger = logging.getLogger(__name__)


def jobs_for_role(role: str, jobs: Iterable[JobPosting], limit: Optional[int] = None) -> List[JobPosting]:
    """Jobs whose title contains ``role`` (case-insensitive), in input order."""
    needle = (role or "").strip().lower()
    if not needle:
        return []
    out: List[JobPosting] = []
    for job in jobs:
        if needle in (job.title or "").lower():
            out.append(job)
            if limit is not None and len(out) >= limit:
                break
    return out


def aggregate_required_skills(jobs: Iterable[JobPosting]) -> List[str]:
    """Case-insensitive union of required skills; first casing seen wins."""
    return SkillSet.union_of(job.required_skills for job in jobs).to_list()


def analyze(candidate_skills: Iterable[str], required_skills: Iterable[str]) -> SkillGapResult:
    """
    Split the required skills into what the candidate already has and what is missing.

    Both lists use the required side's casing. With no requirements the match
    percentage is 0: no data is reported as no confidence, unlike the match scorer
    which treats an empty requirement list as fully satisfied.
    """
    required = SkillSet(required_skills)
    have = SkillSet(candidate_skills)

    matching = required.intersection(have)
    gaps = required.difference(have)
    pct = len(matching) / len(required) * 100.0 if required else 0.0

    logger.debug("Skill gap: %d matching / %d required = %.1f%%", len(matching), len(required), pct)
    return SkillGapResult(
        required_skills=required.to_list(),
        matching_skills=matching,
        skill_gaps=gaps,
        match_percentage=pct,
    )


def extract_target_role(question: str, target_roles: Sequence[str] = ()) -> str:
    """First known role mentioned in ``question``, else the first target role, else a default."""
    q = (question or "").lower()
    for keyword in ROLE_KEYWORDS:
        if keyword in q:
            return keyword
    for role in target_roles:
        if role and role.strip():
            return role.strip()
    return DEFAULT_ROLE


def format_skill_gap_summary(
    role: str,
    result: Optional[SkillGapResult],
    available_titles: Sequence[str] = (),
) -> str:
    """Plain-text block used as mentor/chat context."""
    if result is None or not result.required_skills:
        lines = [f"Skill Gap Analysis: No jobs found for '{role}' in our database. Consider asking about similar roles."]
        if available_titles:
            lines.append(f"Available job roles in database: {', '.join(available_titles)}")
        return "\n".join(lines)

    matching = ", ".join(result.matching_skills) if result.matching_skills else "None yet"
    gaps = ", ".join(result.skill_gaps) if result.skill_gaps else "None - you're ready!"
    return (
        f"Skill Gap Analysis for '{role}':\n"
        f"- Match Percentage: {result.match_percentage:.1f}%\n"
        f"- Matching Skills ({len(result.matching_skills)}/{len(result.required_skills)}): {matching}\n"
        f"- Skills to Learn: {gaps}"
    )
