# careerbridge/services/resources.py
import logging
from typing import Iterable, List, Optional, Tuple

from careerbridge.schemas.learning import LearningResource, ResourceRecommendation
from careerbridge.utils.skills import SkillSet

logger = logging.getLogger(__name__)


def relevance(candidate: SkillSet, resource: LearningResource) -> Tuple[float, List[str]]:
    """Share of the resource's skills that are new to the candidate, plus those skills."""
    taught = SkillSet(resource.related_skills)
    if not taught:
        return 0.0, []
    new_skills = taught.difference(candidate)
    return len(new_skills) / len(taught) * 100.0, new_skills


def rank(candidate_skills: Iterable[str], resources: Iterable[LearningResource]) -> List[ResourceRecommendation]:
    """
    Resources that teach something new, most relevant first.
    Ties keep input order (``sorted`` is stable).
    """
    have = SkillSet(candidate_skills)
    scored: List[ResourceRecommendation] = []
    for resource in resources:
        score, new_skills = relevance(have, resource)
        logger.debug("resource=%r relevance=%.1f new=%s", resource.title, score, new_skills)
        if score <= 0:
            continue
        scored.append(ResourceRecommendation(resource=resource, relevance_score=score, target_skills=new_skills))
    return sorted(scored, key=lambda r: r.relevance_score, reverse=True)


def resources_for_gaps(
    gaps: Iterable[str],
    resources: Iterable[LearningResource],
    limit: Optional[int] = None,
) -> List[LearningResource]:
    """Resources teaching at least one gap skill (case-insensitive), in input order."""
    wanted = SkillSet(gaps)
    if not wanted:
        return []
    out: List[LearningResource] = []
    for resource in resources:
        if SkillSet(resource.related_skills).overlaps(wanted):
            out.append(resource)
            if limit is not None and len(out) >= limit:
                break
    return out
