# careerbridge/services/recommender.py
import asyncio
import logging
from typing import List, Optional, Sequence

from careerbridge import config
from careerbridge.schemas.jobs import JobPosting
from careerbridge.schemas.learning import LearningResource, ResourceRecommendation
from careerbridge.schemas.matching import JobRecommendation, SkillGapReport
from careerbridge.schemas.profile import CandidateProfile
from careerbridge.services import resources as resource_ranker
from careerbridge.services import scorer, skill_gap
from careerbridge.services.explain import ExplanationProvider, build_explainer

log = logging.getLogger("matching.recommender")


async def _recommend_one(
    candidate: CandidateProfile,
    job: JobPosting,
    explainer: ExplanationProvider,
    sem: asyncio.Semaphore,
) -> JobRecommendation:
    analysis = scorer.score(candidate, job)
    async with sem:
        explained = await explainer.explain(candidate, job, analysis.scores())
    return JobRecommendation(
        job=job,
        **analysis.model_dump(exclude={"match_explanation", "strengths", "improvement_areas"}),
        match_explanation=explained.explanation,
        strengths=explained.strengths,
        improvement_areas=explained.improvements,
    )


async def recommend_jobs(
    candidate: CandidateProfile,
    jobs: Sequence[JobPosting],
    *,
    explainer: Optional[ExplanationProvider] = None,
    limit: Optional[int] = None,
    concurrency: Optional[int] = None,
) -> List[JobRecommendation]:
    """
    Score every job for the candidate, best match first.

    Jobs are evaluated concurrently; explanation failures only degrade that one
    explanation. Equal scores keep the input order.
    """
    explainer = explainer or build_explainer()
    limit = config.JOB_RECOMMENDATION_LIMIT if limit is None else limit
    sem = asyncio.Semaphore(max(1, concurrency or config.RECOMMEND_CONCURRENCY))

    log.info("Scoring %d jobs with %s", len(jobs), type(explainer).__name__)

    results = await asyncio.gather(*(_recommend_one(candidate, job, explainer, sem) for job in jobs))
    ranked = sorted(results, key=lambda r: r.match_score, reverse=True)

    if ranked:
        log.debug("Top match score: %.1f%%", ranked[0].match_score)
    log.info("Returning %d of %d job recommendations", min(len(ranked), max(0, limit)), len(ranked))
    return ranked[:max(0, limit)]


def recommend_resources(
    candidate: CandidateProfile,
    resources: Sequence[LearningResource],
    *,
    limit: Optional[int] = None,
) -> List[ResourceRecommendation]:
    limit = config.RESOURCE_RECOMMENDATION_LIMIT if limit is None else limit
    ranked = resource_ranker.rank(candidate.skills, resources)
    log.info("Ranked %d of %d resources as relevant", len(ranked), len(resources))
    return ranked[:max(0, limit)]


def analyze_role(
    candidate: CandidateProfile,
    role: str,
    jobs: Sequence[JobPosting],
    resources: Sequence[LearningResource] = (),
    *,
    job_limit: Optional[int] = None,
    resource_limit: Optional[int] = None,
) -> SkillGapReport:
    """Skill gap for a target role, plus resources that cover the gaps."""
    job_limit = config.ROLE_JOB_LIMIT if job_limit is None else job_limit
    resource_limit = config.GAP_RESOURCE_LIMIT if resource_limit is None else resource_limit

    matched_jobs = skill_gap.jobs_for_role(role, jobs, limit=job_limit)
    log.info("Found %d jobs matching role '%s'", len(matched_jobs), role)

    result = skill_gap.analyze(candidate.skills, skill_gap.aggregate_required_skills(matched_jobs))
    recommended = resource_ranker.resources_for_gaps(result.skill_gaps, resources, limit=resource_limit)

    return SkillGapReport(
        target_role=role,
        user_skills=list(candidate.skills),
        recommended_resources=recommended,
        **result.model_dump(),
    )
