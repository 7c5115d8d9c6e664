# careerbridge/services/explain.py
"""
Match explanations.

``HeuristicExplainer`` is the local, deterministic base case. ``RemoteExplainer``
decorates it: it asks a remote text generator for a friendlier paragraph and
falls back to the heuristic text on any failure. One attempt, no retries.
"""
import asyncio
import logging
from typing import List, NamedTuple, Optional

from careerbridge import config
from careerbridge.constants import (
    FALLBACK_VERDICT,
    MAX_MATCHED_SKILLS_SHOWN,
    MAX_MISSING_SKILLS_SHOWN,
    VERDICTS,
)
from careerbridge.errors import ExplanationError
from careerbridge.schemas.jobs import JobPosting
from careerbridge.schemas.matching import Explanation, MatchScores
from careerbridge.schemas.profile import CandidateProfile
from careerbridge.services.prompts import build_match_prompt
from careerbridge.utils.skills import SkillSet

logger = logging.getLogger(__name__)


class TextGenerator:
    """Anything that turns a prompt into text; raises ExplanationError on failure."""

    name = "generator"

    async def generate(self, prompt: str) -> str:
        raise NotImplementedError


class ExplanationProvider:
    async def explain(self, candidate: CandidateProfile, job: JobPosting, scores: MatchScores) -> Explanation:
        raise NotImplementedError


def verdict_for(match_score: float) -> str:
    for threshold, label in VERDICTS:
        if match_score >= threshold:
            return label
    return FALLBACK_VERDICT


class SkillMatch(NamedTuple):
    matched: List[str]
    missing: List[str]
    required_count: int


def reconcile(candidate: CandidateProfile, job: JobPosting) -> SkillMatch:
    """Matched / missing skills in the job's order and casing."""
    required = SkillSet(job.required_skills)
    have = SkillSet(candidate.skills)
    return SkillMatch(required.intersection(have), required.difference(have), len(required))


class HeuristicExplainer(ExplanationProvider):
    """Rule-based strengths / improvements / verdict. Same input, same bytes out."""

    def compose(
        self,
        candidate: CandidateProfile,
        job: JobPosting,
        scores: MatchScores,
        skills: Optional[SkillMatch] = None,
    ) -> Explanation:
        if skills is None:
            skills = reconcile(candidate, job)
        matched, missing, required_count = skills

        parts = []
        strengths = []
        improvements = []

        if matched:
            skill_list = ", ".join(matched[:MAX_MATCHED_SKILLS_SHOWN])
            strengths.append(f"Strong skills match: {skill_list}")
            parts.append(f"You have {len(matched)} of {required_count} required skills ({skill_list})")

        if missing:
            missing_list = ", ".join(missing[:MAX_MISSING_SKILLS_SHOWN])
            improvements.append(f"Learn: {missing_list}")
            parts.append(f"Consider learning: {missing_list}")

        user_level = candidate.experience_level.value if candidate.experience_level else None
        if scores.experience_alignment >= 80:
            strengths.append(f"Experience level ({user_level or 'your level'}) aligns well with this position")
            parts.append("Your experience level is a good fit for this role")
        elif scores.experience_alignment < 60:
            job_level = job.experience_level.value if job.experience_level else "unspecified"
            improvements.append(f"This role requires {job_level} experience, but you have {user_level or 'different'}")

        if scores.track_alignment >= 80:
            strengths.append("This role matches your preferred career track")
            parts.append("The position aligns with your career interests")

        verdict = verdict_for(scores.match_score)
        text = f"{verdict} {'. '.join(parts)}" if parts else verdict

        return Explanation(explanation=text, strengths=strengths, improvements=improvements)

    async def explain(self, candidate: CandidateProfile, job: JobPosting, scores: MatchScores) -> Explanation:
        return self.compose(candidate, job, scores)


def clean_generated_text(text: str) -> str:
    """Strip instruction-tag artifacts some instruct models echo back."""
    return (text or "").replace("[INST]", "").replace("[/INST]", "").strip()


class RemoteExplainer(ExplanationProvider):
    def __init__(
        self,
        generator: TextGenerator,
        fallback: Optional[HeuristicExplainer] = None,
        timeout: Optional[float] = None,
    ):
        self.generator = generator
        self.fallback = fallback or HeuristicExplainer()
        self.timeout = config.EXPLAIN_TIMEOUT_SECS if timeout is None else timeout

    async def explain(self, candidate: CandidateProfile, job: JobPosting, scores: MatchScores) -> Explanation:
        base = self.fallback.compose(candidate, job, scores)
        prompt = build_match_prompt(candidate, job, scores)

        try:
            logger.info("Calling %s for job match explanation (job=%r)", self.generator.name, job.title)
            raw = await asyncio.wait_for(self.generator.generate(prompt), timeout=self.timeout)
            text = clean_generated_text(raw)
            if not text:
                raise ExplanationError("empty generated_text")
        except asyncio.TimeoutError:
            logger.warning(
                "Failed to generate AI explanation: %s timed out after %.1fs. Falling back to heuristic.",
                self.generator.name, self.timeout,
            )
            return base
        except Exception as e:
            logger.warning("Failed to generate AI explanation: %s. Falling back to heuristic.", e)
            return base

        logger.info("Successfully generated AI explanation using %s", self.generator.name)
        return base.model_copy(update={"explanation": text})


def build_explainer(provider: Optional[str] = None, *, timeout: Optional[float] = None) -> ExplanationProvider:
    """heuristic | huggingface | openai (alias: groq)."""
    name = (provider or config.EXPLAIN_PROVIDER or "heuristic").strip().lower()

    if name == "heuristic":
        return HeuristicExplainer()
    if name in {"huggingface", "hf"}:
        from careerbridge.services.hf_client import HuggingFaceClient
        return RemoteExplainer(HuggingFaceClient(), timeout=timeout)
    if name in {"openai", "groq"}:
        from careerbridge.services.openai_client import ChatCompletionClient
        return RemoteExplainer(ChatCompletionClient(), timeout=timeout)

    raise ValueError(f"Unknown explanation provider: '{name}'")
