import asyncio

import pytest

from careerbridge.errors import ExplanationError
from careerbridge.schemas import CandidateProfile, JobPosting, LearningResource
from careerbridge.services import recommender
from careerbridge.services.explain import HeuristicExplainer, RemoteExplainer, TextGenerator


class FlakyGenerator(TextGenerator):
    """Fails for one job title, answers for the rest; the slow one finishes last."""

    name = "flaky"

    async def generate(self, prompt: str) -> str:
        if "Title: Web Developer" in prompt:
            raise ExplanationError("503")
        if "Title: Data Analyst" in prompt:
            await asyncio.sleep(0.05)
        return "Remote says hi."


@pytest.fixture
def candidate():
    return CandidateProfile(skills=["Python", "SQL"], experience_level="junior", preferred_track="data")


@pytest.fixture
def jobs():
    return [
        JobPosting(title="Web Developer", required_skills=["JavaScript", "React"], experience_level="junior"),
        JobPosting(title="Data Analyst", required_skills=["Python", "SQL"], experience_level="junior"),
        JobPosting(title="Data Engineer", required_skills=["Python", "SQL"], experience_level="junior"),
        JobPosting(title="Graphic Designer", required_skills=["Figma"], experience_level="mid"),
    ]


def test_recommend_jobs_sorted_and_stable(candidate, jobs):
    out = asyncio.run(recommender.recommend_jobs(candidate, jobs, explainer=HeuristicExplainer(), limit=10))
    titles = [r.job.title for r in out]
    assert titles[:2] == ["Data Analyst", "Data Engineer"]
    assert out[0].match_score == pytest.approx(100.0)
    scores = [r.match_score for r in out]
    assert scores == sorted(scores, reverse=True)


def test_recommend_jobs_limit(candidate, jobs):
    out = asyncio.run(recommender.recommend_jobs(candidate, jobs, explainer=HeuristicExplainer(), limit=2))
    assert len(out) == 2
    assert asyncio.run(recommender.recommend_jobs(candidate, [], explainer=HeuristicExplainer())) == []


def test_remote_failure_only_degrades_one_job(candidate, jobs):
    out = asyncio.run(recommender.recommend_jobs(
        candidate, jobs, explainer=RemoteExplainer(FlakyGenerator(), timeout=5), limit=10, concurrency=2,
    ))
    by_title = {r.job.title: r for r in out}

    assert by_title["Data Analyst"].match_explanation == "Remote says hi."
    assert by_title["Graphic Designer"].match_explanation == "Remote says hi."
    assert by_title["Web Developer"].match_explanation.startswith(("Limited match", "Moderate match"))
    assert [r.job.title for r in out][:2] == ["Data Analyst", "Data Engineer"]


def test_recommendation_carries_skill_lists(candidate, jobs):
    out = asyncio.run(recommender.recommend_jobs(candidate, jobs[:1], explainer=HeuristicExplainer()))
    rec = out[0]
    assert rec.matched_skills == []
    assert rec.missing_skills == ["JavaScript", "React"]
    assert rec.improvement_areas == ["Learn: JavaScript, React"]
    dumped = rec.model_dump(mode="json")
    for field in ("match_score", "matched_skills", "missing_skills", "match_explanation",
                  "strengths", "improvement_areas", "experience_alignment", "track_alignment", "skill_overlap"):
        assert field in dumped


def test_recommend_resources_limit(candidate):
    pool = [LearningResource(title=f"r{i}", related_skills=["Go"]) for i in range(15)]
    pool.append(LearningResource(title="known", related_skills=["python"]))
    out = recommender.recommend_resources(candidate, pool, limit=10)
    assert len(out) == 10
    assert [r.resource.title for r in out] == [f"r{i}" for i in range(10)]


def test_analyze_role(candidate, jobs):
    pool = [
        LearningResource(title="Figma 101", related_skills=["figma"]),
        LearningResource(title="SQL deep dive", related_skills=["SQL"]),
    ]
    report = recommender.analyze_role(candidate, "designer", jobs, pool)
    assert report.target_role == "designer"
    assert report.required_skills == ["Figma"]
    assert report.skill_gaps == ["Figma"]
    assert report.match_percentage == 0.0
    assert [r.title for r in report.recommended_resources] == ["Figma 101"]
    assert report.user_skills == ["Python", "SQL"]


def test_analyze_role_without_jobs(candidate, jobs):
    report = recommender.analyze_role(candidate, "astronaut", jobs)
    assert report.required_skills == []
    assert report.match_percentage == 0.0
    assert report.recommended_resources == []
