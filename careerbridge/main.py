# careerbridge/main.py
"""Command-line front end for the matching engine.

Examples:
  python -m careerbridge.main match --profile me.json --jobs jobs.json --limit 5
  python -m careerbridge.main resources --profile me.json --resources courses.json
  python -m careerbridge.main gap --profile me.json --jobs jobs.json --role "data analyst"

Inputs are JSON files; output is JSON on stdout.
"""
import argparse
import asyncio
import json
import logging
import sys
from typing import List

from careerbridge import config
from careerbridge.schemas import CandidateProfile, JobPosting, LearningResource
from careerbridge.services import recommender
from careerbridge.services.explain import build_explainer


def _load_json(path: str):
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _load_profile(path: str) -> CandidateProfile:
    return CandidateProfile.model_validate(_load_json(path))


def _load_jobs(path: str) -> List[JobPosting]:
    return [JobPosting.model_validate(j) for j in _load_json(path)]


def _load_resources(path: str) -> List[LearningResource]:
    return [LearningResource.model_validate(r) for r in _load_json(path)]


def _dump(payload) -> str:
    if isinstance(payload, list):
        return json.dumps([p.model_dump(mode="json") for p in payload], indent=2)
    return json.dumps(payload.model_dump(mode="json"), indent=2)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="careerbridge", description="Job matching, skill gaps and learning recommendations")
    sub = parser.add_subparsers(dest="command", required=True)

    match = sub.add_parser("match", help="Rank jobs for a candidate")
    match.add_argument("--profile", required=True, help="Candidate profile JSON")
    match.add_argument("--jobs", required=True, help="JSON list of job postings")
    match.add_argument("--limit", type=int, default=None, help="Max recommendations (default from env)")
    match.add_argument("--provider", default=None, help="heuristic | huggingface | openai")

    res = sub.add_parser("resources", help="Rank learning resources for a candidate")
    res.add_argument("--profile", required=True)
    res.add_argument("--resources", required=True, help="JSON list of learning resources")
    res.add_argument("--limit", type=int, default=None)

    gap = sub.add_parser("gap", help="Skill gap analysis for a target role")
    gap.add_argument("--profile", required=True)
    gap.add_argument("--jobs", required=True)
    gap.add_argument("--role", required=True, help="Role name, matched against job titles")
    gap.add_argument("--resources", default=None, help="Optional resources JSON to suggest for gaps")

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    profile = _load_profile(args.profile)

    if args.command == "match":
        out = asyncio.run(recommender.recommend_jobs(
            profile,
            _load_jobs(args.jobs),
            explainer=build_explainer(args.provider),
            limit=args.limit,
        ))
    elif args.command == "resources":
        out = recommender.recommend_resources(profile, _load_resources(args.resources), limit=args.limit)
    else:
        resources = _load_resources(args.resources) if args.resources else []
        out = recommender.analyze_role(profile, args.role, _load_jobs(args.jobs), resources)

    print(_dump(out))
    return 0


if __name__ == "__main__":
    sys.exit(main())
