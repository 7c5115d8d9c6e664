import json

from careerbridge import main


def _write(tmp_path, name, payload):
    path = tmp_path / name
    path.write_text(json.dumps(payload), encoding="utf-8")
    return str(path)


def _inputs(tmp_path):
    profile = _write(tmp_path, "profile.json", {
        "skills": ["Python", "SQL"], "experience_level": "junior", "preferred_track": "data",
    })
    jobs = _write(tmp_path, "jobs.json", [
        {"title": "Web Developer", "required_skills": ["React"], "experience_level": "junior"},
        {"title": "Data Analyst", "required_skills": ["Python", "SQL"], "experience_level": "junior"},
    ])
    resources = _write(tmp_path, "resources.json", [
        {"title": "React basics", "related_skills": ["React"]},
        {"title": "SQL again", "related_skills": ["SQL"]},
    ])
    return profile, jobs, resources


def test_match_command(tmp_path, capsys):
    profile, jobs, _ = _inputs(tmp_path)
    assert main.main(["match", "--profile", profile, "--jobs", jobs, "--provider", "heuristic"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert [r["job"]["title"] for r in out] == ["Data Analyst", "Web Developer"]
    assert out[0]["match_score"] == 100.0


def test_resources_command(tmp_path, capsys):
    profile, _, resources = _inputs(tmp_path)
    assert main.main(["resources", "--profile", profile, "--resources", resources]) == 0
    out = json.loads(capsys.readouterr().out)
    assert [r["resource"]["title"] for r in out] == ["React basics"]
    assert out[0]["target_skills"] == ["React"]


def test_gap_command(tmp_path, capsys):
    profile, jobs, resources = _inputs(tmp_path)
    assert main.main(["gap", "--profile", profile, "--jobs", jobs, "--role", "web", "--resources", resources]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["skill_gaps"] == ["React"]
    assert out["recommended_resources"][0]["title"] == "React basics"
