"""Global pytest fixtures for deterministic test environment."""

from __future__ import annotations

import pytest

# 80 characters; mentions "led", "shipped" and every skill below verbatim.
FOCUSED_SUMMARY = "Backend engineer who led teams and shipped python, go, sql, docker and aws work."


@pytest.fixture(autouse=True)
def _isolate_runtime_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear local runtime env that can leak into tests on developer machines."""
    for key in (
        "RESUME_ATS_CONFIG",
        "RESUME_ATS_MIN_EXPORT_SCORE",
        "RESUME_ATS_CACHE_ENABLED",
        "RESUME_ATS_CACHE_TTL_SECONDS",
        "RESUME_ATS_CACHE_MAX_ENTRIES",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def focused_doc() -> dict:
    """One dated role with three strong bullets, five skills, no projects.

    Scores 81 overall: keywords 22, completeness 23, experience 16, formatting 20.
    """
    return {
        "basics": {
            "fullName": "Ada Park",
            "headline": "Backend Engineer",
            "email": "ada@example.com",
            "phone": "555-0100",
            "location": "Austin, TX",
        },
        "summary": FOCUSED_SUMMARY,
        "experience": [
            {
                "id": "exp-1",
                "company": "Acme",
                "role": "Backend Engineer",
                "startDate": "2021-01",
                "endDate": "",
                "bullets": [
                    "Led a team of 5 engineers on payments",
                    "Built 3 internal services for billing",
                    "Reduced latency by 40% across the API",
                ],
            }
        ],
        "education": [
            {"id": "edu-1", "institution": "State University", "degree": "B.S. Computer Science"},
        ],
        "skills": ["Python", "Go", "SQL", "Docker", "AWS"],
        "projects": [],
    }
