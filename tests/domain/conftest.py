"""Resume document fixtures shared by the domain tests."""

from __future__ import annotations

import copy

import pytest

from resume_ats.domain import sample_resume


@pytest.fixture
def empty_doc() -> dict:
    return {"basics": {}, "summary": "", "experience": [], "education": [], "skills": [], "projects": []}


@pytest.fixture
def sample_doc() -> dict:
    return sample_resume(last_updated="2024-12-29T00:00:00Z")


@pytest.fixture
def doc_factory(focused_doc):
    """Return a deep copy of ``focused_doc`` with top-level overrides applied."""

    def _make(**overrides) -> dict:
        doc = copy.deepcopy(focused_doc)
        doc.update(overrides)
        return doc

    return _make
