"""Tests for text normalization and collection."""

from resume_ats.domain import collect_text, normalize
from resume_ats.domain.text import clamp, round_half_up


def test_normalize_lowercases_and_handles_none():
    assert normalize("Led TEAMS") == "led teams"
    assert normalize(None) == ""
    assert normalize(42) == "42"


def test_collect_text_includes_every_narrative_field():
    text = collect_text(
        {
            "summary": "Platform Engineer",
            "experience": [{"role": "SRE", "company": "Acme", "bullets": ["Cut COSTS"]}],
            "projects": [{"name": "Atlas", "description": "Maps", "bullets": ["Shipped v2"]}],
            "skills": ["Kubernetes"],
        }
    )
    for fragment in ("platform engineer", "sre", "acme", "cut costs", "atlas", "maps", "shipped v2", "kubernetes"):
        assert fragment in text
    assert text == text.lower()


def test_collect_text_can_exclude_skills():
    doc = {"summary": "Engineer", "skills": ["Terraform"]}
    assert "terraform" in collect_text(doc)
    assert "terraform" not in collect_text(doc, include_skills=False)


def test_collect_text_of_empty_document_has_no_words():
    assert collect_text({}).strip() == ""


def test_clamp_bounds():
    assert clamp(-3) == 0
    assert clamp(140) == 100
    assert clamp(24, 0, 20) == 20
    assert clamp(12.5, 0, 20) == 12.5


def test_round_half_up_is_not_bankers_rounding():
    assert round_half_up(2.5) == 3
    assert round_half_up(80.5) == 81
    assert round_half_up(80.49) == 80
    assert round_half_up(0) == 0
