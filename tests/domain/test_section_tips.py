from resume_ats.domain import compute_ats_breakdown, section_tips
from resume_ats.domain.experience_quality import FEW_BULLETS_ISSUE, NO_EXPERIENCE_ISSUE


def test_empty_document_tips(empty_doc):
    tips = section_tips(empty_doc)
    assert tips == {
        "summary": [
            "Write 2-3 sentences (80-200 chars) with role, scope, and impact.",
            "Work in impact keywords like improved, reduced, increased.",
        ],
        "experience": [NO_EXPERIENCE_ISSUE, "Add at least one role with dates and 3+ bullets."],
        "education": ["Add your latest degree or certification."],
        "skills": ["List 5-10 relevant skills on separate lines."],
        "projects": ["Add 1-2 projects with outcomes and tech stack."],
    }


def test_focused_document_tips(focused_doc):
    tips = section_tips(focused_doc)
    assert tips["summary"] == ["Work in impact keywords like improved, increased, accelerated."]
    assert tips["experience"] == [FEW_BULLETS_ISSUE]
    assert tips["education"] == []
    assert tips["skills"] == []
    assert tips["projects"] == ["Add 1-2 projects with outcomes and tech stack."]


def test_unmentioned_skills_are_suggested(focused_doc):
    focused_doc["skills"] = focused_doc["skills"] + ["Rust", "Kafka"]
    tips = section_tips(focused_doc)
    assert tips["skills"] == ["Mention skills in your bullets: rust, kafka."]


def test_reuses_given_breakdown(focused_doc):
    breakdown = compute_ats_breakdown(focused_doc)
    assert section_tips(focused_doc, breakdown=breakdown) == section_tips(focused_doc)
