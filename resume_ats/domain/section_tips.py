"""Per-section guidance derived from a document and its ATS breakdown."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from .ats_breakdown import AtsBreakdown, compute_ats_breakdown
from .resume_document import coerce_document

TIP_SECTIONS = ("summary", "experience", "education", "skills", "projects")


def section_tips(document: Any, breakdown: Optional[AtsBreakdown] = None) -> Dict[str, List[str]]:
    """Return editor tips keyed by section.

    Pass *breakdown* to reuse an already computed :class:`AtsBreakdown`.
    """
    doc = coerce_document(document)
    if breakdown is None:
        breakdown = compute_ats_breakdown(doc)
    tips: Dict[str, List[str]] = {key: [] for key in TIP_SECTIONS}

    if len(doc.summary) < 80:
        tips["summary"].append("Write 2-3 sentences (80-200 chars) with role, scope, and impact.")
    missing_keywords = breakdown.keyword_coverage.missing_keywords
    if missing_keywords:
        tips["summary"].append(f"Work in impact keywords like {', '.join(missing_keywords[:3])}.")

    tips["experience"].extend(breakdown.experience_quality.issues)
    if not doc.experience:
        tips["experience"].append("Add at least one role with dates and 3+ bullets.")

    if not doc.education:
        tips["education"].append("Add your latest degree or certification.")

    if len(doc.skills) < 5:
        tips["skills"].append("List 5-10 relevant skills on separate lines.")
    missing_skills = breakdown.keyword_coverage.missing_skills
    if missing_skills:
        tips["skills"].append(f"Mention skills in your bullets: {', '.join(missing_skills[:3])}.")

    if not doc.projects:
        tips["projects"].append("Add 1-2 projects with outcomes and tech stack.")

    return tips
