"""Section completeness analysis (25 points max)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from .resume_document import ResumeDocument, coerce_document
from .text import clamp

COMPLETENESS_WEIGHT = 25

# (section key, weight); weights sum to COMPLETENESS_WEIGHT
SECTION_WEIGHTS: Tuple[Tuple[str, int], ...] = (
    ("basics", 6),
    ("summary", 5),
    ("experience", 6),
    ("education", 4),
    ("skills", 2),
    ("projects", 2),
)

MIN_SUMMARY_LENGTH = 50
MIN_SKILLS = 5


@dataclass(frozen=True)
class SectionStatus:
    key: str
    weight: int
    filled: bool


@dataclass
class SectionCompletenessResult:
    """Structured result from section completeness scoring."""

    score: float
    sections: List[SectionStatus] = field(default_factory=list)
    missing_sections: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "sections": [{"key": s.key, "weight": s.weight, "filled": s.filled} for s in self.sections],
            "missingSections": list(self.missing_sections),
        }


def section_completeness(document: Any) -> SectionCompletenessResult:
    """Score which resume sections are filled in, weighted by importance."""
    doc = coerce_document(document)
    filled = _filled_sections(doc)
    sections = [SectionStatus(key=key, weight=weight, filled=filled[key]) for key, weight in SECTION_WEIGHTS]

    total_weight = sum(s.weight for s in sections) or 1
    filled_weight = sum(s.weight for s in sections if s.filled)

    return SectionCompletenessResult(
        score=clamp(filled_weight / total_weight * COMPLETENESS_WEIGHT, 0, COMPLETENESS_WEIGHT),
        sections=sections,
        missing_sections=[s.key for s in sections if not s.filled],
    )


def _filled_sections(doc: ResumeDocument) -> Dict[str, bool]:
    basics = doc.basics
    return {
        "basics": all((basics.full_name, basics.email, basics.phone, basics.location)),
        "summary": len(doc.summary.strip()) >= MIN_SUMMARY_LENGTH,
        "experience": bool(doc.experience)
        and all(exp.role and exp.company and exp.start_date for exp in doc.experience),
        "education": bool(doc.education) and all(edu.institution and edu.degree for edu in doc.education),
        "skills": len(doc.skills) >= MIN_SKILLS,
        "projects": len(doc.projects) > 0,
    }
