"""ATS breakdown: the four category analyzers merged into one score.

All functions are pure -- the same document always yields the same output.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from .experience_quality import EXPERIENCE_WEIGHT, ExperienceQualityResult, experience_quality
from .formatting_signals import FORMATTING_WEIGHT, FormattingSignalsResult, formatting_signals
from .keyword_coverage import KEYWORD_WEIGHT, KeywordCoverageResult, keyword_coverage
from .resume_document import coerce_document
from .section_completeness import COMPLETENESS_WEIGHT, SectionCompletenessResult, section_completeness
from .text import clamp, round_half_up

MAX_IMPROVEMENT_AREAS = 8

CATEGORY_WEIGHTS: Dict[str, int] = {
    "keywords": KEYWORD_WEIGHT,
    "completeness": COMPLETENESS_WEIGHT,
    "experience": EXPERIENCE_WEIGHT,
    "formatting": FORMATTING_WEIGHT,
}


@dataclass
class AtsBreakdown:
    """Total score, rounded category scores, raw category results and gaps."""

    total_score: int
    categories: Dict[str, int]
    keyword_coverage: KeywordCoverageResult
    section_completeness: SectionCompletenessResult
    experience_quality: ExperienceQualityResult
    formatting_signals: FormattingSignalsResult
    improvement_areas: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalScore": self.total_score,
            "categories": dict(self.categories),
            "keywordCoverage": self.keyword_coverage.to_dict(),
            "sectionCompleteness": self.section_completeness.to_dict(),
            "experienceQuality": self.experience_quality.to_dict(),
            "formattingSignals": self.formatting_signals.to_dict(),
            "improvementAreas": list(self.improvement_areas),
        }


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def compute_ats_breakdown(document: Any) -> AtsBreakdown:
    """Run every analyzer over *document* and merge the results.

    Category scores are summed unrounded; rounding happens only here, once
    for the total and once per category.
    """
    doc = coerce_document(document)
    keywords = keyword_coverage(doc)
    completeness = section_completeness(doc)
    experience = experience_quality(doc)
    formatting = formatting_signals(doc)

    total = clamp(keywords.score + completeness.score + experience.score + formatting.score, 0, 100)

    return AtsBreakdown(
        total_score=round_half_up(total),
        categories={
            "keywords": round_half_up(keywords.score),
            "completeness": round_half_up(completeness.score),
            "experience": round_half_up(experience.score),
            "formatting": round_half_up(formatting.score),
        },
        keyword_coverage=keywords,
        section_completeness=completeness,
        experience_quality=experience,
        formatting_signals=formatting,
        improvement_areas=_improvement_areas(keywords, completeness, experience, formatting),
    )


def score_resume(document: Any) -> int:
    """Total ATS score (0-100) for *document*."""
    return compute_ats_breakdown(document).total_score


# ---------------------------------------------------------------------------
# Formatting report (pure string output)
# ---------------------------------------------------------------------------


def format_ats_report(breakdown: AtsBreakdown) -> str:
    """Render an :class:`AtsBreakdown` as a human-readable markdown report."""
    grade = score_to_grade(breakdown.total_score)
    bar = _score_bar(breakdown.total_score)

    lines = [
        f"## ATS Score: {breakdown.total_score}/100 {grade}",
        bar,
        "",
        "| Category     | Score | Max |",
        "|-------------|-------|-----|",
    ]
    labels = {
        "keywords": "Keywords",
        "completeness": "Completeness",
        "experience": "Experience",
        "formatting": "Formatting",
    }
    for key, label in labels.items():
        lines.append(f"| {label:<12} | {breakdown.categories[key]:3d}   | {CATEGORY_WEIGHTS[key]:3d} |")

    if breakdown.improvement_areas:
        lines.append("")
        lines.append("### Improvement Areas")
        for i, s in enumerate(breakdown.improvement_areas, 1):
            lines.append(f"{i}. {s}")

    return "\n".join(lines)


def score_to_grade(score: int) -> str:
    if score >= 80:
        return "Excellent"
    elif score >= 60:
        return "Good"
    elif score >= 40:
        return "Average"
    else:
        return "Needs Work"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _improvement_areas(
    keywords: KeywordCoverageResult,
    completeness: SectionCompletenessResult,
    experience: ExperienceQualityResult,
    formatting: FormattingSignalsResult,
) -> List[str]:
    # Priority order: skill gaps, keyword gaps, missing sections, experience, formatting
    areas: List[str] = []
    areas.extend(f'Use skill "{skill}" in your bullets.' for skill in keywords.missing_skills)
    areas.extend(f'Work in keyword "{kw}" for ATS relevance.' for kw in keywords.missing_keywords)
    areas.extend(f"Complete the {section} section." for section in completeness.missing_sections)
    areas.extend(experience.issues)
    areas.extend(formatting.warnings)
    return [area for area in areas if area][:MAX_IMPROVEMENT_AREAS]


def _score_bar(score: int, width: int = 20) -> str:
    filled = round(score / 100 * width)
    return f"[{'=' * filled}{' ' * (width - filled)}]"
