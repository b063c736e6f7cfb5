"""Export readiness gate.

Independent of the ATS breakdown: four equally weighted checks over the raw
document decide whether export may proceed.  Thresholds here are kept
separate from the section completeness analyzer's.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .ats_breakdown import score_resume
from .resume_document import ResumeDocument, coerce_document
from .text import clamp, round_half_up

READINESS_CHECKS = 4
MIN_SUMMARY_CHARS = 60
MIN_BULLETS_PER_ROLE = 2
MIN_SKILLS = 5
DEFAULT_MIN_EXPORT_SCORE = 70

MISSING_IDENTITY = "Full name and headline"
MISSING_SUMMARY = "Summary (min 60 characters)"
MISSING_EXPERIENCE = "Experience with at least 2 bullets"
MISSING_SKILLS = "Add at least 5 skills"


@dataclass
class ReadinessResult:
    """Structured result from the readiness checklist."""

    completeness_score: int
    missing_sections: List[str] = field(default_factory=list)

    @property
    def is_ready_for_export(self) -> bool:
        return not self.missing_sections

    def to_dict(self) -> Dict[str, Any]:
        return {
            "completenessScore": self.completeness_score,
            "missingSections": list(self.missing_sections),
            "isReadyForExport": self.is_ready_for_export,
        }


@dataclass
class ExportDecision:
    """Readiness gate combined with a minimum ATS score policy."""

    can_export: bool
    total_score: int
    min_score: int
    readiness: ReadinessResult
    blocker_reasons: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "canExport": self.can_export,
            "totalScore": self.total_score,
            "minScore": self.min_score,
            "readiness": self.readiness.to_dict(),
            "blockerReasons": list(self.blocker_reasons),
        }


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def compute_readiness(document: Any) -> ReadinessResult:
    doc = coerce_document(document)
    checks = [
        (_has_identity(doc), MISSING_IDENTITY),
        (len(doc.summary.strip()) >= MIN_SUMMARY_CHARS, MISSING_SUMMARY),
        (_has_strong_experience(doc), MISSING_EXPERIENCE),
        (sum(1 for skill in doc.skills if skill) >= MIN_SKILLS, MISSING_SKILLS),
    ]
    passed = sum(1 for ok, _ in checks if ok)
    return ReadinessResult(
        completeness_score=int(clamp(round_half_up(passed / READINESS_CHECKS * 100), 0, 100)),
        missing_sections=[message for ok, message in checks if not ok],
    )


def is_ready_for_export(document: Any) -> bool:
    """True iff every readiness check passes."""
    return compute_readiness(document).is_ready_for_export


def evaluate_export(
    document: Any,
    min_score: int = DEFAULT_MIN_EXPORT_SCORE,
    total_score: Optional[int] = None,
) -> ExportDecision:
    """Layer a minimum ATS score on top of the readiness gate.

    *total_score* may be passed when the caller already has a breakdown.
    """
    doc = coerce_document(document)
    if total_score is None:
        total_score = score_resume(doc)
    readiness = compute_readiness(doc)

    reasons: List[str] = []
    if total_score < min_score:
        reasons.append(f"ATS score needs {min_score}+ to export")
    if not readiness.is_ready_for_export:
        reasons.extend(f"Add {section} section" for section in readiness.missing_sections)
        reasons.append("Complete required fields to reach 100% readiness")

    return ExportDecision(
        can_export=not reasons,
        total_score=total_score,
        min_score=min_score,
        readiness=readiness,
        blocker_reasons=reasons,
    )


# ---------------------------------------------------------------------------
# Private checks
# ---------------------------------------------------------------------------


def _has_identity(doc: ResumeDocument) -> bool:
    return bool(doc.basics.full_name.strip() and doc.basics.headline.strip())


def _has_strong_experience(doc: ResumeDocument) -> bool:
    return any(
        sum(1 for bullet in exp.bullets if bullet.strip()) >= MIN_BULLETS_PER_ROLE for exp in doc.experience
    )
