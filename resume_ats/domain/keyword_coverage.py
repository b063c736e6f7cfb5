"""Keyword and skill coverage analysis (35 points max).

Skill coverage (20 points) checks whether each declared skill shows up in the
narrative text -- summary, experience and projects.  Bucket coverage
(15 points) measures how much role-agnostic impact language the resume uses.
Matching is plain substring search on lowercased text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Sequence, Tuple

from .text import clamp, collect_text, normalize
from .resume_document import coerce_document

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

KEYWORD_WEIGHT = 35
SKILL_POINTS = 20
BUCKET_POINTS = 15
MAX_LISTED = 10

KEYWORD_BUCKETS: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "impact": ("improved", "reduced", "increased", "accelerated", "boosted", "cut", "optimized"),
        "delivery": ("shipped", "launched", "deployed", "released", "delivered"),
        "leadership": ("led", "managed", "mentored", "coached", "owned"),
        "collaboration": ("collaborated", "partnered", "cross-functional", "stakeholder"),
        "quality": ("reliability", "availability", "performance", "scalability", "security", "quality"),
    }
)


@dataclass(frozen=True)
class BucketResult:
    bucket: str
    matches: List[str]
    missing: List[str]
    ratio: float


@dataclass
class KeywordCoverageResult:
    """Structured result from keyword coverage scoring."""

    score: float
    matched_skills: List[str] = field(default_factory=list)
    missing_skills: List[str] = field(default_factory=list)
    bucket_results: List[BucketResult] = field(default_factory=list)
    skill_coverage_ratio: float = 0.0
    bucket_ratio: float = 0.0
    coverage_ratio: float = 0.0
    missing_keywords: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "matchedSkills": list(self.matched_skills),
            "missingSkills": list(self.missing_skills),
            "bucketResults": [
                {"bucket": b.bucket, "matches": list(b.matches), "missing": list(b.missing), "ratio": b.ratio}
                for b in self.bucket_results
            ],
            "skillCoverageRatio": self.skill_coverage_ratio,
            "bucketRatio": self.bucket_ratio,
            "coverageRatio": self.coverage_ratio,
            "missingKeywords": list(self.missing_keywords),
        }


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def keyword_coverage(document: Any) -> KeywordCoverageResult:
    """Score how well *document* covers its own skills and impact keywords."""
    doc = coerce_document(document)
    text = collect_text(doc)
    narrative = collect_text(doc, include_skills=False)

    skills = [normalize(skill) for skill in doc.skills]
    matched_skills, missing_skills, skill_ratio = score_skill_coverage(skills, narrative)
    skill_score = skill_ratio * SKILL_POINTS

    bucket_results = [score_keyword_bucket(text, name, keywords) for name, keywords in KEYWORD_BUCKETS.items()]
    bucket_ratio = sum(b.ratio for b in bucket_results) / len(bucket_results) if bucket_results else 0.0
    bucket_score = bucket_ratio * BUCKET_POINTS

    return KeywordCoverageResult(
        score=clamp(skill_score + bucket_score, 0, KEYWORD_WEIGHT),
        matched_skills=matched_skills,
        missing_skills=missing_skills[:MAX_LISTED],
        bucket_results=bucket_results,
        skill_coverage_ratio=skill_ratio,
        bucket_ratio=bucket_ratio,
        coverage_ratio=skill_ratio if skills else bucket_ratio,
        missing_keywords=[kw for b in bucket_results for kw in b.missing][:MAX_LISTED],
    )


def score_skill_coverage(skills: Sequence[str], text: str) -> Tuple[List[str], List[str], float]:
    """Return ``(matched, missing, ratio)`` for lowercased *skills* in *text*.

    Blank skills count toward the denominator but are never listed.
    """
    matched = [skill for skill in skills if skill and skill in text]
    missing = [skill for skill in skills if skill and skill not in text]
    ratio = len(matched) / len(skills) if skills else 0.0
    return matched, missing, ratio


def score_keyword_bucket(text: str, bucket: str, keywords: Sequence[str]) -> BucketResult:
    matches = [kw for kw in keywords if kw in text]
    missing = [kw for kw in keywords if kw not in text]
    ratio = len(matches) / len(keywords) if keywords else 0.0
    return BucketResult(bucket=bucket, matches=matches, missing=missing, ratio=ratio)
