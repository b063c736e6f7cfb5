"""Experience section quality analysis (20 points max).

SCORING BREAKDOWN:
  - Bullet volume (8+ bullets for full credit):  6 points
  - Bullets opening with an action verb:         6 points
  - Bullets containing a number:                 4 points
  - Roles with a start date:                     4 points
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, List

from .resume_document import coerce_document
from .text import clamp, normalize

EXPERIENCE_WEIGHT = 20

ACTION_VERBS: FrozenSet[str] = frozenset(
    {
        "led",
        "managed",
        "architected",
        "built",
        "created",
        "developed",
        "designed",
        "implemented",
        "launched",
        "shipped",
        "optimized",
        "improved",
        "reduced",
        "increased",
        "accelerated",
        "automated",
        "modernized",
        "migrated",
        "scaled",
        "mentored",
        "collaborated",
        "delivered",
    }
)

TARGET_BULLETS = 8
MIN_BULLETS = 6
MIN_ACTION_VERB_RATIO = 0.6
MIN_METRIC_RATIO = 0.5

_DIGIT_RE = re.compile(r"[0-9]")
_WHITESPACE_RE = re.compile(r"\s+")

NO_EXPERIENCE_ISSUE = "Add at least one experience entry with dates and bullets."
FEW_BULLETS_ISSUE = "Add more accomplishment bullets (aim for 6+ across roles)."
ACTION_VERB_ISSUE = "Start bullets with strong action verbs."
METRIC_ISSUE = "Quantify impact with numbers or percentages."
DATE_ISSUE = "Ensure each role has a start date and optional end date."


@dataclass
class ExperienceQualityResult:
    """Structured result from experience quality scoring."""

    score: float
    total_bullets: int = 0
    action_verb_ratio: float = 0.0
    metric_ratio: float = 0.0
    metric_bullets: int = 0
    date_coverage: float = 0.0
    issues: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "details": {
                "totalBullets": self.total_bullets,
                "actionVerbRatio": self.action_verb_ratio,
                "metricRatio": self.metric_ratio,
                "metricBullets": self.metric_bullets,
                "dateCoverage": self.date_coverage,
            },
            "issues": list(self.issues),
        }


def experience_quality(document: Any) -> ExperienceQualityResult:
    """Score bullet volume, action verbs, metrics and date coverage."""
    doc = coerce_document(document)
    experiences = doc.experience
    if not experiences:
        return ExperienceQualityResult(score=0.0, issues=[NO_EXPERIENCE_ISSUE])

    bullets = [bullet for exp in experiences for bullet in exp.bullets]
    total = len(bullets)

    verb_count = sum(1 for bullet in bullets if starts_with_action_verb(bullet))
    metric_count = sum(1 for bullet in bullets if _DIGIT_RE.search(bullet))
    dated = sum(1 for exp in experiences if exp.start_date)

    action_verb_ratio = verb_count / total if total else 0.0
    metric_ratio = metric_count / total if total else 0.0
    date_coverage = dated / len(experiences)

    bullet_score = min(total / TARGET_BULLETS, 1) * 6
    score = clamp(bullet_score + action_verb_ratio * 6 + metric_ratio * 4 + date_coverage * 4, 0, EXPERIENCE_WEIGHT)

    issues: List[str] = []
    if total < MIN_BULLETS:
        issues.append(FEW_BULLETS_ISSUE)
    if action_verb_ratio < MIN_ACTION_VERB_RATIO:
        issues.append(ACTION_VERB_ISSUE)
    if metric_ratio < MIN_METRIC_RATIO:
        issues.append(METRIC_ISSUE)
    if date_coverage < 1:
        issues.append(DATE_ISSUE)

    return ExperienceQualityResult(
        score=score,
        total_bullets=total,
        action_verb_ratio=action_verb_ratio,
        metric_ratio=metric_ratio,
        metric_bullets=metric_count,
        date_coverage=date_coverage,
        issues=issues,
    )


def starts_with_action_verb(bullet: str) -> bool:
    """True when the text before the first whitespace run is an action verb.

    Leading whitespace yields an empty first word, so " Led a team" does not count.
    """
    return _WHITESPACE_RE.split(normalize(bullet), maxsplit=1)[0] in ACTION_VERBS
