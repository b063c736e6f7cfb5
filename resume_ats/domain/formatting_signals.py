"""Formatting and structure signals (20 points max).

Starts from the full 20, takes 4 off per warning and adds 1 per positive
signal, then clamps.  Four checks contribute:

  - Contact block completeness (email, phone, location)
  - Date format consistency (YYYY-MM start dates)
  - Bullet length readability (20-220 characters)
  - Summary length balance (80-600 characters)
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List

from .resume_document import coerce_document
from .text import clamp

FORMATTING_WEIGHT = 20
DEDUCTION_POINTS = 4
SIGNAL_POINTS = 1

DATE_PATTERN = re.compile(r"[0-9]{4}-(0[1-9]|1[0-2])")
BULLET_LENGTH_RANGE = (20, 220)
SUMMARY_LENGTH_RANGE = (80, 600)


@dataclass
class FormattingSignalsResult:
    """Structured result from formatting signal scoring."""

    score: float
    positive: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"score": self.score, "positive": list(self.positive), "warnings": list(self.warnings)}


def formatting_signals(document: Any) -> FormattingSignalsResult:
    doc = coerce_document(document)
    positive: List[str] = []
    warnings: List[str] = []

    basics = doc.basics
    if basics.email and basics.phone and basics.location:
        positive.append("Contact block complete.")
    else:
        warnings.append("Add missing contact details (email, phone, location).")

    experiences = doc.experience
    start_dates = [exp.start_date for exp in experiences if exp.start_date]
    if start_dates:
        if all(is_valid_date(d) for d in start_dates):
            positive.append("Consistent date formatting across roles.")
        else:
            warnings.append("Use consistent YYYY-MM dates for roles.")

    if experiences:
        low, high = BULLET_LENGTH_RANGE
        if all(low <= len(bullet) <= high for exp in experiences for bullet in exp.bullets):
            positive.append("Bullets have readable length.")
        else:
            warnings.append("Keep bullets concise (20-220 characters).")

    summary_length = len(doc.summary)
    low, high = SUMMARY_LENGTH_RANGE
    if low <= summary_length <= high:
        positive.append("Summary length is balanced.")
    elif summary_length:
        warnings.append("Keep summary between 80-600 characters.")

    raw = FORMATTING_WEIGHT - len(warnings) * DEDUCTION_POINTS + len(positive) * SIGNAL_POINTS
    return FormattingSignalsResult(
        score=float(clamp(raw, 0, FORMATTING_WEIGHT)),
        positive=positive,
        warnings=warnings,
    )


def is_valid_date(value: str) -> bool:
    """True when *value* is exactly ``YYYY-MM`` with a month of 01-12."""
    return DATE_PATTERN.fullmatch(value) is not None
