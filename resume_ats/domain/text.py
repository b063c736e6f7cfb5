"""Text normalization and collection shared by the analyzers."""

from __future__ import annotations

import math
from typing import Any, List

from .resume_document import ResumeDocument, coerce_document


def normalize(value: Any) -> str:
    """Lowercase *value* as a string; ``None`` becomes ``""``."""
    if value is None:
        return ""
    return str(value).lower()


def clamp(value: float, low: float = 0, high: float = 100) -> float:
    return min(max(value, low), high)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (not banker's rounding)."""
    return int(math.floor(value + 0.5))


def collect_text(document: Any, include_skills: bool = True) -> str:
    """Concatenate the searchable text of *document*, lowercased.

    Joins the summary, each experience entry's role, company and bullets,
    each project's name, description and bullets, and (unless
    *include_skills* is false) the skills list.
    """
    doc: ResumeDocument = coerce_document(document)
    parts: List[str] = [doc.summary]
    parts.extend(" ".join([exp.role, exp.company, *exp.bullets]) for exp in doc.experience)
    parts.extend(" ".join([proj.name, proj.description, *proj.bullets]) for proj in doc.projects)
    if include_skills:
        parts.append(" ".join(doc.skills))
    return normalize(" ".join(parts))
