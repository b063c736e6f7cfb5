"""Resume ATS - deterministic resume scoring and export readiness."""

from .domain import (
    InvalidDocumentError,
    compute_ats_breakdown,
    compute_readiness,
    experience_quality,
    formatting_signals,
    is_ready_for_export,
    keyword_coverage,
    section_completeness,
)

__version__ = "0.1.0"

__all__ = [
    "compute_ats_breakdown",
    "compute_readiness",
    "is_ready_for_export",
    "keyword_coverage",
    "section_completeness",
    "experience_quality",
    "formatting_signals",
    "InvalidDocumentError",
]
