"""Resume ATS Domain - Pure scoring logic for resume documents.

This package contains pure functions with no file system or network access.
All I/O is handled by the CLI and web layers; this package operates on
resume documents (mappings or :class:`ResumeDocument` values).
"""

from .ats_breakdown import AtsBreakdown, compute_ats_breakdown, format_ats_report, score_resume
from .errors import EditError, InvalidDocumentError
from .experience_quality import ACTION_VERBS, ExperienceQualityResult, experience_quality
from .formatting_signals import DATE_PATTERN, FormattingSignalsResult, formatting_signals
from .keyword_coverage import KEYWORD_BUCKETS, KeywordCoverageResult, keyword_coverage
from .readiness import ExportDecision, ReadinessResult, compute_readiness, evaluate_export, is_ready_for_export
from .resume_document import (
    ResumeDocument,
    coerce_document,
    create_empty_education,
    create_empty_experience,
    create_empty_project,
    empty_resume,
    sample_resume,
)
from .resume_editor import (
    add_array_item,
    remove_array_item,
    reset_resume,
    set_resume,
    update_array_item,
    update_field,
    update_section,
)
from .section_completeness import SectionCompletenessResult, section_completeness
from .section_tips import section_tips
from .text import collect_text, normalize

__all__ = [
    # Document
    "ResumeDocument",
    "coerce_document",
    "empty_resume",
    "sample_resume",
    "create_empty_experience",
    "create_empty_education",
    "create_empty_project",
    # Errors
    "InvalidDocumentError",
    "EditError",
    # Text
    "collect_text",
    "normalize",
    # Analyzers
    "keyword_coverage",
    "KEYWORD_BUCKETS",
    "KeywordCoverageResult",
    "section_completeness",
    "SectionCompletenessResult",
    "experience_quality",
    "ACTION_VERBS",
    "ExperienceQualityResult",
    "formatting_signals",
    "DATE_PATTERN",
    "FormattingSignalsResult",
    # Breakdown
    "compute_ats_breakdown",
    "score_resume",
    "format_ats_report",
    "AtsBreakdown",
    # Readiness
    "compute_readiness",
    "is_ready_for_export",
    "evaluate_export",
    "ReadinessResult",
    "ExportDecision",
    # Tips
    "section_tips",
    # Editor
    "update_section",
    "update_field",
    "add_array_item",
    "remove_array_item",
    "update_array_item",
    "set_resume",
    "reset_resume",
]
