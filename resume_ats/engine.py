"""Scoring engine facade: pure domain calls wrapped with caching and observability."""

from __future__ import annotations

import time
from typing import Any, Callable, Dict, List, Optional, TypeVar

from .cache import ScoringCache
from .config import EngineConfig
from .domain import (
    AtsBreakdown,
    ExportDecision,
    InvalidDocumentError,
    ReadinessResult,
    coerce_document,
    compute_ats_breakdown,
    compute_readiness,
    evaluate_export,
    section_tips,
)
from .observability import ScoringObserver

T = TypeVar("T")


class ScoringEngine:
    """Runs the scoring pipeline for callers that re-score on every edit.

    Results for identical content are served from a :class:`ScoringCache`
    when caching is enabled.
    """

    def __init__(self, config: Optional[EngineConfig] = None, observer: Optional[ScoringObserver] = None):
        self.config = config or EngineConfig()
        self.observer = observer or ScoringObserver()
        self.cache: Optional[ScoringCache] = (
            ScoringCache(ttl_seconds=self.config.cache_ttl_seconds, max_entries=self.config.cache_max_entries)
            if self.config.cache_enabled
            else None
        )

    def breakdown(self, document: Any, resume_id: Optional[str] = None) -> AtsBreakdown:
        return self._run("breakdown", document, compute_ats_breakdown, resume_id)

    def readiness(self, document: Any, resume_id: Optional[str] = None) -> ReadinessResult:
        return self._run("readiness", document, compute_readiness, resume_id)

    def export_check(
        self,
        document: Any,
        resume_id: Optional[str] = None,
        min_score: Optional[int] = None,
    ) -> ExportDecision:
        threshold = self.config.min_export_score if min_score is None else min_score
        total = self.breakdown(document, resume_id).total_score
        start = time.perf_counter()
        decision = evaluate_export(document, min_score=threshold, total_score=total)
        self.observer.log_computation(
            "export_check",
            (time.perf_counter() - start) * 1000,
            resume_id=resume_id,
            can_export=decision.can_export,
        )
        return decision

    def tips(self, document: Any, resume_id: Optional[str] = None) -> Dict[str, List[str]]:
        breakdown = self.breakdown(document, resume_id)
        return section_tips(document, breakdown=breakdown)

    def _run(
        self,
        name: str,
        document: Any,
        compute: Callable[[Any], T],
        resume_id: Optional[str],
    ) -> T:
        start = time.perf_counter()
        try:
            doc = coerce_document(document)
        except InvalidDocumentError as e:
            self.observer.log_error("invalid_document", str(e), {"computation": name, "resume_id": resume_id})
            raise

        cached = False
        if self.cache is not None:
            result = self.cache.get(name, doc)
            if result is not None:
                cached = True
            else:
                result = compute(doc)
                self.cache.set(name, doc, result)
        else:
            result = compute(doc)

        self.observer.log_computation(
            name,
            (time.perf_counter() - start) * 1000,
            cached=cached,
            resume_id=resume_id,
        )
        return result
