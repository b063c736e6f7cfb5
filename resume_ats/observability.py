"""Observability for scoring operations - logging and event tracking."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional

from rich.table import Table

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Configure the ``resume_ats`` logger once; later calls only adjust the level."""
    logger = logging.getLogger("resume_ats")
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
        logger.addHandler(handler)
    logger.setLevel(logging.INFO if verbose else logging.WARNING)
    return logger


@dataclass
class ScoringEvent:
    """A single scoring computation or failure."""

    timestamp: datetime
    event_type: str  # "breakdown", "readiness", "export_check", "error"
    data: Dict[str, Any]
    duration_ms: Optional[float] = None
    cached: bool = False


class ScoringObserver:
    """
    Tracks scoring computations for debugging and monitoring.

    Collects events and logs them under the ``resume_ats.scoring`` logger.
    """

    def __init__(self, source: Optional[str] = None, max_events: int = 1000):
        self.events: List[ScoringEvent] = []
        self.logger = logging.getLogger("resume_ats.scoring")
        self.source = source
        self.max_events = max_events

    def _prefix(self) -> str:
        return f"[{self.source}] " if self.source else ""

    def _record(self, event: ScoringEvent) -> None:
        self.events.append(event)
        if len(self.events) > self.max_events:
            del self.events[: len(self.events) - self.max_events]

    def log_computation(
        self,
        name: str,
        duration_ms: float,
        cached: bool = False,
        resume_id: Optional[str] = None,
        **data: Any,
    ) -> None:
        """
        Log a scoring computation.

        Args:
            name: Computation name (e.g. "breakdown", "readiness")
            duration_ms: Wall time in milliseconds
            cached: Whether the result came from the content-hash cache
            resume_id: Stored resume the computation ran for, if any
        """
        payload = {"resume_id": resume_id, **data}
        self._record(
            ScoringEvent(
                timestamp=datetime.now(),
                event_type=name,
                data=payload,
                duration_ms=duration_ms,
                cached=cached,
            )
        )
        cache_indicator = " [CACHED]" if cached else ""
        details = " ".join(f"{k}={v}" for k, v in payload.items() if v is not None)
        self.logger.info(f"{self._prefix()}{name}{cache_indicator} ({duration_ms:.2f}ms) {details}".rstrip())

    def log_error(self, error_type: str, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        self._record(
            ScoringEvent(
                timestamp=datetime.now(),
                event_type="error",
                data={"error_type": error_type, "message": message, "context": context or {}},
            )
        )
        self.logger.error(f"{self._prefix()}Error ({error_type}): {message}")

    def get_stats(self) -> Dict[str, Any]:
        computations = [e for e in self.events if e.event_type != "error"]
        cached = sum(1 for e in computations if e.cached)
        return {
            "event_count": len(self.events),
            "computations": len(computations),
            "errors": len(self.events) - len(computations),
            "cache_hit_rate": cached / len(computations) if computations else 0.0,
            "total_duration_ms": sum(e.duration_ms or 0 for e in computations),
        }

    def summary_table(self) -> Table:
        """Render :meth:`get_stats` as a rich table."""
        stats = self.get_stats()
        table = Table(title="Scoring Summary")
        table.add_column("Metric")
        table.add_column("Value", justify="right")
        table.add_row("Events", str(stats["event_count"]))
        table.add_row("Computations", str(stats["computations"]))
        table.add_row("Errors", str(stats["errors"]))
        table.add_row("Cache hit rate", f"{stats['cache_hit_rate']:.1%}")
        table.add_row("Total time", f"{stats['total_duration_ms']:.2f}ms")
        return table
