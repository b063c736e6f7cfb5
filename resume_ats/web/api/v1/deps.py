"""Dependency providers for v1 API."""

from __future__ import annotations

from fastapi import Request

from ....engine import ScoringEngine
from ...store import InMemoryResumeStore


def get_store(request: Request) -> InMemoryResumeStore:
    """Access shared resume store from app state."""
    return request.app.state.resume_store


def get_engine(request: Request) -> ScoringEngine:
    """Access shared scoring engine from app state."""
    return request.app.state.scoring_engine
