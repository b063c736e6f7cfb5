"""Stateless scoring endpoints: score a document sent in the request body."""

from __future__ import annotations

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends
from pydantic import BaseModel

from .....engine import ScoringEngine
from ..deps import get_engine

router = APIRouter(tags=["scoring"])


class ReadinessResponse(BaseModel):
    completenessScore: int
    missingSections: List[str]
    isReadyForExport: bool


@router.post("/score")
async def score_document(
    document: Dict[str, Any] = Body(...),
    engine: ScoringEngine = Depends(get_engine),
) -> Dict[str, Any]:
    return engine.breakdown(document).to_dict()


@router.post("/readiness", response_model=ReadinessResponse)
async def readiness_for_document(
    document: Dict[str, Any] = Body(...),
    engine: ScoringEngine = Depends(get_engine),
) -> ReadinessResponse:
    return ReadinessResponse(**engine.readiness(document).to_dict())
