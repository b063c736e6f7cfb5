"""Resume endpoints for Web API v1: edit stored documents and read their scores."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Query, status
from pydantic import BaseModel, Field

from .....engine import ScoringEngine
from ....errors import APIError
from ....store import InMemoryResumeStore, ResumeRecord
from ..deps import get_engine, get_store

router = APIRouter(prefix="/resumes", tags=["resumes"])


class CreateResumeRequest(BaseModel):
    resume: Optional[Dict[str, Any]] = None


class ResumeResponse(BaseModel):
    resume_id: str
    created_at: str
    revision: int
    resume: Dict[str, Any]


class UpdateFieldRequest(BaseModel):
    path: str = Field(min_length=1)
    value: Any = None


class ExportCheckResponse(BaseModel):
    canExport: bool
    totalScore: int
    minScore: int
    readiness: Dict[str, Any]
    blockerReasons: List[str]


def _to_response(record: ResumeRecord) -> ResumeResponse:
    return ResumeResponse(
        resume_id=record.resume_id,
        created_at=record.created_at,
        revision=record.revision,
        resume=record.document.to_dict(),
    )


@router.post("", response_model=ResumeResponse, status_code=status.HTTP_201_CREATED)
async def create_resume(
    request: Optional[CreateResumeRequest] = None,
    store: InMemoryResumeStore = Depends(get_store),
) -> ResumeResponse:
    record = await store.create_resume(request.resume if request else None)
    return _to_response(record)


@router.get("/{resume_id}", response_model=ResumeResponse)
async def get_resume(resume_id: str, store: InMemoryResumeStore = Depends(get_store)) -> ResumeResponse:
    return _to_response(await store.get_resume(resume_id))


@router.put("/{resume_id}", response_model=ResumeResponse)
async def replace_resume(
    resume_id: str,
    document: Dict[str, Any] = Body(...),
    store: InMemoryResumeStore = Depends(get_store),
) -> ResumeResponse:
    return _to_response(await store.replace_resume(resume_id, document))


@router.delete("/{resume_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_resume(resume_id: str, store: InMemoryResumeStore = Depends(get_store)) -> None:
    await store.delete_resume(resume_id)


@router.post("/{resume_id}/reset", response_model=ResumeResponse)
async def reset_resume(resume_id: str, store: InMemoryResumeStore = Depends(get_store)) -> ResumeResponse:
    return _to_response(await store.reset(resume_id))


@router.put("/{resume_id}/sections/{section}", response_model=ResumeResponse)
async def update_section(
    resume_id: str,
    section: str,
    payload: Any = Body(...),
    store: InMemoryResumeStore = Depends(get_store),
) -> ResumeResponse:
    return _to_response(await store.update_section(resume_id, section, payload))


@router.patch("/{resume_id}/fields", response_model=ResumeResponse)
async def update_field(
    resume_id: str,
    request: UpdateFieldRequest,
    store: InMemoryResumeStore = Depends(get_store),
) -> ResumeResponse:
    return _to_response(await store.update_field(resume_id, request.path, request.value))


@router.post(
    "/{resume_id}/sections/{section}/items",
    response_model=ResumeResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_item(
    resume_id: str,
    section: str,
    item: Any = Body(...),
    store: InMemoryResumeStore = Depends(get_store),
) -> ResumeResponse:
    return _to_response(await store.add_item(resume_id, section, item))


@router.patch("/{resume_id}/sections/{section}/items/{item_id}", response_model=ResumeResponse)
async def update_item(
    resume_id: str,
    section: str,
    item_id: str,
    updates: Dict[str, Any] = Body(...),
    store: InMemoryResumeStore = Depends(get_store),
) -> ResumeResponse:
    return _to_response(await store.update_item(resume_id, section, item_id, updates))


@router.delete("/{resume_id}/sections/{section}/items/{item_id}", response_model=ResumeResponse)
async def remove_item(
    resume_id: str,
    section: str,
    item_id: str,
    store: InMemoryResumeStore = Depends(get_store),
) -> ResumeResponse:
    return _to_response(await store.remove_item(resume_id, section, item_id=item_id))


@router.delete("/{resume_id}/sections/{section}/items", response_model=ResumeResponse)
async def remove_item_at(
    resume_id: str,
    section: str,
    index: Optional[int] = Query(default=None, ge=0),
    store: InMemoryResumeStore = Depends(get_store),
) -> ResumeResponse:
    if index is None:
        raise APIError(400, "BAD_REQUEST", "Query parameter 'index' is required")
    return _to_response(await store.remove_item(resume_id, section, index=index))


# ---------------------------------------------------------------------------
# Derived views -- recomputed from the current document on every read
# ---------------------------------------------------------------------------


@router.get("/{resume_id}/ats")
async def get_ats_breakdown(
    resume_id: str,
    store: InMemoryResumeStore = Depends(get_store),
    engine: ScoringEngine = Depends(get_engine),
) -> Dict[str, Any]:
    record = await store.get_resume(resume_id)
    return engine.breakdown(record.document, resume_id=resume_id).to_dict()


@router.get("/{resume_id}/readiness")
async def get_readiness(
    resume_id: str,
    store: InMemoryResumeStore = Depends(get_store),
    engine: ScoringEngine = Depends(get_engine),
) -> Dict[str, Any]:
    record = await store.get_resume(resume_id)
    return engine.readiness(record.document, resume_id=resume_id).to_dict()


@router.get("/{resume_id}/tips")
async def get_tips(
    resume_id: str,
    store: InMemoryResumeStore = Depends(get_store),
    engine: ScoringEngine = Depends(get_engine),
) -> Dict[str, List[str]]:
    record = await store.get_resume(resume_id)
    return engine.tips(record.document, resume_id=resume_id)


@router.get("/{resume_id}/export-check", response_model=ExportCheckResponse)
async def get_export_check(
    resume_id: str,
    min_score: Optional[int] = Query(default=None, ge=0, le=100),
    store: InMemoryResumeStore = Depends(get_store),
    engine: ScoringEngine = Depends(get_engine),
) -> ExportCheckResponse:
    record = await store.get_resume(resume_id)
    decision = engine.export_check(record.document, resume_id=resume_id, min_score=min_score)
    return ExportCheckResponse(**decision.to_dict())
