"""In-memory resume store for Web API v1.

Holds editable resume documents for the lifetime of the process.  Nothing is
persisted; a restart starts from an empty store.
"""

from __future__ import annotations

import asyncio
import uuid
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional

from ..domain import (
    ResumeDocument,
    add_array_item,
    remove_array_item,
    reset_resume,
    set_resume,
    update_array_item,
    update_field,
    update_section,
)
from ..domain.resume_document import utc_now_iso
from .errors import APIError


def make_id(prefix: str) -> str:
    """Create opaque id matching the documented prefix style."""
    return f"{prefix}_{uuid.uuid4().hex[:10]}"


@dataclass
class ResumeRecord:
    resume_id: str
    created_at: str
    document: ResumeDocument
    revision: int = 1


class InMemoryResumeStore:
    """Resume documents keyed by id, edited through the pure editor operations."""

    def __init__(self) -> None:
        self._resumes: Dict[str, ResumeRecord] = {}
        self._lock = asyncio.Lock()

    async def create_resume(self, document: Optional[Mapping[str, Any]] = None) -> ResumeRecord:
        doc = set_resume(document) if document is not None else reset_resume()
        record = ResumeRecord(resume_id=make_id("res"), created_at=utc_now_iso(), document=doc)
        async with self._lock:
            self._resumes[record.resume_id] = record
        return record

    async def get_resume(self, resume_id: str) -> ResumeRecord:
        async with self._lock:
            return self._require(resume_id)

    async def delete_resume(self, resume_id: str) -> None:
        async with self._lock:
            self._require(resume_id)
            del self._resumes[resume_id]

    async def replace_resume(self, resume_id: str, document: Mapping[str, Any]) -> ResumeRecord:
        return await self._apply(resume_id, lambda _: set_resume(document))

    async def reset(self, resume_id: str) -> ResumeRecord:
        return await self._apply(resume_id, lambda _: reset_resume())

    async def update_section(self, resume_id: str, section: str, payload: Any) -> ResumeRecord:
        return await self._apply(resume_id, lambda doc: update_section(doc, section, payload))

    async def update_field(self, resume_id: str, path: str, value: Any) -> ResumeRecord:
        return await self._apply(resume_id, lambda doc: update_field(doc, path, value))

    async def add_item(self, resume_id: str, section: str, item: Any) -> ResumeRecord:
        return await self._apply(resume_id, lambda doc: add_array_item(doc, section, item))

    async def update_item(
        self,
        resume_id: str,
        section: str,
        item_id: str,
        updates: Mapping[str, Any],
    ) -> ResumeRecord:
        return await self._apply(resume_id, lambda doc: update_array_item(doc, section, item_id, updates))

    async def remove_item(
        self,
        resume_id: str,
        section: str,
        item_id: Optional[str] = None,
        index: Optional[int] = None,
    ) -> ResumeRecord:
        return await self._apply(
            resume_id, lambda doc: remove_array_item(doc, section, item_id=item_id, index=index)
        )

    def count(self) -> int:
        return len(self._resumes)

    async def _apply(self, resume_id: str, edit: Callable[[ResumeDocument], ResumeDocument]) -> ResumeRecord:
        async with self._lock:
            record = self._require(resume_id)
            record.document = edit(record.document)
            record.revision += 1
            return record

    def _require(self, resume_id: str) -> ResumeRecord:
        record = self._resumes.get(resume_id)
        if record is None:
            raise APIError(404, "RESUME_NOT_FOUND", f"Resume not found: {resume_id}", {"resume_id": resume_id})
        return record
