"""Tests for the in-memory resume store."""

import asyncio

import pytest

from resume_ats.domain import EditError
from resume_ats.web.errors import APIError
from resume_ats.web.store import InMemoryResumeStore, make_id


def test_make_id_prefix() -> None:
    assert make_id("res").startswith("res_")
    assert make_id("res") != make_id("res")


@pytest.mark.asyncio
async def test_create_and_edit_bumps_revision(focused_doc) -> None:
    store = InMemoryResumeStore()
    record = await store.create_resume(focused_doc)
    assert record.revision == 1
    assert store.count() == 1

    record = await store.update_field(record.resume_id, "basics.headline", "Staff Engineer")
    assert record.revision == 2
    assert record.document.basics.headline == "Staff Engineer"


@pytest.mark.asyncio
async def test_failed_edit_leaves_record_unchanged(focused_doc) -> None:
    store = InMemoryResumeStore()
    record = await store.create_resume(focused_doc)
    before = record.document
    with pytest.raises(EditError):
        await store.update_section(record.resume_id, "hobbies", [])
    after = await store.get_resume(record.resume_id)
    assert after.document is before
    assert after.revision == 1


@pytest.mark.asyncio
async def test_missing_resume_raises_404() -> None:
    store = InMemoryResumeStore()
    with pytest.raises(APIError) as exc_info:
        await store.delete_resume("res_missing")
    assert exc_info.value.status_code == 404
    assert exc_info.value.code == "RESUME_NOT_FOUND"


@pytest.mark.asyncio
async def test_concurrent_edits_are_serialized() -> None:
    store = InMemoryResumeStore()
    record = await store.create_resume({"skills": []})
    await asyncio.gather(*(store.add_item(record.resume_id, "skills", f"skill-{i}") for i in range(10)))
    final = await store.get_resume(record.resume_id)
    assert len(final.document.skills) == 10
    assert final.revision == 11
