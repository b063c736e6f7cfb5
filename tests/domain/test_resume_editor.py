"""Tests for the pure resume edit operations."""

import copy

import pytest

from resume_ats.domain import (
    EditError,
    InvalidDocumentError,
    ResumeDocument,
    add_array_item,
    remove_array_item,
    reset_resume,
    set_resume,
    update_array_item,
    update_field,
    update_section,
)

NOW = "2025-01-02T03:04:05Z"


class TestUpdateSection:
    def test_replaces_section_without_mutating_input(self, focused_doc):
        snapshot = copy.deepcopy(focused_doc)
        result = update_section(focused_doc, "summary", "New summary", now=NOW)
        assert isinstance(result, ResumeDocument)
        assert result.summary == "New summary"
        assert result.metadata.last_updated == NOW
        assert focused_doc == snapshot

    def test_unknown_section(self, focused_doc):
        with pytest.raises(EditError, match="Unknown section"):
            update_section(focused_doc, "hobbies", [])

    def test_wrong_section_type_is_rejected(self, focused_doc):
        with pytest.raises(InvalidDocumentError):
            update_section(focused_doc, "skills", "python")

    def test_stamps_current_time_by_default(self, focused_doc):
        result = update_section(focused_doc, "skills", ["Go"])
        assert result.metadata.last_updated.endswith("Z")


class TestUpdateField:
    def test_nested_basics_field(self, focused_doc):
        result = update_field(focused_doc, "basics.fullName", "Grace Hopper", now=NOW)
        assert result.basics.full_name == "Grace Hopper"
        assert result.basics.headline == "Backend Engineer"

    def test_list_index_path(self, focused_doc):
        result = update_field(focused_doc, "experience.0.role", "Staff Engineer", now=NOW)
        assert result.experience[0].role == "Staff Engineer"
        assert result.experience[0].company == "Acme"

    def test_bullet_by_index(self, focused_doc):
        result = update_field(focused_doc, "experience.0.bullets.1", "Shipped a billing rewrite", now=NOW)
        assert result.experience[0].bullets[1] == "Shipped a billing rewrite"
        assert len(result.experience[0].bullets) == 3

    def test_top_level_scalar(self, focused_doc):
        assert update_field(focused_doc, "summary", "Short", now=NOW).summary == "Short"

    @pytest.mark.parametrize(
        "path",
        ["", "basics..email", "unknown.field", "summary.text", "experience.5.role", "experience.first.role"],
    )
    def test_invalid_paths(self, focused_doc, path):
        with pytest.raises(EditError):
            update_field(focused_doc, path, "x")


class TestArrayItems:
    def test_add_object_item_generates_id(self, focused_doc):
        result = add_array_item(focused_doc, "projects", {"name": "CLI"}, now=NOW)
        assert len(result.projects) == 1
        assert result.projects[0].name == "CLI"
        assert result.projects[0].id.startswith("proj-")

    def test_add_keeps_existing_id(self, focused_doc):
        result = add_array_item(focused_doc, "education", {"id": "edu-9", "degree": "M.S."}, now=NOW)
        assert [e.id for e in result.education] == ["edu-1", "edu-9"]

    def test_add_skill(self, focused_doc):
        result = add_array_item(focused_doc, "skills", "Rust", now=NOW)
        assert result.skills[-1] == "Rust"

    def test_add_non_object_to_object_section(self, focused_doc):
        with pytest.raises(EditError, match="must be objects"):
            add_array_item(focused_doc, "experience", "Acme")

    def test_add_to_non_array_section(self, focused_doc):
        with pytest.raises(EditError):
            add_array_item(focused_doc, "summary", "text")

    def test_remove_by_id(self, focused_doc):
        result = remove_array_item(focused_doc, "experience", item_id="exp-1", now=NOW)
        assert result.experience == ()
        assert result.metadata.last_updated == NOW

    def test_remove_unknown_id_keeps_items(self, focused_doc):
        result = remove_array_item(focused_doc, "experience", item_id="exp-404", now=NOW)
        assert len(result.experience) == 1

    def test_remove_by_index(self, focused_doc):
        result = remove_array_item(focused_doc, "skills", index=1, now=NOW)
        assert result.skills == ("Python", "SQL", "Docker", "AWS")

    def test_remove_without_target_is_a_no_op(self, focused_doc):
        result = remove_array_item(focused_doc, "skills")
        assert result.skills == tuple(focused_doc["skills"])
        assert result.metadata.last_updated == ""

    def test_update_item_merges_and_keeps_id(self, focused_doc):
        result = update_array_item(
            focused_doc, "experience", "exp-1", {"company": "Globex", "id": "other"}, now=NOW
        )
        assert result.experience[0].company == "Globex"
        assert result.experience[0].id == "exp-1"
        assert result.experience[0].role == "Backend Engineer"

    def test_update_item_rejects_skills(self, focused_doc):
        with pytest.raises(EditError):
            update_array_item(focused_doc, "skills", "x", {})


class TestWholeDocument:
    def test_set_resume_normalizes(self):
        result = set_resume({"summary": None, "skills": ["Go"]}, now=NOW)
        assert result.summary == ""
        assert result.skills == ("Go",)
        assert result.metadata.last_updated == NOW

    def test_reset_resume_returns_sample(self):
        result = reset_resume(now=NOW)
        assert result.basics.full_name == "Sarah Johnson"
        assert result.metadata.last_updated == NOW

    def test_edits_chain(self, empty_doc):
        doc = update_field(empty_doc, "basics.fullName", "Ada", now=NOW)
        doc = add_array_item(doc, "experience", {"role": "Engineer"}, now=NOW)
        doc = update_field(doc, "experience.0.bullets", ["Led things"], now=NOW)
        assert doc.basics.full_name == "Ada"
        assert doc.experience[0].bullets == ("Led things",)
