"""Tests for the ATS breakdown aggregator."""

import copy

import pytest

from resume_ats.domain import KEYWORD_BUCKETS, compute_ats_breakdown, format_ats_report, score_resume
from resume_ats.domain.experience_quality import FEW_BULLETS_ISSUE, NO_EXPERIENCE_ISSUE
from resume_ats.domain.text import round_half_up

EVERY_KEYWORD = " ".join(kw for bucket in KEYWORD_BUCKETS.values() for kw in bucket)


class TestTotals:
    def test_focused_document(self, focused_doc):
        result = compute_ats_breakdown(focused_doc)
        assert result.categories == {"keywords": 22, "completeness": 23, "experience": 16, "formatting": 20}
        raw_total = (
            result.keyword_coverage.score
            + result.section_completeness.score
            + result.experience_quality.score
            + result.formatting_signals.score
        )
        assert raw_total == pytest.approx(80.8786, abs=1e-3)
        assert result.total_score == 81

    def test_total_rounds_the_unrounded_sum(self, sample_doc):
        result = compute_ats_breakdown(sample_doc)
        raw_total = (
            result.keyword_coverage.score
            + result.section_completeness.score
            + result.experience_quality.score
            + result.formatting_signals.score
        )
        assert result.total_score == round_half_up(raw_total)

    def test_empty_document(self, empty_doc):
        result = compute_ats_breakdown(empty_doc)
        assert result.categories == {"keywords": 0, "completeness": 0, "experience": 0, "formatting": 16}
        assert result.total_score == 16
        assert result.experience_quality.score == 0
        assert result.keyword_coverage.score == 0

    @pytest.mark.parametrize(
        "doc",
        [
            {},
            {"summary": EVERY_KEYWORD, "skills": ["led"]},
            {"experience": [{"bullets": ["x"] * 30, "startDate": "bad"}]},
        ],
    )
    def test_scores_stay_within_caps(self, doc):
        result = compute_ats_breakdown(doc)
        assert 0 <= result.total_score <= 100
        assert 0 <= result.keyword_coverage.score <= 35
        assert 0 <= result.section_completeness.score <= 25
        assert 0 <= result.experience_quality.score <= 20
        assert 0 <= result.formatting_signals.score <= 20

    def test_sample_scores_within_bounds(self, sample_doc):
        result = compute_ats_breakdown(sample_doc)
        assert 0 <= result.total_score <= 100
        assert score_resume(sample_doc) == result.total_score


class TestImprovementAreas:
    def test_capped_at_eight(self, empty_doc):
        result = compute_ats_breakdown(empty_doc)
        assert len(result.improvement_areas) == 8
        assert result.improvement_areas[0] == 'Work in keyword "improved" for ATS relevance.'

    def test_skill_gaps_come_first(self, focused_doc):
        focused_doc["skills"] = ["Rust"] + focused_doc["skills"]
        result = compute_ats_breakdown(focused_doc)
        assert result.improvement_areas[0] == 'Use skill "rust" in your bullets.'
        assert result.improvement_areas[1] == 'Work in keyword "improved" for ATS relevance.'

    def test_priority_order_after_keywords(self):
        result = compute_ats_breakdown({"summary": EVERY_KEYWORD})
        assert result.keyword_coverage.missing_keywords == []
        assert result.improvement_areas == [
            "Complete the basics section.",
            "Complete the experience section.",
            "Complete the education section.",
            "Complete the skills section.",
            "Complete the projects section.",
            NO_EXPERIENCE_ISSUE,
            "Add missing contact details (email, phone, location).",
        ]
        assert result.total_score == 37

    def test_experience_issue_follows_section_gaps(self, focused_doc):
        focused_doc["summary"] = focused_doc["summary"] + " " + EVERY_KEYWORD
        result = compute_ats_breakdown(focused_doc)
        assert result.improvement_areas == ["Complete the projects section.", FEW_BULLETS_ISSUE]


class TestPurity:
    def test_deterministic(self, sample_doc):
        first = compute_ats_breakdown(sample_doc).to_dict()
        second = compute_ats_breakdown(copy.deepcopy(sample_doc)).to_dict()
        assert first == second

    def test_input_not_mutated(self, sample_doc):
        snapshot = copy.deepcopy(sample_doc)
        compute_ats_breakdown(sample_doc)
        assert sample_doc == snapshot

    def test_to_dict_shape(self, focused_doc):
        data = compute_ats_breakdown(focused_doc).to_dict()
        assert set(data) == {
            "totalScore",
            "categories",
            "keywordCoverage",
            "sectionCompleteness",
            "experienceQuality",
            "formattingSignals",
            "improvementAreas",
        }
        assert data["sectionCompleteness"]["missingSections"] == ["projects"]


class TestReport:
    def test_report_lists_categories_and_improvements(self, focused_doc):
        report = format_ats_report(compute_ats_breakdown(focused_doc))
        assert report.startswith("## ATS Score: 81/100 Excellent")
        for label in ("Keywords", "Completeness", "Experience", "Formatting"):
            assert label in report
        assert "### Improvement Areas" in report
        assert "1. Work in keyword" in report

    def test_report_grades(self, empty_doc):
        assert "Needs Work" in format_ats_report(compute_ats_breakdown(empty_doc))
