"""Tests for the profile, audit and report merge rules."""

import itertools

import pytest

from site_ranker.merge import (
    AUDIT_FLAGS,
    MergeInconsistencyError,
    merge_all,
    merge_audits,
    merge_profiles,
    merge_reports,
)
from site_ranker.models import (
    AnalysisProfile,
    BusinessCategory,
    ExistingSeoAudit,
    Keyword,
    KeywordDensityReport,
    OptimizationReport,
    Priority,
    Recommendation,
    RecommendationCategory,
    SentimentResult,
    TitleSuggestion,
)


def _recommendation(message: str) -> Recommendation:
    return Recommendation(
        category=RecommendationCategory.TECHNICAL,
        priority=Priority.LOW,
        message=message,
        action="",
    )


class TestMergeAudits:
    """Tests for merge_audits."""

    def test_flags_or_and_counters_sum(self):
        left = ExistingSeoAudit(has_title=True, h1_count=1, images_missing_alt=2)
        right = ExistingSeoAudit(has_schema=True, h1_count=3, images_missing_alt=1)

        merged = merge_audits(left, right)

        assert merged.has_title
        assert merged.has_schema
        assert not merged.has_og_tags
        assert merged.h1_count == 4
        assert merged.images_missing_alt == 3

    def test_text_replaced_only_by_present_value(self):
        left = ExistingSeoAudit(title="Old title", description="Old description")
        right = ExistingSeoAudit(title="New title", description="")

        merged = merge_audits(left, right)

        assert merged.title == "New title"
        assert merged.description == "Old description"

    def test_schema_types_ordered_union(self):
        left = ExistingSeoAudit(schema_types=["Store", "Product"])
        right = ExistingSeoAudit(schema_types=["Product", "FAQPage"])
        assert merge_audits(left, right).schema_types == ["Store", "Product", "FAQPage"]

    def test_inputs_not_modified(self):
        left = ExistingSeoAudit(h1_count=1, schema_types=["Store"])
        right = ExistingSeoAudit(h1_count=1, has_title=True)

        merge_audits(left, right)

        assert left.h1_count == 1
        assert left.schema_types == ["Store"]
        assert not left.has_title

    def test_negative_counter_rejected(self):
        with pytest.raises(MergeInconsistencyError, match="h1_count"):
            merge_audits(ExistingSeoAudit(h1_count=-1), ExistingSeoAudit())


class TestMergeProfiles:
    """Tests for merge_profiles."""

    def test_known_category_replaces_unknown(self):
        """Test that a later Unknown never overwrites a known category."""
        p1 = AnalysisProfile(
            business_category=BusinessCategory.UNKNOWN,
            existing_seo=ExistingSeoAudit(h1_count=1),
        )
        p2 = AnalysisProfile(
            business_category=BusinessCategory.ECOMMERCE,
            existing_seo=ExistingSeoAudit(h1_count=1),
        )

        merged = merge_profiles(p1, p2)

        assert merged.business_category == BusinessCategory.ECOMMERCE
        assert merged.existing_seo.h1_count == 2
        assert merge_profiles(merged, p1).business_category == BusinessCategory.ECOMMERCE

    def test_later_known_category_wins(self):
        left = AnalysisProfile(business_category=BusinessCategory.BLOG)
        right = AnalysisProfile(business_category=BusinessCategory.SAAS)
        assert merge_profiles(left, right).business_category == BusinessCategory.SAAS

    def test_keywords_left_wins_duplicates(self):
        left = AnalysisProfile(keywords=[Keyword("garden", 3, 9.0)])
        right = AnalysisProfile(keywords=[Keyword("garden", 7, 20.0), Keyword("tools", 2, 4.0)])

        merged = merge_profiles(left, right)

        assert [kw.word for kw in merged.keywords] == ["garden", "tools"]
        assert merged.keywords[0].frequency == 3

    def test_scalars_replaced_by_present_values(self):
        left = AnalysisProfile(
            language="en",
            content_summary="Left summary",
            sentiment_score=0.5,
            raw_text="left text",
        )
        right = AnalysisProfile(language="de", content_summary="", sentiment_score=None)

        merged = merge_profiles(left, right)

        assert merged.language == "de"
        assert merged.content_summary == "Left summary"
        assert merged.sentiment_score == 0.5
        assert merged.raw_text == "left text"

    def test_zero_sentiment_is_a_value(self):
        left = AnalysisProfile(sentiment_score=0.7)
        right = AnalysisProfile(sentiment_score=0.0)
        assert merge_profiles(left, right).sentiment_score == 0.0

    def test_not_commutative(self):
        left = AnalysisProfile(language="en")
        right = AnalysisProfile(language="fr")
        assert merge_profiles(left, right).language == "fr"
        assert merge_profiles(right, left).language == "en"

    def test_self_merge(self, sample_profile):
        """Test that merging a profile with itself doubles counters only."""
        merged = merge_profiles(sample_profile, sample_profile)

        for flag in AUDIT_FLAGS:
            assert getattr(merged.existing_seo, flag) == getattr(sample_profile.existing_seo, flag)
        assert merged.existing_seo.h1_count == 2 * sample_profile.existing_seo.h1_count
        assert merged.keywords == sample_profile.keywords
        assert merged.business_category == sample_profile.business_category
        assert merged.raw_text == sample_profile.raw_text

    def test_inputs_not_modified(self, sample_profile):
        other = AnalysisProfile(keywords=[Keyword("extra", 1, 1.0)], language="fr")
        merge_profiles(sample_profile, other)

        assert len(sample_profile.keywords) == 4
        assert sample_profile.language == "en"
        assert other.keywords == [Keyword("extra", 1, 1.0)]

    def test_duplicate_keywords_rejected(self):
        broken = AnalysisProfile(keywords=[Keyword("same", 1, 1.0), Keyword("same", 2, 2.0)])
        with pytest.raises(MergeInconsistencyError, match="Duplicate keyword"):
            merge_profiles(AnalysisProfile(), broken)

    def test_invalid_category_rejected(self):
        broken = AnalysisProfile(business_category="Blog")
        with pytest.raises(MergeInconsistencyError, match="Invalid business category"):
            merge_profiles(broken, AnalysisProfile())

    def test_inconsistency_is_an_assertion(self):
        assert issubclass(MergeInconsistencyError, AssertionError)


class TestMergeProperties:
    """Invariants that hold for every combination of audit flags."""

    @pytest.mark.parametrize("flags", list(itertools.product([False, True], repeat=3)))
    def test_flags_never_turn_off(self, flags):
        has_title, has_schema, has_og = flags
        audit = ExistingSeoAudit(has_title=has_title, has_schema=has_schema, has_og_tags=has_og)

        merged = merge_audits(audit, ExistingSeoAudit())

        assert merged.has_title == has_title
        assert merged.has_schema == has_schema
        assert merged.has_og_tags == has_og
        assert merge_audits(ExistingSeoAudit(), audit).has_title == has_title

    def test_no_duplicate_keywords_after_many_merges(self):
        profiles = [
            AnalysisProfile(keywords=[Keyword(word, i, float(i)) for word in ("a", "b", "c")])
            for i in range(1, 5)
        ]
        merged = merge_all(profiles)
        words = [kw.word for kw in merged.keywords]
        assert words == ["a", "b", "c"]
        assert all(kw.frequency == 1 for kw in merged.keywords)


class TestMergeAll:
    """Tests for merge_all."""

    def test_empty_input(self):
        assert merge_all([]) == AnalysisProfile()

    def test_folds_in_order(self):
        profiles = [
            AnalysisProfile(language="en", existing_seo=ExistingSeoAudit(h1_count=1)),
            AnalysisProfile(business_category=BusinessCategory.BLOG),
            AnalysisProfile(language="de", existing_seo=ExistingSeoAudit(h1_count=2)),
        ]
        merged = merge_all(profiles)

        assert merged.language == "de"
        assert merged.business_category == BusinessCategory.BLOG
        assert merged.existing_seo.h1_count == 3


class TestMergeReports:
    """Tests for merge_reports."""

    def test_lists_concatenate(self):
        left = OptimizationReport(
            title_suggestions=[TitleSuggestion("A", 0.5, "first")],
            recommendations=[_recommendation("one")],
        )
        right = OptimizationReport(
            title_suggestions=[TitleSuggestion("B", 0.9, "second")],
            recommendations=[_recommendation("two")],
        )

        merged = merge_reports(left, right)

        assert [s.text for s in merged.title_suggestions] == ["A", "B"]
        assert [r.message for r in merged.recommendations] == ["one", "two"]

    def test_present_values_replace(self):
        first = SentimentResult(score=0.1)
        second = SentimentResult(score=0.9)
        density = KeywordDensityReport(density=2.0)

        merged = merge_reports(
            OptimizationReport(sentiment=first, keyword_density=density),
            OptimizationReport(sentiment=second),
        )

        assert merged.sentiment is second
        assert merged.keyword_density is density

    def test_score_running_average(self):
        """Test that reported scores are averaged with integer division."""
        report = OptimizationReport()
        report = merge_reports(report, OptimizationReport(optimization_score=80))
        assert report.optimization_score == 80

        report = merge_reports(report, OptimizationReport(optimization_score=41))
        assert report.optimization_score == 60

        report = merge_reports(report, OptimizationReport())
        assert report.optimization_score == 60

    def test_no_scores(self):
        merged = merge_reports(OptimizationReport(), OptimizationReport())
        assert merged.optimization_score is None
