"""
Final scoring and recommendation synthesis.

The optimization score (0-100) weighs four signals:

    40%  SEO completeness        completeness * 40 // 100
    20%  sentiment               int((score + 1) / 2 * 20)
    20%  keyword density         int(density_score * 20)
    20%  content volume          min(keyword_count, 10) * 2

Recommendations are produced by a fixed rule set over the merged
profile and sorted by descending priority; equal priorities keep the
order in which they were generated.
"""

import math
from typing import Iterable, Optional

from .config import AnalysisConfig
from .models import (
    AnalysisProfile,
    ExistingSeoAudit,
    OptimizationReport,
    Priority,
    Recommendation,
    RecommendationCategory,
)
from .trends import FAQ_SCHEMA_TYPES, REVIEW_SCHEMA_TYPES, TrendingSchema

# Keyword count at which the content-volume component is maxed out
CONTENT_VOLUME_CAP = 10


class ScoringError(Exception):
    """Raised when a profile cannot be scored."""
    pass


def validate_profile(profile: AnalysisProfile) -> None:
    """
    Check that profile can be scored.

    Raises:
        ScoringError: If profile is not an AnalysisProfile or carries a
            sentiment score outside [-1, 1].
    """
    if not isinstance(profile, AnalysisProfile):
        raise ScoringError(
            f"Expected AnalysisProfile, got {type(profile).__name__}"
        )
    sentiment = profile.sentiment_score
    if sentiment is not None and (math.isnan(sentiment) or not -1.0 <= sentiment <= 1.0):
        raise ScoringError(f"Sentiment score out of range: {sentiment}")


def completeness_score(audit: ExistingSeoAudit) -> int:
    """SEO completeness (0-100) from the audit's presence flags."""
    return audit.completeness_score()


def final_optimization_score(report: OptimizationReport, profile: AnalysisProfile) -> int:
    """
    Compute the authoritative optimization score.

    Args:
        report: Merged report of the scoring stages.
        profile: The profile that was scored.

    Returns:
        Integer score clamped to 100.
    """
    score = completeness_score(profile.existing_seo) * 40 // 100

    sentiment: Optional[float] = None
    if report.sentiment is not None:
        sentiment = report.sentiment.score
    elif profile.sentiment_score is not None:
        sentiment = profile.sentiment_score
    if sentiment is not None:
        score += int((sentiment + 1.0) / 2.0 * 20.0)

    if report.keyword_density is not None:
        score += int(report.keyword_density.density_score * 20.0)

    score += min(len(profile.keywords), CONTENT_VOLUME_CAP) * 2

    return min(score, 100)


def synthesize_recommendations(
    profile: AnalysisProfile,
    config: Optional[AnalysisConfig] = None,
) -> list[Recommendation]:
    """
    Apply the recommendation rule set to a profile.

    Args:
        profile: Merged analysis profile.
        config: Analysis configuration (title length bounds).

    Returns:
        Recommendations in rule order (unsorted).
    """
    config = config or AnalysisConfig()
    seo = profile.existing_seo
    recommendations = []

    if not seo.has_title:
        recommendations.append(Recommendation(
            category=RecommendationCategory.TITLE,
            priority=Priority.CRITICAL,
            message="Missing title tag",
            action="Add a descriptive title tag (50-60 characters)",
        ))
    elif seo.title is not None:
        min_length, max_length = config.title_length
        if len(seo.title) < min_length:
            recommendations.append(Recommendation(
                category=RecommendationCategory.TITLE,
                priority=Priority.MEDIUM,
                message="Title too short",
                action="Expand title to 50-60 characters for better CTR",
            ))
        elif len(seo.title) > max_length:
            recommendations.append(Recommendation(
                category=RecommendationCategory.TITLE,
                priority=Priority.MEDIUM,
                message="Title too long",
                action=f"Shorten title to {max_length} characters to avoid truncation",
            ))

    if not seo.has_description:
        recommendations.append(Recommendation(
            category=RecommendationCategory.DESCRIPTION,
            priority=Priority.CRITICAL,
            message="Missing meta description",
            action="Add a compelling meta description (150-160 characters)",
        ))

    if not seo.has_schema:
        recommendations.append(Recommendation(
            category=RecommendationCategory.SCHEMA,
            priority=Priority.HIGH,
            message="Missing Schema.org structured data",
            action="Add JSON-LD schema for rich snippets in search results",
        ))

    if not seo.has_og_tags:
        recommendations.append(Recommendation(
            category=RecommendationCategory.SOCIAL,
            priority=Priority.HIGH,
            message="Missing Open Graph tags",
            action="Add OG tags for better social media sharing",
        ))

    if not seo.has_twitter_cards:
        recommendations.append(Recommendation(
            category=RecommendationCategory.SOCIAL,
            priority=Priority.MEDIUM,
            message="Missing Twitter Cards",
            action="Add Twitter Card meta tags for better Twitter previews",
        ))

    if seo.h1_count == 0:
        recommendations.append(Recommendation(
            category=RecommendationCategory.TECHNICAL,
            priority=Priority.HIGH,
            message="Missing H1 heading",
            action="Add exactly one H1 heading per page",
        ))
    elif seo.h1_count > 1:
        recommendations.append(Recommendation(
            category=RecommendationCategory.TECHNICAL,
            priority=Priority.MEDIUM,
            message=f"Multiple H1 headings ({seo.h1_count})",
            action="Use only one H1 heading per page",
        ))

    if seo.images_missing_alt > 0:
        recommendations.append(Recommendation(
            category=RecommendationCategory.TECHNICAL,
            priority=Priority.MEDIUM,
            message=f"{seo.images_missing_alt} images missing alt text",
            action="Add descriptive alt text to all images",
        ))

    return recommendations


def schema_recommendations(
    applicable: Iterable[TrendingSchema],
    audit: ExistingSeoAudit,
) -> list[Recommendation]:
    """
    Recommend FAQ and review markup when applicable and not yet present.

    Args:
        applicable: Trend table rows applicable to the page's category.
        audit: Audit of the page's existing markup.

    Returns:
        Zero, one or two High priority schema recommendations.
    """
    types = {schema.schema_type for schema in applicable}
    present = set(audit.schema_types)
    recommendations = []

    if "FAQPage" in types and not present & FAQ_SCHEMA_TYPES:
        recommendations.append(Recommendation(
            category=RecommendationCategory.SCHEMA,
            priority=Priority.HIGH,
            message="FAQPage schema is trending - 30%+ CTR increase potential",
            action="Add FAQ section with FAQPage structured data",
        ))

    if "Review" in types and not present & REVIEW_SCHEMA_TYPES:
        recommendations.append(Recommendation(
            category=RecommendationCategory.SCHEMA,
            priority=Priority.HIGH,
            message="Review/Rating schema drives highest CTR improvements",
            action="Add customer reviews with Review/AggregateRating schema",
        ))

    return recommendations


def sort_recommendations(recommendations: Iterable[Recommendation]) -> list[Recommendation]:
    """Sort by descending priority; equal priorities keep their order."""
    return sorted(recommendations, key=lambda r: r.priority, reverse=True)
