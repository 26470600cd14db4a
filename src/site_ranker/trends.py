"""
Schema.org trend relevance.

A static table of structured-data types that currently earn rich
results, each tagged with a trend score and the business categories it
suits. Filtering by a profile's category yields the types worth adding.
"""

from dataclasses import dataclass

from .models import BusinessCategory, SchemaTrend


@dataclass(frozen=True)
class TrendingSchema:
    """One row of the trend table."""
    schema_type: str
    trend_score: float
    has_rich_snippets: bool
    applicable_to: frozenset
    description: str

    def applies_to(self, category: BusinessCategory) -> bool:
        """True for listed categories, or for every category if Unknown is listed."""
        return category in self.applicable_to or BusinessCategory.UNKNOWN in self.applicable_to

    def to_trend(self) -> SchemaTrend:
        return SchemaTrend(
            schema_type=self.schema_type,
            trend_score=self.trend_score,
            has_rich_snippets=self.has_rich_snippets,
            description=self.description,
            action=f"Add {self.schema_type} schema to your page",
        )


_B = BusinessCategory

TRENDING_SCHEMAS: tuple[TrendingSchema, ...] = (
    TrendingSchema(
        "FAQPage", 0.95, True,
        frozenset({_B.SERVICE, _B.SAAS, _B.ECOMMERCE, _B.HEALTHCARE, _B.EDUCATION}),
        "FAQ rich results are appearing more frequently in SERPs",
    ),
    TrendingSchema(
        "HowTo", 0.90, True,
        frozenset({_B.SERVICE, _B.EDUCATION, _B.BLOG}),
        "How-to rich results with step-by-step instructions",
    ),
    TrendingSchema(
        "Product", 0.92, True,
        frozenset({_B.ECOMMERCE}),
        "Product rich results with price, availability, reviews",
    ),
    TrendingSchema(
        "Review", 0.88, True,
        frozenset({_B.ECOMMERCE, _B.SERVICE, _B.LOCAL_BUSINESS, _B.RESTAURANT}),
        "Star ratings in search results dramatically increase CTR",
    ),
    TrendingSchema(
        "LocalBusiness", 0.85, True,
        frozenset({_B.LOCAL_BUSINESS, _B.RESTAURANT, _B.HEALTHCARE}),
        "Local business info in maps and search",
    ),
    TrendingSchema(
        "Organization", 0.80, True,
        frozenset({_B.SERVICE, _B.SAAS, _B.AGENCY, _B.TECHNOLOGY}),
        "Knowledge panel for brand recognition",
    ),
    TrendingSchema(
        "SoftwareApplication", 0.82, True,
        frozenset({_B.SAAS, _B.TECHNOLOGY}),
        "Software rich results with ratings and pricing",
    ),
    TrendingSchema(
        "Article", 0.75, True,
        frozenset({_B.BLOG, _B.EDUCATION}),
        "Article rich results for news and blog content",
    ),
    TrendingSchema(
        "BreadcrumbList", 0.70, True,
        frozenset({_B.ECOMMERCE, _B.SERVICE, _B.BLOG}),
        "Breadcrumb navigation in search results",
    ),
    TrendingSchema(
        "VideoObject", 0.85, True,
        frozenset({_B.EDUCATION, _B.BLOG, _B.SERVICE}),
        "Video thumbnails and duration in search results",
    ),
    # Emerging
    TrendingSchema(
        "Event", 0.72, True,
        frozenset({_B.LOCAL_BUSINESS, _B.EDUCATION, _B.NON_PROFIT}),
        "Event rich results with dates and locations",
    ),
    TrendingSchema(
        "Course", 0.78, True,
        frozenset({_B.EDUCATION, _B.SAAS}),
        "Course rich results for educational content",
    ),
)

# Schema types that satisfy the FAQ / review recommendations when already present
FAQ_SCHEMA_TYPES = frozenset({"FAQPage"})
REVIEW_SCHEMA_TYPES = frozenset({"Review", "AggregateRating"})


def applicable_schemas(category: BusinessCategory) -> list[TrendingSchema]:
    """Table rows that apply to category, in table order."""
    return [schema for schema in TRENDING_SCHEMAS if schema.applies_to(category)]


def predict_schema_trends(category: BusinessCategory) -> list[SchemaTrend]:
    """
    Schema trends for a business category.

    Returns:
        Applicable trends ordered by descending trend score (stable).
    """
    trends = [schema.to_trend() for schema in applicable_schemas(category)]
    trends.sort(key=lambda t: t.trend_score, reverse=True)
    return trends
