"""
Data models for Site Ranker.

This module defines the structures that flow through one analysis run:
the consolidated AnalysisProfile built by the analysis stages and the
OptimizationReport built by the scoring stages.

All models are plain dataclasses. Enumeration values are the exact
names expected by downstream markup generators, so ``to_dict`` output
can be stored or exchanged without a translation table.
"""

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from types import MappingProxyType
from typing import Any, Optional


class BusinessCategory(Enum):
    """Detected business/site category."""
    UNKNOWN = "Unknown"
    SERVICE = "Service"
    ECOMMERCE = "Ecommerce"
    BLOG = "Blog"
    PORTFOLIO = "Portfolio"
    SAAS = "SaaS"
    LOCAL_BUSINESS = "LocalBusiness"
    RESTAURANT = "Restaurant"
    AGENCY = "Agency"
    NON_PROFIT = "NonProfit"
    EDUCATION = "Education"
    HEALTHCARE = "Healthcare"
    REAL_ESTATE = "RealEstate"
    TECHNOLOGY = "Technology"

    @property
    def schema_type(self) -> str:
        """Schema.org type that best describes this category."""
        return _SCHEMA_TYPES[self]


_SCHEMA_TYPES = MappingProxyType({
    BusinessCategory.UNKNOWN: "Organization",
    BusinessCategory.SERVICE: "ProfessionalService",
    BusinessCategory.ECOMMERCE: "Store",
    BusinessCategory.BLOG: "Blog",
    BusinessCategory.PORTFOLIO: "Person",
    BusinessCategory.SAAS: "SoftwareApplication",
    BusinessCategory.LOCAL_BUSINESS: "LocalBusiness",
    BusinessCategory.RESTAURANT: "Restaurant",
    BusinessCategory.AGENCY: "Organization",
    BusinessCategory.NON_PROFIT: "NGO",
    BusinessCategory.EDUCATION: "EducationalOrganization",
    BusinessCategory.HEALTHCARE: "MedicalOrganization",
    BusinessCategory.REAL_ESTATE: "RealEstateAgent",
    BusinessCategory.TECHNOLOGY: "TechArticle",
})


@dataclass(frozen=True)
class Keyword:
    """A ranked keyword or multi-word phrase."""
    word: str
    frequency: int
    score: float
    is_phrase: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "word": self.word,
            "frequency": self.frequency,
            "score": self.score,
            "is_phrase": self.is_phrase,
        }


# Weights per audit flag; they total 100.
COMPLETENESS_WEIGHTS = MappingProxyType({
    "has_title": 15,
    "has_description": 15,
    "has_og_tags": 20,
    "has_twitter_cards": 15,
    "has_schema": 20,
    "has_canonical": 5,
    "has_viewport": 5,
    "has_charset": 5,
})


@dataclass
class ExistingSeoAudit:
    """
    SEO markup already present in a document.

    Presence flags only ever turn on when audits are merged, counters
    accumulate, and the title/description text keeps the latest non-empty
    value seen.
    """
    has_title: bool = False
    title: Optional[str] = None
    has_description: bool = False
    description: Optional[str] = None
    has_og_tags: bool = False
    has_twitter_cards: bool = False
    has_schema: bool = False
    has_canonical: bool = False
    has_viewport: bool = False
    has_charset: bool = False
    h1_count: int = 0
    images_missing_alt: int = 0
    # @type values found in JSON-LD blocks
    schema_types: list[str] = field(default_factory=list)

    def completeness_score(self) -> int:
        """SEO completeness score (0-100): sum of the weights of present flags."""
        return sum(
            weight for flag, weight in COMPLETENESS_WEIGHTS.items() if getattr(self, flag)
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "has_title": self.has_title,
            "title": self.title,
            "has_description": self.has_description,
            "description": self.description,
            "has_og_tags": self.has_og_tags,
            "has_twitter_cards": self.has_twitter_cards,
            "has_schema": self.has_schema,
            "has_canonical": self.has_canonical,
            "has_viewport": self.has_viewport,
            "has_charset": self.has_charset,
            "h1_count": self.h1_count,
            "images_missing_alt": self.images_missing_alt,
            "schema_types": list(self.schema_types),
        }


@dataclass
class AnalysisProfile:
    """Consolidated result of the analysis stages for one document (or site)."""
    keywords: list[Keyword] = field(default_factory=list)
    business_category: BusinessCategory = BusinessCategory.UNKNOWN
    language: Optional[str] = None
    existing_seo: ExistingSeoAudit = field(default_factory=ExistingSeoAudit)
    content_summary: Optional[str] = None
    sentiment_score: Optional[float] = None
    raw_text: Optional[str] = None

    def top_keywords(self, n: int) -> list[Keyword]:
        """Return the n highest-scoring keywords, ties kept in list order."""
        ranked = sorted(self.keywords, key=lambda kw: kw.score, reverse=True)
        return ranked[:n]

    @property
    def word_count(self) -> int:
        """Whitespace-delimited word count of the raw text."""
        return len(self.raw_text.split()) if self.raw_text else 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "keywords": [kw.to_dict() for kw in self.keywords],
            "business_category": self.business_category.value,
            "language": self.language,
            "existing_seo": self.existing_seo.to_dict(),
            "content_summary": self.content_summary,
            "sentiment_score": self.sentiment_score,
            "raw_text": self.raw_text,
        }


class SentimentLabel(Enum):
    """Overall tone of a piece of text."""
    VERY_NEGATIVE = "VeryNegative"
    NEGATIVE = "Negative"
    NEUTRAL = "Neutral"
    POSITIVE = "Positive"
    VERY_POSITIVE = "VeryPositive"


@dataclass
class SentimentResult:
    """Outcome of lexicon-based sentiment scoring."""
    score: float = 0.0
    confidence: float = 0.0
    label: SentimentLabel = SentimentLabel.NEUTRAL
    emotional_triggers: list[str] = field(default_factory=list)
    power_words: list[str] = field(default_factory=list)
    negative_words: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "score": self.score,
            "confidence": self.confidence,
            "label": self.label.value,
            "emotional_triggers": list(self.emotional_triggers),
            "power_words": list(self.power_words),
            "negative_words": list(self.negative_words),
        }


@dataclass
class TitleSuggestion:
    """Candidate page title with its rationale."""
    text: str
    score: float
    reasoning: str

    def to_dict(self) -> dict[str, Any]:
        return {"text": self.text, "score": self.score, "reasoning": self.reasoning}


@dataclass
class DescriptionSuggestion:
    """Candidate meta description."""
    text: str
    score: float
    emotional_triggers: list[str] = field(default_factory=list)
    cta_included: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "text": self.text,
            "score": self.score,
            "emotional_triggers": list(self.emotional_triggers),
            "cta_included": self.cta_included,
        }


@dataclass
class KeywordDensityReport:
    """Keyword density diagnostics for a document."""
    density: float = 0.0
    density_score: float = 0.0
    is_stuffed: bool = False
    recommended_additions: list[str] = field(default_factory=list)
    over_used: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "density": self.density,
            "density_score": self.density_score,
            "is_stuffed": self.is_stuffed,
            "recommended_additions": list(self.recommended_additions),
            "over_used": list(self.over_used),
        }


@dataclass
class SchemaTrend:
    """A structured-data type worth adding, ranked by trend score."""
    schema_type: str
    trend_score: float
    has_rich_snippets: bool
    description: str
    action: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "schema_type": self.schema_type,
            "trend_score": self.trend_score,
            "has_rich_snippets": self.has_rich_snippets,
            "description": self.description,
            "action": self.action,
        }


class RecommendationCategory(Enum):
    """Area of the page a recommendation applies to."""
    TITLE = "Title"
    DESCRIPTION = "Description"
    KEYWORDS = "Keywords"
    SCHEMA = "Schema"
    PERFORMANCE = "Performance"
    SOCIAL = "Social"
    TECHNICAL = "Technical"


class Priority(IntEnum):
    """Recommendation priority. Integer values give the total order."""
    LOW = 1
    MEDIUM = 2
    HIGH = 3
    CRITICAL = 4

    @property
    def label(self) -> str:
        return self.name.capitalize()


@dataclass
class Recommendation:
    """A single actionable improvement."""
    category: RecommendationCategory
    priority: Priority
    message: str
    action: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "category": self.category.value,
            "priority": self.priority.label,
            "message": self.message,
            "action": self.action,
        }


@dataclass
class OptimizationReport:
    """Scored view of an AnalysisProfile."""
    sentiment: Optional[SentimentResult] = None
    title_suggestions: list[TitleSuggestion] = field(default_factory=list)
    description_suggestions: list[DescriptionSuggestion] = field(default_factory=list)
    keyword_density: Optional[KeywordDensityReport] = None
    schema_trends: list[SchemaTrend] = field(default_factory=list)
    # None until a stage reports a score; the pipeline always sets it.
    optimization_score: Optional[int] = None
    recommendations: list[Recommendation] = field(default_factory=list)

    def ranked_schema_trends(self) -> list[SchemaTrend]:
        """Schema trends by descending trend score (stable)."""
        return sorted(self.schema_trends, key=lambda t: t.trend_score, reverse=True)

    def to_dict(self) -> dict[str, Any]:
        return {
            "sentiment": self.sentiment.to_dict() if self.sentiment else None,
            "title_suggestions": [s.to_dict() for s in self.title_suggestions],
            "description_suggestions": [s.to_dict() for s in self.description_suggestions],
            "keyword_density": self.keyword_density.to_dict() if self.keyword_density else None,
            "schema_trends": [t.to_dict() for t in self.ranked_schema_trends()],
            "optimization_score": self.optimization_score,
            "recommendations": [r.to_dict() for r in self.recommendations],
        }
