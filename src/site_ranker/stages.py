"""
Pluggable analysis and scoring stages.

A stage is any object with a ``name`` and the right method; no base
class is required:

- Analysis stages: ``analyze(document) -> AnalysisProfile`` returning a
  partial profile for one parsed document
- Scoring stages: ``process(profile) -> OptimizationReport`` returning
  a partial report for one merged profile

Stages hold only read-only configuration, so one instance can serve
any number of runs, including concurrent ones.
"""

import logging
from datetime import datetime
from typing import Callable, Optional, Protocol, runtime_checkable

from .classification import classify_business
from .config import AnalysisConfig, SiteConfiguration
from .extraction import (
    ParsedDocument,
    audit_existing_seo,
    detect_language,
    extract_body_text,
    extract_classification_text,
    summarize_content,
)
from .keywords import extract_keywords
from .models import AnalysisProfile, OptimizationReport
from .optimizer import (
    analyze_keyword_density,
    generate_description_suggestions,
    generate_title_suggestions,
)
from .scoring import schema_recommendations
from .sentiment import analyze_sentiment
from .trends import applicable_schemas, predict_schema_trends

logger = logging.getLogger(__name__)


@runtime_checkable
class AnalysisStage(Protocol):
    """Contract for stages that turn a document into a partial profile."""
    name: str

    def analyze(self, document: ParsedDocument) -> AnalysisProfile:
        ...


@runtime_checkable
class ScoringStage(Protocol):
    """Contract for stages that turn a profile into a partial report."""
    name: str

    def process(self, profile: AnalysisProfile) -> OptimizationReport:
        ...


# ---------------------------------------------------------------------------
# Analysis stages
# ---------------------------------------------------------------------------

class SeoAuditStage:
    """Audits SEO markup already present in the document."""

    name = "seo_audit"

    def analyze(self, document: ParsedDocument) -> AnalysisProfile:
        return AnalysisProfile(existing_seo=audit_existing_seo(document))


class KeywordStage:
    """Extracts ranked keywords and keeps the body text for later stages."""

    name = "keyword_extraction"

    def __init__(self, config: Optional[AnalysisConfig] = None):
        self.config = config or AnalysisConfig()

    def analyze(self, document: ParsedDocument) -> AnalysisProfile:
        text = extract_body_text(document)
        keywords = extract_keywords(text, self.config)
        logger.debug(f"Extracted {len(keywords)} keywords from {len(text.split())} words")
        return AnalysisProfile(keywords=keywords, raw_text=text or None)


class BusinessClassificationStage:
    """Classifies the business category, detects language and summarizes content."""

    name = "business_classification"

    def __init__(self, config: Optional[AnalysisConfig] = None):
        self.config = config or AnalysisConfig()

    def analyze(self, document: ParsedDocument) -> AnalysisProfile:
        text = extract_classification_text(document)
        category = classify_business(text)
        logger.debug(f"Classified document as {category.value}")
        return AnalysisProfile(
            business_category=category,
            language=detect_language(document),
            content_summary=summarize_content(text, self.config),
        )


# ---------------------------------------------------------------------------
# Scoring stages
# ---------------------------------------------------------------------------

class SentimentStage:
    """
    Scores the tone of the title, description and body text.

    Also usable as an analysis stage, in which case it records the
    score on the profile itself.
    """

    name = "sentiment"

    def process(self, profile: AnalysisProfile) -> OptimizationReport:
        seo = profile.existing_seo
        combined = f"{seo.title or ''} {seo.description or ''} {profile.raw_text or ''}"
        return OptimizationReport(sentiment=analyze_sentiment(combined))

    def analyze(self, document: ParsedDocument) -> AnalysisProfile:
        result = analyze_sentiment(extract_body_text(document))
        return AnalysisProfile(sentiment_score=result.score)


class ContentOptimizerStage:
    """Keyword density diagnostics plus title and description suggestions."""

    name = "content_optimizer"

    def __init__(
        self,
        config: Optional[AnalysisConfig] = None,
        site: Optional[SiteConfiguration] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.config = config or AnalysisConfig()
        self.site = site
        self.clock = clock

    @property
    def max_title_length(self) -> int:
        return self.site.max_title_length if self.site else self.config.max_title_length

    @property
    def max_description_length(self) -> int:
        if self.site:
            return self.site.max_description_length
        return self.config.max_description_length

    def process(self, profile: AnalysisProfile) -> OptimizationReport:
        return OptimizationReport(
            keyword_density=analyze_keyword_density(profile, self.config),
            title_suggestions=generate_title_suggestions(
                profile, self.max_title_length, self.clock
            ),
            description_suggestions=generate_description_suggestions(
                profile, self.max_description_length
            ),
        )


class TrendPredictorStage:
    """Ranks structured-data types for the profile's business category."""

    name = "trend_predictor"

    def process(self, profile: AnalysisProfile) -> OptimizationReport:
        applicable = applicable_schemas(profile.business_category)
        return OptimizationReport(
            schema_trends=predict_schema_trends(profile.business_category),
            recommendations=schema_recommendations(applicable, profile.existing_seo),
        )
