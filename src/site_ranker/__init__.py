"""
Site Ranker

Rule-based SEO content analysis that:
- Extracts keywords, business category and existing SEO markup from HTML
- Scores sentiment, keyword density and schema-type relevance
- Produces a single optimization score with prioritized recommendations
"""

__version__ = "1.0.0"

from .config import Address, AnalysisConfig, SiteConfiguration

from .models import (
    AnalysisProfile,
    BusinessCategory,
    DescriptionSuggestion,
    ExistingSeoAudit,
    Keyword,
    KeywordDensityReport,
    OptimizationReport,
    Priority,
    Recommendation,
    RecommendationCategory,
    SchemaTrend,
    SentimentLabel,
    SentimentResult,
    TitleSuggestion,
)

from .extraction import (
    AnalysisError,
    DocumentParseError,
    InvalidDocumentError,
    ParsedDocument,
    parse_document,
)

from .merge import (
    MergeInconsistencyError,
    merge_all,
    merge_audits,
    merge_profiles,
    merge_reports,
)

from .scoring import ScoringError, completeness_score

from .stages import (
    AnalysisStage,
    BusinessClassificationStage,
    ContentOptimizerStage,
    KeywordStage,
    ScoringStage,
    SentimentStage,
    SeoAuditStage,
    TrendPredictorStage,
)

from .pipeline import (
    AnalysisPipeline,
    BatchAnalysis,
    analyze_document,
    score_profile,
)

__all__ = [
    # Configuration
    "Address",
    "AnalysisConfig",
    "SiteConfiguration",
    # Models
    "AnalysisProfile",
    "BusinessCategory",
    "DescriptionSuggestion",
    "ExistingSeoAudit",
    "Keyword",
    "KeywordDensityReport",
    "OptimizationReport",
    "Priority",
    "Recommendation",
    "RecommendationCategory",
    "SchemaTrend",
    "SentimentLabel",
    "SentimentResult",
    "TitleSuggestion",
    # Parsing and errors
    "AnalysisError",
    "DocumentParseError",
    "InvalidDocumentError",
    "ParsedDocument",
    "parse_document",
    "MergeInconsistencyError",
    "ScoringError",
    # Merge rules
    "merge_all",
    "merge_audits",
    "merge_profiles",
    "merge_reports",
    "completeness_score",
    # Stages
    "AnalysisStage",
    "ScoringStage",
    "SeoAuditStage",
    "KeywordStage",
    "BusinessClassificationStage",
    "SentimentStage",
    "ContentOptimizerStage",
    "TrendPredictorStage",
    # Pipeline
    "AnalysisPipeline",
    "BatchAnalysis",
    "analyze_document",
    "score_profile",
]
