"""
Analysis pipeline orchestration.

The pipeline owns two ordered stage lists:

1. Analysis stages run over one parsed document; their partial
   profiles are folded with ``merge_profiles`` in registration order.
2. Scoring stages run over the merged profile; their partial reports
   are folded with ``merge_reports``. The final optimization score is
   then recomputed from scratch, rule-based recommendations are
   appended, and all recommendations are sorted by priority.

Adding or removing a stage never requires touching another stage.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Iterable, Mapping, Optional

from .config import AnalysisConfig, SiteConfiguration
from .extraction import AnalysisError, parse_document
from .merge import merge_all, merge_profiles, merge_reports
from .models import AnalysisProfile, OptimizationReport
from .scoring import (
    final_optimization_score,
    sort_recommendations,
    synthesize_recommendations,
    validate_profile,
)
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

logger = logging.getLogger(__name__)


@dataclass
class BatchAnalysis:
    """Results of analyzing several documents (for example, every page of a site)."""
    profiles: dict[str, AnalysisProfile] = field(default_factory=dict)
    failures: dict[str, AnalysisError] = field(default_factory=dict)
    main_file: Optional[str] = None

    @property
    def merged_profile(self) -> AnalysisProfile:
        """Site-wide profile: every successful profile merged in input order."""
        return merge_all(self.profiles.values())

    @property
    def succeeded(self) -> int:
        return len(self.profiles)


class AnalysisPipeline:
    """
    Runs analysis stages over documents and scoring stages over profiles.

    Build the pipeline once and reuse it; runs never modify it.
    """

    def __init__(
        self,
        analysis_stages: Optional[Iterable[AnalysisStage]] = None,
        scoring_stages: Optional[Iterable[ScoringStage]] = None,
        config: Optional[AnalysisConfig] = None,
    ):
        self.config = config or AnalysisConfig()
        self.analysis_stages: list[AnalysisStage] = list(analysis_stages or [])
        self.scoring_stages: list[ScoringStage] = list(scoring_stages or [])

    @classmethod
    def default(
        cls,
        config: Optional[AnalysisConfig] = None,
        site: Optional[SiteConfiguration] = None,
    ) -> "AnalysisPipeline":
        """
        Create a pipeline with the standard stages.

        Args:
            config: Analysis configuration shared by all stages.
            site: Optional site configuration (suggestion length limits).

        Returns:
            AnalysisPipeline with audit, keyword and classification
            analysis stages and sentiment, optimizer and trend scoring stages.
        """
        config = config or AnalysisConfig()
        return cls(
            analysis_stages=[
                SeoAuditStage(),
                KeywordStage(config),
                BusinessClassificationStage(config),
            ],
            scoring_stages=[
                SentimentStage(),
                ContentOptimizerStage(config, site=site),
                TrendPredictorStage(),
            ],
            config=config,
        )

    def add_stage(self, stage: AnalysisStage) -> "AnalysisPipeline":
        """Append an analysis stage. Returns self for chaining."""
        self.analysis_stages.append(stage)
        return self

    def add_scoring_stage(self, stage: ScoringStage) -> "AnalysisPipeline":
        """Append a scoring stage. Returns self for chaining."""
        self.scoring_stages.append(stage)
        return self

    @property
    def stage_names(self) -> list[str]:
        return [stage.name for stage in self.analysis_stages]

    @property
    def scoring_stage_names(self) -> list[str]:
        return [stage.name for stage in self.scoring_stages]

    def run(self, markup: str) -> AnalysisProfile:
        """
        Analyze one document.

        Args:
            markup: Raw HTML text.

        Returns:
            Merged AnalysisProfile.

        Raises:
            AnalysisError: If the markup is unusable or cannot be parsed.
        """
        document = parse_document(markup)
        profile = AnalysisProfile()

        for stage in self.analysis_stages:
            logger.debug(f"Running analysis stage: {stage.name}")
            profile = merge_profiles(profile, stage.analyze(document))

        return profile

    def score(self, profile: AnalysisProfile) -> OptimizationReport:
        """
        Score a merged profile.

        Args:
            profile: Profile from ``run`` (or a site-wide merged profile).

        Returns:
            OptimizationReport with the authoritative score and
            recommendations sorted by descending priority.

        Raises:
            ScoringError: If the profile cannot be scored.
        """
        validate_profile(profile)
        report = OptimizationReport()

        for stage in self.scoring_stages:
            logger.debug(f"Running scoring stage: {stage.name}")
            report = merge_reports(report, stage.process(profile))

        if report.optimization_score is not None:
            logger.debug(f"Stage-reported score before recompute: {report.optimization_score}")
        report.optimization_score = final_optimization_score(report, profile)

        report.schema_trends = report.ranked_schema_trends()
        report.recommendations = sort_recommendations(
            report.recommendations + synthesize_recommendations(profile, self.config)
        )
        return report

    def analyze_documents(
        self,
        documents: Mapping[str, str],
        max_workers: Optional[int] = None,
    ) -> BatchAnalysis:
        """
        Analyze several documents independently.

        A document that fails to parse is recorded in ``failures`` and
        does not stop the others.

        Args:
            documents: Mapping of document name (e.g. path) to markup.
            max_workers: Run documents on a thread pool of this size;
                None or 1 runs them sequentially.

        Returns:
            BatchAnalysis keyed by document name, in input order.
        """
        names = list(documents)

        if max_workers and max_workers > 1:
            with ThreadPoolExecutor(max_workers=max_workers) as executor:
                outcomes = list(executor.map(self._run_safely, documents.values()))
        else:
            outcomes = [self._run_safely(documents[name]) for name in names]

        batch = BatchAnalysis()
        for name, outcome in zip(names, outcomes):
            if isinstance(outcome, AnalysisError):
                logger.warning(f"Skipping {name}: {outcome}")
                batch.failures[name] = outcome
            else:
                batch.profiles[name] = outcome
        return batch

    def _run_safely(self, markup: str):
        try:
            return self.run(markup)
        except AnalysisError as e:
            return e


def analyze_document(markup: str) -> AnalysisProfile:
    """Analyze one document with a fresh default pipeline."""
    return AnalysisPipeline.default().run(markup)


def score_profile(profile: AnalysisProfile) -> OptimizationReport:
    """Score a profile with a fresh default pipeline."""
    return AnalysisPipeline.default().score(profile)
