"""
Merge rules for partial analysis results.

Each stage returns a partial AnalysisProfile (or OptimizationReport);
the pipeline folds them together with the reducers below. There is one
reducer per entity type so every rule lives in exactly one place:

Profiles:
- keywords: append entries whose word is not present yet (earlier wins)
- business_category: replaced only by a non-Unknown value (later wins)
- language, content_summary, sentiment_score, raw_text: replaced only
  by a present value; None and "" count as absent (later wins)
- existing_seo: see ``merge_audits``

Audits:
- presence flags: logical OR
- counters: sum
- title/description: replaced by a present, non-empty value
- schema_types: ordered union

Reports:
- list fields: concatenate
- sentiment, keyword_density: replaced by a present value
- optimization_score: running average of the stages that report one

Reducers are pure: inputs are never modified.
"""

from functools import reduce
from typing import Iterable, Optional

from .models import (
    AnalysisProfile,
    BusinessCategory,
    ExistingSeoAudit,
    OptimizationReport,
)

AUDIT_FLAGS = (
    "has_title",
    "has_description",
    "has_og_tags",
    "has_twitter_cards",
    "has_schema",
    "has_canonical",
    "has_viewport",
    "has_charset",
)

AUDIT_COUNTERS = ("h1_count", "images_missing_alt")

PROFILE_SCALARS = ("language", "content_summary", "sentiment_score", "raw_text")


class MergeInconsistencyError(AssertionError):
    """Raised when merge input violates the model invariants (a programming defect)."""
    pass


def check_audit(audit: ExistingSeoAudit) -> None:
    """Raise MergeInconsistencyError if audit counters are negative."""
    for counter in AUDIT_COUNTERS:
        if getattr(audit, counter) < 0:
            raise MergeInconsistencyError(
                f"Audit counter {counter} is negative: {getattr(audit, counter)}"
            )


def check_profile(profile: AnalysisProfile) -> None:
    """Raise MergeInconsistencyError if profile violates the model invariants."""
    seen: set[str] = set()
    for keyword in profile.keywords:
        if keyword.word in seen:
            raise MergeInconsistencyError(f"Duplicate keyword in profile: {keyword.word!r}")
        seen.add(keyword.word)
    if not isinstance(profile.business_category, BusinessCategory):
        raise MergeInconsistencyError(
            f"Invalid business category: {profile.business_category!r}"
        )
    check_audit(profile.existing_seo)


def _latest(current: Optional[str], incoming: Optional[str]) -> Optional[str]:
    """Keep current unless incoming is a non-empty value."""
    return incoming if incoming else current


def merge_audits(left: ExistingSeoAudit, right: ExistingSeoAudit) -> ExistingSeoAudit:
    """
    Combine two audits.

    Args:
        left: Earlier audit.
        right: Later audit.

    Returns:
        New ExistingSeoAudit.
    """
    check_audit(left)
    check_audit(right)

    merged = ExistingSeoAudit(
        title=_latest(left.title, right.title),
        description=_latest(left.description, right.description),
        schema_types=list(dict.fromkeys(left.schema_types + right.schema_types)),
    )
    for flag in AUDIT_FLAGS:
        setattr(merged, flag, getattr(left, flag) or getattr(right, flag))
    for counter in AUDIT_COUNTERS:
        setattr(merged, counter, getattr(left, counter) + getattr(right, counter))
    return merged


def merge_profiles(left: AnalysisProfile, right: AnalysisProfile) -> AnalysisProfile:
    """
    Combine two partial profiles.

    Not commutative: ``left`` wins keyword duplicates, ``right`` wins
    scalar fields when it has a value for them.

    Args:
        left: Result accumulated so far (earlier stages).
        right: Result of the next stage.

    Returns:
        New AnalysisProfile.

    Raises:
        MergeInconsistencyError: If either input violates the invariants.
    """
    check_profile(left)
    check_profile(right)

    keywords = list(left.keywords)
    seen = {kw.word for kw in keywords}
    for keyword in right.keywords:
        if keyword.word not in seen:
            keywords.append(keyword)
            seen.add(keyword.word)

    category = left.business_category
    if right.business_category is not BusinessCategory.UNKNOWN:
        category = right.business_category

    merged = AnalysisProfile(
        keywords=keywords,
        business_category=category,
        existing_seo=merge_audits(left.existing_seo, right.existing_seo),
    )
    for name in PROFILE_SCALARS:
        incoming = getattr(right, name)
        present = incoming is not None and incoming != ""
        setattr(merged, name, incoming if present else getattr(left, name))
    return merged


def merge_all(profiles: Iterable[AnalysisProfile]) -> AnalysisProfile:
    """Fold profiles in order, starting from an empty profile."""
    return reduce(merge_profiles, profiles, AnalysisProfile())


def merge_reports(left: OptimizationReport, right: OptimizationReport) -> OptimizationReport:
    """
    Combine two partial optimization reports.

    Args:
        left: Report accumulated so far.
        right: Report of the next scoring stage.

    Returns:
        New OptimizationReport.
    """
    score = left.optimization_score
    if right.optimization_score is not None:
        if score is None:
            score = right.optimization_score
        else:
            score = (score + right.optimization_score) // 2

    return OptimizationReport(
        sentiment=right.sentiment if right.sentiment is not None else left.sentiment,
        title_suggestions=left.title_suggestions + right.title_suggestions,
        description_suggestions=left.description_suggestions + right.description_suggestions,
        keyword_density=(
            right.keyword_density if right.keyword_density is not None
            else left.keyword_density
        ),
        schema_trends=left.schema_trends + right.schema_trends,
        optimization_score=score,
        recommendations=left.recommendations + right.recommendations,
    )
