"""
Content optimization diagnostics.

This module measures keyword density against an optimal band and builds
title and meta description candidates from a profile's top keywords.

Density scoring (percentages):
- inside [floor, ceiling]: 1.0
- below the floor: density / floor
- above the ceiling: 1 - min((density - ceiling) / decay_window, 1)
"""

from datetime import datetime
from typing import Callable, Optional

from .config import AnalysisConfig
from .models import (
    AnalysisProfile,
    DescriptionSuggestion,
    KeywordDensityReport,
    TitleSuggestion,
)

# Number of top keywords surfaced when density is too low
RECOMMENDED_ADDITIONS = 3


def density_score(density: float, config: Optional[AnalysisConfig] = None) -> float:
    """Score a density percentage against the optimal band (0.0-1.0)."""
    config = config or AnalysisConfig()
    floor, ceiling = config.optimal_density

    if density < floor:
        return density / floor
    if density > ceiling:
        return 1.0 - min((density - ceiling) / config.density_decay_window, 1.0)
    return 1.0


def analyze_keyword_density(
    profile: AnalysisProfile,
    config: Optional[AnalysisConfig] = None,
) -> KeywordDensityReport:
    """
    Analyze keyword density of a profile's raw text.

    Args:
        profile: Merged analysis profile.
        config: Analysis configuration (density band and thresholds).

    Returns:
        KeywordDensityReport; an all-zero report when there is no text.
    """
    config = config or AnalysisConfig()
    word_count = profile.word_count

    if word_count == 0:
        return KeywordDensityReport()

    total_frequency = sum(kw.frequency for kw in profile.keywords)
    density = total_frequency / word_count * 100.0

    over_used = [
        kw.word for kw in profile.keywords
        if kw.frequency / word_count * 100.0 > config.overused_threshold
    ]

    recommended = []
    if density < config.optimal_density[0]:
        recommended = [kw.word for kw in profile.top_keywords(RECOMMENDED_ADDITIONS)]

    return KeywordDensityReport(
        density=density,
        density_score=density_score(density, config),
        is_stuffed=density > config.stuffing_threshold,
        recommended_additions=recommended,
        over_used=over_used,
    )


def capitalize(text: str) -> str:
    """Upper-case the first character only."""
    return text[:1].upper() + text[1:]


def generate_title_suggestions(
    profile: AnalysisProfile,
    max_length: int = 60,
    clock: Callable[[], datetime] = datetime.now,
) -> list[TitleSuggestion]:
    """
    Build title candidates from the top keywords.

    Args:
        profile: Merged analysis profile.
        max_length: Candidates longer than this are dropped.
        clock: Returns the current time; used for the freshness pattern.

    Returns:
        Suggestions sorted by descending score.
    """
    keywords = [kw.word for kw in profile.top_keywords(3)]
    if not keywords:
        return []

    topic = capitalize(keywords[0])
    secondary = capitalize(keywords[1]) if len(keywords) > 1 else "Business"
    year = clock().strftime("%Y")

    candidates = [
        TitleSuggestion(
            text=f"{topic} - Professional {secondary} Solutions",
            score=0.85,
            reasoning="Combines primary keyword with benefit-focused language",
        ),
        TitleSuggestion(
            text=f"Need {topic}? Get Expert Help Today",
            score=0.80,
            reasoning="Question format triggers curiosity and engagement",
        ),
        TitleSuggestion(
            text=f"Top {topic} Services | Trusted Experts",
            score=0.75,
            reasoning="Authority positioning with trust signal",
        ),
        TitleSuggestion(
            text=f"{topic} Guide {year} - Expert Resources",
            score=0.78,
            reasoning="Year signals freshness, improves CTR",
        ),
    ]

    suggestions = [s for s in candidates if len(s.text) <= max_length]
    suggestions.sort(key=lambda s: s.score, reverse=True)
    return suggestions


def generate_description_suggestions(
    profile: AnalysisProfile,
    max_length: int = 160,
) -> list[DescriptionSuggestion]:
    """
    Build meta description candidates from the top keywords.

    Returns:
        Suggestions sorted by descending score; empty without keywords.
    """
    keywords = [kw.word for kw in profile.top_keywords(5)]
    if not keywords:
        return []

    primary = keywords[0]
    secondary = keywords[1] if len(keywords) > 1 else primary
    tertiary = keywords[2] if len(keywords) > 2 else "proven"

    candidates = [
        DescriptionSuggestion(
            text=(
                f"Looking for {primary}? Our {secondary} experts deliver {tertiary} "
                f"results. Get started today with a free consultation."
            ),
            score=0.90,
            emotional_triggers=["free", "expert"],
            cta_included=True,
        ),
        DescriptionSuggestion(
            text=(
                f"Transform your {primary} with our professional {secondary} services. "
                f"Trusted by businesses worldwide for quality and reliability."
            ),
            score=0.85,
            emotional_triggers=["transform", "trusted"],
            cta_included=False,
        ),
        DescriptionSuggestion(
            text=(
                f"Join thousands who trust us for {primary}. {capitalize(secondary)} "
                f"solutions backed by expertise and dedication. Contact us now."
            ),
            score=0.82,
            emotional_triggers=["trust", "join"],
            cta_included=True,
        ),
    ]

    suggestions = [s for s in candidates if len(s.text) <= max_length]
    suggestions.sort(key=lambda s: s.score, reverse=True)
    return suggestions
