# -*- coding: utf-8 -*-
"""
Centralized configuration for Site Ranker.

This module provides the tunable constants used by the analysis and
scoring stages (AnalysisConfig) and the site-level data that markup
generators supply alongside a report (SiteConfiguration).
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class AnalysisConfig:
    """
    Tunable constants for analysis and scoring.

    Instances are frozen so a single config can be shared by every
    pipeline run, including runs on parallel threads.

    Attributes:
        min_word_length: Tokens shorter than this are discarded.
        max_keywords: Maximum single-word keywords kept per document.
        max_phrases: Maximum phrases appended after the word list.
        max_phrase_words: Capitalized runs longer than this are not phrases.

        optimal_density: (floor, ceiling) keyword density band, in percent.
            Density inside the band scores 1.0.
        density_decay_window: Percentage points above the ceiling over which
            the density score decays linearly to 0.
        stuffing_threshold: Density (percent) above which the page is
            flagged as keyword-stuffed.
        overused_threshold: Share (percent) above which an individual
            keyword is flagged as over-used.

        title_length: (min, max) title length before a recommendation fires.
        max_title_length: Longest generated title suggestion.
        max_description_length: Longest generated description suggestion.

        summary_sentences: Sentences kept in the content summary.
        summary_sentence_length: Exclusive (min, max) sentence length bounds.
    """

    # Keyword engine
    min_word_length: int = 3
    max_keywords: int = 50
    max_phrases: int = 10
    max_phrase_words: int = 4

    # Keyword density
    optimal_density: tuple[float, float] = (1.0, 3.0)
    density_decay_window: float = 10.0
    stuffing_threshold: float = 5.0
    overused_threshold: float = 2.0

    # Titles and descriptions
    title_length: tuple[int, int] = (30, 60)
    max_title_length: int = 60
    max_description_length: int = 160

    # Content summary
    summary_sentences: int = 3
    summary_sentence_length: tuple[int, int] = (20, 200)

    def __post_init__(self):
        """Validate configuration values."""
        if self.min_word_length < 1:
            raise ValueError(f"min_word_length must be >= 1, got {self.min_word_length}")
        if self.max_keywords < 0:
            raise ValueError(f"max_keywords must be >= 0, got {self.max_keywords}")
        if self.max_phrases < 0:
            raise ValueError(f"max_phrases must be >= 0, got {self.max_phrases}")
        if self.max_phrase_words < 2:
            raise ValueError(
                f"max_phrase_words must be >= 2, got {self.max_phrase_words}"
            )
        low, high = self.optimal_density
        if not 0 < low <= high:
            raise ValueError(
                f"optimal_density must satisfy 0 < floor <= ceiling, got {self.optimal_density}"
            )
        if self.density_decay_window <= 0:
            raise ValueError(
                f"density_decay_window must be > 0, got {self.density_decay_window}"
            )
        if self.title_length[0] > self.title_length[1]:
            raise ValueError(f"title_length must be (min, max), got {self.title_length}")
        if self.summary_sentence_length[0] >= self.summary_sentence_length[1]:
            raise ValueError(
                f"summary_sentence_length must be (min, max), "
                f"got {self.summary_sentence_length}"
            )
        if self.summary_sentences < 1:
            raise ValueError(
                f"summary_sentences must be >= 1, got {self.summary_sentences}"
            )

    @property
    def max_keyword_count(self) -> int:
        """Upper bound on keywords one document can produce."""
        return self.max_keywords + self.max_phrases


@dataclass
class Address:
    """Postal address of the business behind a site."""
    street: Optional[str] = None
    city: Optional[str] = None
    region: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None


@dataclass
class SiteConfiguration:
    """
    Site-wide data supplied by the markup generator.

    The analysis core treats this as opaque input: only the two length
    limits are read when title and description suggestions are built.
    Everything else is passed through to whoever renders the tags.
    """

    site_name: str = ""
    base_url: str = ""
    default_image: Optional[str] = None
    twitter_handle: Optional[str] = None
    facebook_app_id: Optional[str] = None
    contact_email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[Address] = None
    title_override: Optional[str] = None
    description_override: Optional[str] = None
    extra_keywords: list[str] = field(default_factory=list)
    locale: str = "en_US"
    generate_canonical: bool = True
    max_title_length: int = 60
    max_description_length: int = 160

    def __post_init__(self):
        if self.twitter_handle:
            self.twitter_handle = self.twitter_handle.lstrip("@")
        if self.max_title_length < 1:
            raise ValueError(f"max_title_length must be >= 1, got {self.max_title_length}")
        if self.max_description_length < 1:
            raise ValueError(
                f"max_description_length must be >= 1, got {self.max_description_length}"
            )
