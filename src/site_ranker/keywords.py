"""
Keyword extraction and scoring.

Produces a ranked keyword list from extracted text:
- Single words: alphabetic tokens, lower-cased, stop words and short
  tokens removed, scored by term frequency with a bounded length bonus
- Phrases: runs of 2-4 capitalized words in the original-case text,
  scored with a flat per-occurrence boost

Words come first (best ``max_keywords``), followed by the best
``max_phrases`` phrases. Equal scores keep first-seen order.
"""

import re
from collections import Counter
from typing import Optional

from .config import AnalysisConfig
from .models import Keyword

STOP_WORDS = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for",
    "of", "with", "by", "from", "as", "is", "was", "are", "were", "been",
    "be", "have", "has", "had", "do", "does", "did", "will", "would",
    "could", "should", "may", "might", "must", "shall", "can", "need",
    "this", "that", "these", "those", "i", "you", "he", "she", "it",
    "we", "they", "what", "which", "who", "when", "where", "why", "how",
    "all", "each", "every", "both", "few", "more", "most", "other",
    "some", "such", "no", "nor", "not", "only", "own", "same", "so",
    "than", "too", "very", "just", "also", "now", "here", "there",
    "then", "once", "any", "about", "into", "through", "during",
    "before", "after", "above", "below", "between", "under", "again",
    "further", "because", "if", "else", "until", "while", "our", "your",
})

WORD_PATTERN = re.compile(r"[a-zA-Z]+")
PHRASE_PATTERN = re.compile(r"[A-Z][a-z]+(?:\s+[A-Z][a-z]+)+")

# Flat boost per phrase occurrence
PHRASE_SCORE_PER_OCCURRENCE = 5.0


def tokenize(text: str, config: Optional[AnalysisConfig] = None) -> list[str]:
    """
    Split text into lower-case alphabetic tokens.

    Args:
        text: Text to tokenize.
        config: Analysis configuration (minimum token length).

    Returns:
        Tokens in text order, with stop words and short tokens removed.
    """
    config = config or AnalysisConfig()
    tokens = []
    for match in WORD_PATTERN.finditer(text):
        word = match.group().lower()
        if len(word) >= config.min_word_length and word not in STOP_WORDS:
            tokens.append(word)
    return tokens


def extract_phrases(text: str, config: Optional[AnalysisConfig] = None) -> list[str]:
    """
    Find capitalized multi-word phrases in original-case text.

    Runs longer than ``max_phrase_words`` are dropped rather than cut.

    Returns:
        Lower-cased phrases in text order (with repeats).
    """
    config = config or AnalysisConfig()
    phrases = []
    for match in PHRASE_PATTERN.finditer(text):
        words = match.group().split()
        if len(words) <= config.max_phrase_words:
            phrases.append(" ".join(words).lower())
    return phrases


def score_word(frequency: int, word_length: int, total_words: int) -> float:
    """Term-frequency score with a length bonus capped at 1."""
    tf = frequency / max(total_words, 1)
    length_bonus = min(word_length / 10.0, 1.0)
    return tf * 100.0 * (1.0 + length_bonus)


def score_phrase(frequency: int) -> float:
    """Flat score so phrases rank alongside single words."""
    return frequency * PHRASE_SCORE_PER_OCCURRENCE


def rank_words(words: list[str], config: Optional[AnalysisConfig] = None) -> list[Keyword]:
    """Score and rank single-word tokens, keeping the best ``max_keywords``."""
    config = config or AnalysisConfig()
    total_words = len(words)

    keywords = [
        Keyword(
            word=word,
            frequency=frequency,
            score=score_word(frequency, len(word), total_words),
            is_phrase=False,
        )
        for word, frequency in Counter(words).items()
    ]
    keywords.sort(key=lambda kw: kw.score, reverse=True)
    return keywords[:config.max_keywords]


def rank_phrases(phrases: list[str], config: Optional[AnalysisConfig] = None) -> list[Keyword]:
    """Score and rank phrases, keeping the best ``max_phrases``."""
    config = config or AnalysisConfig()

    keywords = [
        Keyword(
            word=phrase,
            frequency=frequency,
            score=score_phrase(frequency),
            is_phrase=True,
        )
        for phrase, frequency in Counter(phrases).items()
    ]
    keywords.sort(key=lambda kw: kw.score, reverse=True)
    return keywords[:config.max_phrases]


def extract_keywords(text: str, config: Optional[AnalysisConfig] = None) -> list[Keyword]:
    """
    Extract ranked keywords and phrases from text.

    Args:
        text: Original-case extracted text.
        config: Analysis configuration.

    Returns:
        Ranked words followed by ranked phrases. A phrase whose text equals
        a ranked word is skipped so keyword text stays unique.
    """
    config = config or AnalysisConfig()

    keywords = rank_words(tokenize(text, config), config)
    seen = {kw.word for kw in keywords}

    for phrase in rank_phrases(extract_phrases(text, config), config):
        if phrase.word not in seen:
            keywords.append(phrase)
            seen.add(phrase.word)

    return keywords
