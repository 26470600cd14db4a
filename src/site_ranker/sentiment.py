"""
Lexicon-based sentiment scoring.

Positive wording in titles and descriptions tends to lift click-through,
so the tone of a page feeds the optimization score. Scoring is purely
rule-based:

    base  = (positive - negative) / max(positive + negative, 1)
    score = clamp(base + power_boost + trigger_boost, -1, 1)

where power_boost = min(0.05 * power_words, 0.2) and
trigger_boost = min(0.03 * emotional_triggers, 0.15).
"""

import re

from .models import SentimentLabel, SentimentResult

POSITIVE_WORDS = frozenset({
    "amazing", "awesome", "best", "brilliant", "excellent", "exceptional",
    "fantastic", "great", "incredible", "outstanding", "perfect", "remarkable",
    "stunning", "superb", "wonderful", "beautiful", "elegant", "impressive",
    "innovative", "professional", "quality", "reliable", "successful", "trusted",
    "valuable", "premium", "exclusive", "leading", "proven", "guaranteed",
    "certified", "award-winning", "top-rated", "highly-rated", "recommended",
    "popular", "favorite", "loved", "easy", "simple", "fast", "quick", "instant",
    "free", "save", "discount", "affordable", "efficient", "effective",
    "powerful", "advanced", "modern", "cutting-edge", "revolutionary",
})

NEGATIVE_WORDS = frozenset({
    "bad", "terrible", "awful", "horrible", "poor", "worst", "disappointing",
    "frustrating", "annoying", "difficult", "complicated", "confusing",
    "expensive", "overpriced", "slow", "broken", "failed", "error", "problem",
    "issue", "bug", "crash", "spam", "scam", "fake", "cheap", "low-quality",
    "unreliable", "risky", "dangerous", "harmful", "boring", "ugly", "outdated",
})

POWER_WORDS = frozenset({
    # Urgency
    "now", "today", "instant", "immediately", "hurry", "limited", "deadline",
    "last-chance", "don't-miss", "act-now", "urgent",
    # Exclusivity
    "exclusive", "premium", "vip", "members-only", "insider", "secret",
    "limited-edition", "rare", "unique", "special",
    # Trust
    "guaranteed", "proven", "certified", "official", "authentic", "verified",
    "trusted", "secure", "safe", "protected", "backed",
    # Value
    "free", "bonus", "save", "discount", "deal", "bargain", "value", "worth",
    "affordable", "budget-friendly",
    # Results
    "results", "success", "achieve", "transform", "improve", "boost", "increase",
    "maximize", "optimize", "accelerate",
})

EMOTIONAL_TRIGGERS = frozenset({
    # Fear of missing out
    "don't-miss", "limited-time", "exclusive", "last-chance", "ending-soon",
    # Curiosity
    "discover", "reveal", "secret", "hidden", "surprising", "unexpected",
    "little-known", "insider",
    # Trust
    "proven", "guaranteed", "backed", "certified", "official", "trusted",
    # Desire
    "dream", "imagine", "achieve", "unlock", "transform", "revolutionize",
    # Social proof
    "popular", "trending", "best-selling", "top-rated", "award-winning",
    "recommended", "loved",
})

POWER_WORD_BOOST = 0.05
POWER_WORD_BOOST_CAP = 0.2
TRIGGER_BOOST = 0.03
TRIGGER_BOOST_CAP = 0.15

# Anything that is not a letter, digit or hyphen separates tokens
TOKEN_SEPARATOR = re.compile(r"[^\w-]+|_+")

# Upper bounds (exclusive) for each label, checked in order
LABEL_THRESHOLDS = (
    (-0.6, SentimentLabel.VERY_NEGATIVE),
    (-0.2, SentimentLabel.NEGATIVE),
    (0.2, SentimentLabel.NEUTRAL),
    (0.6, SentimentLabel.POSITIVE),
)


def tokenize(text: str) -> list[str]:
    """Lower-case text and split it into word tokens (hyphens kept)."""
    return [token for token in TOKEN_SEPARATOR.split(text.lower()) if token]


def label_for_score(score: float) -> SentimentLabel:
    """Map a score onto its label; each bound is exclusive on the upper side."""
    for bound, label in LABEL_THRESHOLDS:
        if score < bound:
            return label
    return SentimentLabel.VERY_POSITIVE


def analyze_sentiment(text: str) -> SentimentResult:
    """
    Score the tone of text.

    Args:
        text: Any text (title, description, body or a combination).

    Returns:
        SentimentResult; a neutral zero result when text has no tokens.
    """
    tokens = tokenize(text)
    if not tokens:
        return SentimentResult()

    positive = 0
    negative_words = []
    power_words = []
    triggers = []

    for token in tokens:
        if token in POSITIVE_WORDS:
            positive += 1
        if token in NEGATIVE_WORDS:
            negative_words.append(token)
        if token in POWER_WORDS:
            power_words.append(token)
        if token in EMOTIONAL_TRIGGERS:
            triggers.append(token)

    negative = len(negative_words)
    base = (positive - negative) / max(positive + negative, 1)
    power_boost = min(POWER_WORD_BOOST * len(power_words), POWER_WORD_BOOST_CAP)
    trigger_boost = min(TRIGGER_BOOST * len(triggers), TRIGGER_BOOST_CAP)
    score = max(-1.0, min(1.0, base + power_boost + trigger_boost))

    confidence = min((positive + negative) / len(tokens) * 5.0, 1.0)

    return SentimentResult(
        score=score,
        confidence=confidence,
        label=label_for_score(score),
        emotional_triggers=triggers,
        power_words=power_words,
        negative_words=negative_words,
    )
