"""Tests for lexicon-based sentiment scoring."""

import pytest

from site_ranker.models import SentimentLabel
from site_ranker.sentiment import (
    EMOTIONAL_TRIGGERS,
    POWER_WORDS,
    analyze_sentiment,
    label_for_score,
    tokenize,
)


class TestLabelForScore:
    """Tests for the score to label mapping."""

    @pytest.mark.parametrize("score,label", [
        (-1.0, SentimentLabel.VERY_NEGATIVE),
        (-0.61, SentimentLabel.VERY_NEGATIVE),
        (-0.6, SentimentLabel.NEGATIVE),
        (-0.21, SentimentLabel.NEGATIVE),
        (-0.2, SentimentLabel.NEUTRAL),
        (0.0, SentimentLabel.NEUTRAL),
        (0.19, SentimentLabel.NEUTRAL),
        (0.2, SentimentLabel.POSITIVE),
        (0.59, SentimentLabel.POSITIVE),
        (0.6, SentimentLabel.VERY_POSITIVE),
        (1.0, SentimentLabel.VERY_POSITIVE),
    ])
    def test_thresholds(self, score, label):
        assert label_for_score(score) == label


class TestTokenize:
    """Tests for sentiment tokenization."""

    def test_keeps_hyphenated_words(self):
        assert tokenize("An award-winning, top-rated team!") == [
            "an", "award-winning", "top-rated", "team",
        ]

    def test_underscores_separate(self):
        assert tokenize("free_trial") == ["free", "trial"]


class TestAnalyzeSentiment:
    """Tests for analyze_sentiment."""

    def test_strongly_negative_text(self):
        result = analyze_sentiment("This is terrible, awful, and disappointing.")

        assert result.score < -0.5
        assert result.score == pytest.approx(-1.0)
        assert result.label == SentimentLabel.VERY_NEGATIVE
        assert result.negative_words == ["terrible", "awful", "disappointing"]

    def test_strongly_positive_text(self):
        result = analyze_sentiment("This is amazing, excellent, wonderful.")

        assert result.score > 0.5
        assert result.score == pytest.approx(1.0)
        assert result.label == SentimentLabel.VERY_POSITIVE

    def test_mixed_text(self):
        """Test that two negative words outweigh one positive word."""
        result = analyze_sentiment("A great product with one annoying bug")
        # great vs annoying, bug
        assert result.score == pytest.approx(-1 / 3)
        assert result.label == SentimentLabel.NEGATIVE

    def test_power_word_boost_capped(self):
        text = "now today hurry urgent limited deadline"
        assert all(word in POWER_WORDS for word in text.split())

        result = analyze_sentiment(text)

        assert result.score == pytest.approx(0.2)
        assert result.power_words == text.split()
        assert result.label == SentimentLabel.POSITIVE

    def test_trigger_boost(self):
        result = analyze_sentiment("discover the hidden truth")
        assert "discover" in EMOTIONAL_TRIGGERS
        assert result.emotional_triggers == ["discover", "hidden"]
        assert result.score == pytest.approx(0.06)

    def test_score_clamped(self):
        text = "amazing proven guaranteed certified trusted exclusive"
        result = analyze_sentiment(text)
        assert result.score == 1.0

    def test_confidence(self):
        result = analyze_sentiment("great " + "word " * 9)
        # 1 sentiment word in 10 tokens
        assert result.confidence == pytest.approx(0.5)

        result = analyze_sentiment("great excellent")
        assert result.confidence == 1.0

    def test_empty_text_is_neutral(self):
        result = analyze_sentiment("")

        assert result.score == 0.0
        assert result.confidence == 0.0
        assert result.label == SentimentLabel.NEUTRAL
        assert result.power_words == []

    def test_punctuation_only_is_neutral(self):
        assert analyze_sentiment("... !!! ???").label == SentimentLabel.NEUTRAL

    def test_deterministic(self):
        text = "Proven, trusted and affordable consulting"
        assert analyze_sentiment(text) == analyze_sentiment(text)
