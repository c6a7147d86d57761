# src/analyzer/services/readability_service.py
import logging
from typing import List, Tuple

from analyzer.model import ReadabilityLabel, ReadabilityMetrics
from analyzer.utils.numbers import round_half_up

logger = logging.getLogger(__name__)

FLESCH_BASE = 206.835
FLESCH_SENTENCE_WEIGHT = 1.015
FLESCH_SYLLABLE_WEIGHT = 84.6

# Ordered from high to low; the first threshold the score reaches wins.
READABILITY_LABELS: List[Tuple[float, str, str]] = [
    (90, "Very Easy", "excellent"),
    (80, "Easy", "excellent"),
    (70, "Fairly Easy", "good"),
    (60, "Standard", "good"),
    (50, "Fairly Difficult", "fair"),
    (30, "Difficult", "poor"),
]
FALLBACK_LABEL = ReadabilityLabel(label="Very Difficult", tier="poor")


def clamp(value: float, lower: float = 0.0, upper: float = 100.0) -> float:
    return max(lower, min(upper, value))


def flesch_reading_ease(avg_words_per_sentence: float, avg_syllables_per_word: float) -> float:
    """Unclamped Flesch reading ease."""
    return (
        FLESCH_BASE
        - FLESCH_SENTENCE_WEIGHT * avg_words_per_sentence
        - FLESCH_SYLLABLE_WEIGHT * avg_syllables_per_word
    )


def score(
        sentence_count: int,
        word_count: int,
        avg_syllables_per_word: float,
        characters_no_spaces: int = 0,
) -> ReadabilityMetrics:
    """
    Combines document counts into readability metrics.

    Averages with a zero denominator are 0 instead of raising, so an empty
    document scores the clamped maximum of 100. The score uses the
    one-decimal words-per-sentence figure and the unrounded syllable average.

    Args:
        sentence_count (int): Number of sentence terminators found.
        word_count (int): Number of words found.
        avg_syllables_per_word (float): Mean syllable estimate per word.
        characters_no_spaces (int): Document length without whitespace.

    Returns:
        ReadabilityMetrics: Rounded averages and the clamped Flesch score.
    """
    avg_words_per_sentence = (
        round_half_up(word_count / sentence_count, 1) if sentence_count > 0 else 0.0
    )
    avg_chars_per_word = (
        round_half_up(characters_no_spaces / word_count, 1) if word_count > 0 else 0.0
    )

    raw_score = flesch_reading_ease(avg_words_per_sentence, avg_syllables_per_word)
    flesch_score = round_half_up(clamp(raw_score), 1)
    logger.debug("Flesch reading ease: raw=%.3f, reported=%.1f", raw_score, flesch_score)

    return ReadabilityMetrics(
        flesch_score=flesch_score,
        avg_words_per_sentence=avg_words_per_sentence,
        avg_chars_per_word=avg_chars_per_word,
        avg_syllables_per_word=round_half_up(avg_syllables_per_word, 1),
    )


def get_readability_label(flesch_score: float) -> ReadabilityLabel:
    """Maps a Flesch score onto its reading-ease label and display tier."""
    for threshold, label, tier in READABILITY_LABELS:
        if flesch_score >= threshold:
            return ReadabilityLabel(label=label, tier=tier)
    return FALLBACK_LABEL
