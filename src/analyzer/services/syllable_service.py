# src/analyzer/services/syllable_service.py
import re
from typing import Sequence

VOWEL_GROUP_PATTERN = re.compile(r"[aeiouy]+")


def estimate(word: str) -> int:
    """
    Estimates the number of syllables in a single word.

    This is an approximation, not a phonetic count: every run of vowels
    (a, e, i, o, u, y) is one syllable, a trailing 'e' is treated as silent
    when the word has more than one vowel group, and every word has at least
    one syllable. 'simple' -> 1, 'the' -> 1, 'reading' -> 2.
    """
    lowered = word.lower()
    count = len(VOWEL_GROUP_PATTERN.findall(lowered))

    # Silent e
    if lowered.endswith("e") and count > 1:
        count -= 1

    return max(1, count)


def average_syllables(words: Sequence[str]) -> float:
    """Mean syllable estimate per word, or 0.0 when there are no words."""
    if not words:
        return 0.0
    return sum(estimate(word) for word in words) / len(words)
