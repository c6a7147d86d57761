# src/analyzer/controllers/analysis_controller.py
import logging
import math
import re

from analyzer.model import AnalysisReport, BasicCounts
from analyzer.services.frequency_service import aggregate
from analyzer.services.readability_service import score
from analyzer.services.seo_service import analyze_seo
from analyzer.services.syllable_service import average_syllables
from analyzer.services.tokenize_service import tokenize

logger = logging.getLogger(__name__)

WORDS_PER_MINUTE = 200
TOP_WORDS = 10

_WHITESPACE_PATTERN = re.compile(r"\s")


def count_non_whitespace(text: str) -> int:
    return len(_WHITESPACE_PATTERN.sub("", text))


def reading_time(word_count: int) -> int:
    """Whole minutes needed to read `word_count` words; 0 for an empty document."""
    return math.ceil(word_count / WORDS_PER_MINUTE)


def analyze(raw_text: str) -> AnalysisReport:
    """
    Runs the full analysis pipeline over a document.

    Total over every string, including the empty one: an empty document gives
    zero counts, a reading time of 0, a Flesch score of 100 and empty
    keyword and frequency lists. Rejecting blank input is left to the caller.
    """
    tokens = tokenize(raw_text)
    words = tokens.words
    characters_no_spaces = count_non_whitespace(raw_text)

    basic = BasicCounts(
        characters=len(raw_text),
        characters_no_spaces=characters_no_spaces,
        words=len(words),
        sentences=len(tokens.sentences),
        paragraphs=len(tokens.paragraphs),
        reading_time=reading_time(len(words)),
    )

    readability = score(
        sentence_count=basic.sentences,
        word_count=basic.words,
        avg_syllables_per_word=average_syllables(words),
        characters_no_spaces=characters_no_spaces,
    )

    report = AnalysisReport(
        basic=basic,
        readability=readability,
        word_frequency=tuple(aggregate(words, TOP_WORDS)),
        seo=analyze_seo(raw_text, words),
    )
    logger.debug(
        "Analysis complete: %d words, Flesch %.1f.", basic.words, readability.flesch_score
    )
    return report
