# src/analyzer/services/seo_service.py
import logging
import re
from typing import List, Sequence

from analyzer.model import KeywordDensity, SEOMetrics
from analyzer.services.frequency_service import build_frequency_table, top_k
from analyzer.utils.numbers import round_half_up
from analyzer.utils.stopwords import is_stopword

logger = logging.getLogger(__name__)

TOP_KEYWORDS = 5
MIN_KEYWORD_LENGTH = 3

# Markdown ATX heading: 1-6 '#', one whitespace character, then at least one
# more character. Applied with match() to one line at a time, so neither the
# whitespace nor the heading text can run into the next line.
HEADING_LINE_PATTERN = re.compile(r"#{1,6}\s.")

# A link is a http(s) scheme followed by everything up to the next whitespace.
URL_PATTERN = re.compile(r"https?://\S+", re.IGNORECASE)


def filter_keywords(words: Sequence[str]) -> List[str]:
    """Keeps words of at least MIN_KEYWORD_LENGTH characters that are not stop words."""
    return [
        word for word in words
        if len(word) >= MIN_KEYWORD_LENGTH and not is_stopword(word)
    ]


def count_headings(text: str) -> int:
    return sum(1 for line in text.splitlines() if HEADING_LINE_PATTERN.match(line))


def count_links(text: str) -> int:
    return len(URL_PATTERN.findall(text))


def analyze_seo(text: str, words: Sequence[str]) -> SEOMetrics:
    """
    Computes keyword density and structural counts for a document.

    Density is measured against the *unfiltered* word count, so it reflects
    how prevalent a keyword is in the whole document rather than among the
    remaining keywords.
    """
    keyword_table = build_frequency_table(filter_keywords(words))
    total_words = len(words)

    top_keywords = tuple(
        KeywordDensity(
            word=entry.word,
            count=entry.count,
            density=round_half_up((entry.count / total_words) * 100, 2),
        )
        for entry in top_k(keyword_table, TOP_KEYWORDS)
    )

    metrics = SEOMetrics(
        top_keywords=top_keywords,
        heading_count=count_headings(text),
        link_count=count_links(text),
        keyword_diversity=len(keyword_table),
    )
    logger.debug(
        "SEO: %d keywords, %d headings, %d links.",
        metrics.keyword_diversity, metrics.heading_count, metrics.link_count
    )
    return metrics
