# src/analyzer/services/frequency_service.py
import logging
from collections import Counter
from typing import Dict, Iterable, List, Optional

from analyzer.model import WordCount

logger = logging.getLogger(__name__)


def build_frequency_table(words: Iterable[str]) -> Dict[str, int]:
    """
    Counts words case-insensitively.

    Keys are lowercased and keep the order in which each word was first seen,
    which is what top_k relies on to break ties.
    """
    return dict(Counter(word.lower() for word in words))


def top_k(table: Dict[str, int], k: Optional[int] = None) -> List[WordCount]:
    """
    Ranks a frequency table by descending count.

    sorted() is stable, so words with equal counts stay in first-encounter order.
    A `k` of None returns every entry.
    """
    if k is not None and k < 0:
        raise ValueError(f"k must be zero or positive, got {k}")

    ranked = sorted(table.items(), key=lambda item: item[1], reverse=True)
    if k is not None:
        ranked = ranked[:k]
    return [WordCount(word=word, count=count) for word, count in ranked]


def aggregate(words: Iterable[str], top_n: Optional[int] = None) -> List[WordCount]:
    """Builds a frequency table over `words` and returns its top `top_n` entries."""
    table = build_frequency_table(words)
    logger.debug("Frequency table holds %d distinct words.", len(table))
    return top_k(table, top_n)
