# src/analyzer/utils/stopwords.py

# Common English function words ignored by the keyword analysis.
STOPWORDS_EN = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with", "by",
    "is", "are", "was", "were", "be", "been", "being", "have", "has", "had", "do", "does", "did",
    "will", "would", "could", "should", "this", "that", "these", "those",
})


def is_stopword(word: str) -> bool:
    """Case-insensitive membership test against STOPWORDS_EN."""
    return word.lower() in STOPWORDS_EN
