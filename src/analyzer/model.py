# src/analyzer/model.py
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


class TokenStream(BaseModel):
    """
    The three independent sequences derived from a document.
    Sentences keep their terminal punctuation; words keep their original case.
    """
    model_config = ConfigDict(frozen=True)

    sentences: Tuple[str, ...] = ()
    words: Tuple[str, ...] = ()
    paragraphs: Tuple[str, ...] = ()


class WordCount(BaseModel):
    model_config = ConfigDict(frozen=True)

    word: str
    count: int = Field(ge=0)


class KeywordDensity(BaseModel):
    """A ranked SEO keyword with its share of the whole document (percent)."""
    model_config = ConfigDict(frozen=True)

    word: str
    count: int = Field(ge=0)
    density: float


class ReadabilityMetrics(BaseModel):
    """
    Flesch reading ease plus the averages it is derived from.
    All values are rounded for display; the score is clamped to [0, 100].
    """
    model_config = ConfigDict(frozen=True)

    flesch_score: float = Field(ge=0.0, le=100.0)
    avg_words_per_sentence: float = 0.0
    avg_chars_per_word: float = 0.0
    avg_syllables_per_word: float = 0.0


class ReadabilityLabel(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str  # e.g., 'Very Easy', 'Standard', 'Very Difficult'
    tier: str  # 'excellent', 'good', 'fair', 'poor' (styling only)


class SEOMetrics(BaseModel):
    model_config = ConfigDict(frozen=True)

    top_keywords: Tuple[KeywordDensity, ...] = ()
    heading_count: int = Field(default=0, ge=0)
    link_count: int = Field(default=0, ge=0)
    keyword_diversity: int = Field(default=0, ge=0)


class BasicCounts(BaseModel):
    model_config = ConfigDict(frozen=True)

    characters: int = Field(default=0, ge=0)
    characters_no_spaces: int = Field(default=0, ge=0)
    words: int = Field(default=0, ge=0)
    sentences: int = Field(default=0, ge=0)
    paragraphs: int = Field(default=0, ge=0)
    reading_time: int = Field(default=0, ge=0)  # minutes


class AnalysisReport(BaseModel):
    """
    The complete, immutable result of analyzing one document.
    Returned by value; nothing in the pipeline keeps a reference to it.
    """
    model_config = ConfigDict(frozen=True)

    basic: BasicCounts
    readability: ReadabilityMetrics
    word_frequency: Tuple[WordCount, ...] = ()
    seo: SEOMetrics
