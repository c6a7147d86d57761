# src/textpiper_shell/core/services/dataframe_service.py
import logging
from typing import Any, Dict

import pandas as pd

from analyzer.model import AnalysisReport

logger = logging.getLogger(__name__)

BATCH_COLUMNS = [
    "source", "characters", "characters_no_spaces", "words", "sentences",
    "paragraphs", "reading_time", "flesch_score", "avg_words_per_sentence",
    "avg_chars_per_word", "avg_syllables_per_word", "heading_count",
    "link_count", "keyword_diversity", "top_keyword",
]


class DataFrameService:
    """
    Converts analysis reports into pandas DataFrames for tabular display and export.
    Keeps pandas out of the analysis core.
    """

    @staticmethod
    def report_row(source: str, report: AnalysisReport) -> Dict[str, Any]:
        """Flattens a report into one row of the batch summary table."""
        return {
            "source": source,
            **report.basic.model_dump(),
            **report.readability.model_dump(),
            "heading_count": report.seo.heading_count,
            "link_count": report.seo.link_count,
            "keyword_diversity": report.seo.keyword_diversity,
            "top_keyword": report.seo.top_keywords[0].word if report.seo.top_keywords else None,
        }

    def batch_frame(self, rows: list) -> pd.DataFrame:
        """Builds the batch summary table; an empty batch yields an empty frame with all columns."""
        return pd.DataFrame(rows, columns=BATCH_COLUMNS)

    @staticmethod
    def report_frames(report: AnalysisReport) -> Dict[str, pd.DataFrame]:
        """
        Splits a single report into one DataFrame per section,
        keyed by the sheet/file name used on export.
        """
        summary = {**report.basic.model_dump(), **report.readability.model_dump()}
        summary.update(
            heading_count=report.seo.heading_count,
            link_count=report.seo.link_count,
            keyword_diversity=report.seo.keyword_diversity,
        )
        return {
            "summary": pd.DataFrame(list(summary.items()), columns=["metric", "value"]),
            "keywords": pd.DataFrame(
                [kw.model_dump() for kw in report.seo.top_keywords],
                columns=["word", "count", "density"],
            ),
            "word_frequency": pd.DataFrame(
                [entry.model_dump() for entry in report.word_frequency],
                columns=["word", "count"],
            ),
        }
