# src/analyzer/controllers/report_controller.py
import logging
from typing import Any, Dict, List, Optional

from analyzer.model import AnalysisReport
from analyzer.services.readability_service import get_readability_label
from analyzer.utils.numbers import round_half_up

logger = logging.getLogger(__name__)

REPORT_SECTIONS = ("summary", "readability", "seo", "words")


class ReportController:
    """
    Controller responsible for turning an AnalysisReport into view data
    for Studio templates and for the plain-text shell output.
    """

    def __init__(self, frequent_words_shown: int = 8):
        self.frequent_words_shown = frequent_words_shown

    # --- VIEW DATA ---

    def build_view(self, report: AnalysisReport) -> Dict[str, Any]:
        """
        Builds the presentation structure for one report.
        Contains metric cards, readability rows, SEO rows, keywords and the
        most frequent words with progress-bar widths relative to the top word.
        """
        basic = report.basic
        readability = report.readability
        label = get_readability_label(readability.flesch_score)

        cards = [
            {"label": "Words", "value": f"{basic.words:,}"},
            {"label": "Characters", "value": f"{basic.characters:,}"},
            {"label": "Sentences", "value": str(basic.sentences)},
            {"label": "Paragraphs", "value": str(basic.paragraphs)},
            {"label": "Min Read", "value": str(basic.reading_time)},
            {"label": "Readability", "value": f"{readability.flesch_score:.1f}"},
        ]

        readability_rows = [
            ("Average Words per Sentence", f"{readability.avg_words_per_sentence:.1f}"),
            ("Average Characters per Word", f"{readability.avg_chars_per_word:.1f}"),
            ("Estimated Syllables per Word", f"{readability.avg_syllables_per_word:.1f}"),
        ]

        seo_rows = [
            ("Keyword Diversity", f"{report.seo.keyword_diversity} unique keywords"),
            ("Headings Found", str(report.seo.heading_count)),
            ("Links Found", str(report.seo.link_count)),
        ]

        keywords = [
            {"word": kw.word, "count": kw.count, "density": f"{kw.density:.2f}"}
            for kw in report.seo.top_keywords
        ]

        return {
            "cards": cards,
            "readability": {
                "score": f"{readability.flesch_score:.1f}",
                "label": label.label,
                "tier": label.tier,
                "css_class": f"score-{label.tier}",
                "rows": readability_rows,
            },
            "seo_rows": seo_rows,
            "keywords": keywords,
            "frequent_words": self._frequent_words(report),
        }

    def _frequent_words(self, report: AnalysisReport) -> List[Dict[str, Any]]:
        if not report.word_frequency:
            return []
        top_count = report.word_frequency[0].count
        return [
            {
                "word": entry.word,
                "count": entry.count,
                "width": round_half_up((entry.count / top_count) * 100, 2),
            }
            for entry in report.word_frequency[:self.frequent_words_shown]
        ]

    # --- TEXT OUTPUT ---

    def render_text(self, report: AnalysisReport, section: Optional[str] = None) -> str:
        """
        Renders the report (or a single section of it) as plain text.
        Sections: summary, readability, seo, words. None renders all of them.
        """
        if section is not None and section not in REPORT_SECTIONS:
            raise ValueError(f"Unknown report section '{section}'. Choose from: {', '.join(REPORT_SECTIONS)}")

        view = self.build_view(report)
        parts = []
        wanted = REPORT_SECTIONS if section is None else (section,)

        if "summary" in wanted:
            lines = ["--- Summary ---"]
            lines += [f"{card['label']:<28}{card['value']}" for card in view["cards"]]
            parts.append("\n".join(lines))

        if "readability" in wanted:
            r = view["readability"]
            lines = ["--- Readability Analysis ---", f"{'Flesch Reading Ease':<28}{r['score']} - {r['label']}"]
            lines += [f"{name:<28}{value}" for name, value in r["rows"]]
            parts.append("\n".join(lines))

        if "seo" in wanted:
            lines = ["--- SEO Metrics ---"]
            lines += [f"{name:<28}{value}" for name, value in view["seo_rows"]]
            lines.append("Top Keywords:")
            if view["keywords"]:
                lines += [
                    f"  {kw['word']:<20} {kw['count']:>4} times  {kw['density']:>6}% density"
                    for kw in view["keywords"]
                ]
            else:
                lines.append("  (none)")
            parts.append("\n".join(lines))

        if "words" in wanted:
            lines = ["--- Most Frequent Words ---"]
            if view["frequent_words"]:
                for entry in view["frequent_words"]:
                    bar = "#" * max(1, int(round_half_up(entry["width"] / 5, 0)))
                    lines.append(f"  {entry['word']:<20} {entry['count']:>4} times  {bar}")
            else:
                lines.append("  (none)")
            parts.append("\n".join(lines))

        return "\n\n".join(parts)
