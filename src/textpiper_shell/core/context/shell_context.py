import logging
from typing import Any, Dict, Optional, TYPE_CHECKING

# Prevent circular imports during runtime, but retain type hinting for static analysis
if TYPE_CHECKING:
    import pandas as pd
    from analyzer.model import AnalysisReport

logger = logging.getLogger(__name__)

REPORT_VAR_PREFIX = "report."


class ShellContext:
    """
    Manages session variables and the analysis state of the shell:
    the last analyzed text and its report, plus the last batch table.
    """

    def __init__(self):
        self._vars: Dict[str, str] = {}
        self.next_prompt_buffer: Optional[str] = None
        self.prompt_session: Optional[Any] = None

        self.last_text: Optional[str] = None
        self.last_report: Optional['AnalysisReport'] = None
        self.batch_result_cache: Optional['pd.DataFrame'] = None

    def set_report(self, text: str, report: Optional['AnalysisReport']) -> None:
        """
        Stores the latest analysis and exposes its headline numbers as
        variables, e.g. @{report.words}. Passing None clears them.
        """
        self.last_text = text if report is not None else None
        self.last_report = report

        for key in [k for k in self._vars if k.startswith(REPORT_VAR_PREFIX)]:
            del self._vars[key]

        if report is not None:
            self.export_report_variables(report)

    def export_report_variables(self, report: 'AnalysisReport') -> None:
        """Helper method to expose report values as shell variables."""
        basic = report.basic
        self.set("report.words", str(basic.words))
        self.set("report.sentences", str(basic.sentences))
        self.set("report.paragraphs", str(basic.paragraphs))
        self.set("report.reading_time", str(basic.reading_time))
        self.set("report.flesch", f"{report.readability.flesch_score:.1f}")
        top_keyword = report.seo.top_keywords[0].word if report.seo.top_keywords else ""
        self.set("report.top_keyword", top_keyword)

    def set(self, key: str, value: str) -> None:
        """Sets a context variable."""
        self._vars[key] = value

    def get(self, key: str) -> Optional[str]:
        """Retrieves a context variable. Returns None if key does not exist."""
        return self._vars.get(key)

    def variables(self) -> Dict[str, str]:
        """Read-only view for variable expansion and completion."""
        return dict(self._vars)

    def __repr__(self) -> str:
        has_report = self.last_report is not None
        return f"<ShellContext has_report={has_report} vars_count={len(self._vars)}>"
