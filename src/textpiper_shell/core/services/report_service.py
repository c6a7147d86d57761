# src/textpiper_shell/core/services/report_service.py
import json
import logging
from typing import Optional

from analyzer.controllers.analysis_controller import analyze
from analyzer.controllers.report_controller import ReportController
from analyzer.model import AnalysisReport
from analyzer.utils.input_policy import EMPTY_INPUT_MESSAGE, prepare_input
from textpiper_shell.core.context.shell_context import ShellContext
from textpiper_shell.core.managers.config_manager import config_manager

logger = logging.getLogger(__name__)


def get_report_controller() -> ReportController:
    """Creates a ReportController from the current session configuration."""
    return ReportController(
        frequent_words_shown=config_manager.get_nested("report.frequent_words_shown", 8)
    )


def analyze_into_context(raw_text: Optional[str], ctx: ShellContext) -> Optional[AnalysisReport]:
    """
    Applies the blank-input policy, analyzes the text and stores the report
    in the shell context.

    Returns:
        The report, or None when the input was rejected (a message is printed).
    """
    text = prepare_input(
        raw_text,
        reject_blank=config_manager.get_nested("analysis.reject_blank_input", True)
    )
    if text is None:
        print(f"⚠️  {EMPTY_INPUT_MESSAGE}")
        return None

    report = analyze(text)
    ctx.set_report(text, report)
    logger.info("Analyzed %d characters (%d words).", report.basic.characters, report.basic.words)
    return report


def print_report(report: AnalysisReport, section: Optional[str] = None, as_json: bool = False) -> None:
    """Prints a report as text (optionally one section) or as indented JSON."""
    if as_json:
        print(json.dumps(report.model_dump(mode="json"), indent=2, ensure_ascii=False))
        return
    print(get_report_controller().render_text(report, section))
