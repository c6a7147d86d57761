# src/textpiper_shell/core/handlers/report_handler.py
from typing import Dict, List, Optional, Any

from analyzer.controllers.report_controller import REPORT_SECTIONS
from textpiper_shell.core.context.shell_context import ShellContext
from textpiper_shell.core.services.report_service import print_report

report_help_text = """
REPORT:
  report              Show the full report of the last analysis.
  report summary      Basic counts and reading time.
  report readability  Flesch reading ease and averages.
  report seo          Keyword density, headings and links.
  report words        Most frequent words.
  report json         The full report as JSON.
""".strip()

COMMAND_HIERARCHY: Dict[str, Optional[Dict[str, Any]]] = {
    section: None for section in REPORT_SECTIONS + ("json",)
}


def handle_report(args: List[str], ctx: ShellContext, _stdin: Optional[str] = None) -> int:
    """Handles the 'report' command: re-renders the last report held by the context."""
    if ctx.last_report is None:
        print("🤷 No analysis yet. Run 'analyze <text>' or 'sample' first.")
        return 1

    section = args[0] if args else None
    if section == "json":
        print_report(ctx.last_report, as_json=True)
        return 0

    if section is not None and section not in REPORT_SECTIONS:
        print(f"Unknown section '{section}'.\n\n{report_help_text}")
        return 1

    print_report(ctx.last_report, section=section)
    return 0
