# src/textpiper_shell/core/handlers/sample_handler.py
from typing import Dict, List, Optional, Any

from analyzer.utils.sample_text import SAMPLE_TEXT
from textpiper_shell.core.context.shell_context import ShellContext
from textpiper_shell.core.services.report_service import analyze_into_context, print_report

sample_help_text = """
SAMPLE:
  sample              Load the demonstration text and analyze it.
  sample show         Print the demonstration text without analyzing it.
""".strip()

COMMAND_HIERARCHY: Dict[str, Optional[Dict[str, Any]]] = {
    "show": None,
}


def handle_sample(args: List[str], ctx: ShellContext, _stdin: Optional[str] = None) -> int:
    """Handles the 'sample' command."""
    if args and args[0] == "show":
        print(SAMPLE_TEXT)
        return 0

    if args:
        print(f"Unknown subcommand for 'sample': {args[0]}.\n\n{sample_help_text}")
        return 1

    report = analyze_into_context(SAMPLE_TEXT, ctx)
    if report is None:
        return 1
    print_report(report)
    return 0
