# src/textpiper_shell/core/handlers/analyze_handler.py
import argparse
import logging
from pathlib import Path
from typing import List, Optional

from textpiper_shell.core.context.shell_context import ShellContext
from textpiper_shell.core.services.report_service import analyze_into_context, print_report

logger = logging.getLogger(__name__)

analyze_help_text = """
ANALYSIS:
  analyze <text...>   Analyze the given text and show the full report.
  analyze --file <path>
                      Analyze the contents of a UTF-8 text file.
  <cmd> | analyze     Analyze the output piped from a previous command.
  analyze ... --json  Print the report as JSON instead of text.
                      The report is kept for 'report' and 'export', and its
                      headline numbers are available as @{report.words},
                      @{report.flesch}, @{report.top_keyword}, ...
""".strip()

COMMAND_HIERARCHY = None
COMMAND_OPTIONS = ["--file", "--json"]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="analyze", description="Analyze text statistics, readability and SEO.")
    parser.add_argument("text", nargs="*", help="Text to analyze. Ignored when --file is given.")
    parser.add_argument("--file", "-f", help="Path of a text file to analyze.")
    parser.add_argument("--json", action="store_true", help="Print the report as JSON.")
    return parser


def read_text_file(path_str: str) -> Optional[str]:
    """Reads a UTF-8 text file; prints an error and returns None when it cannot be read."""
    path = Path(path_str).expanduser()
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        print(f"❌ Error: File not found: {path}")
    except UnicodeDecodeError:
        print(f"❌ Error: File is not valid UTF-8 text: {path}")
    except OSError as e:
        print(f"❌ Error reading {path}: {e}")
        logger.error("Failed to read %s: %s", path, e, exc_info=True)
    return None


def handle_analyze(args: List[str], ctx: ShellContext, stdin: Optional[str] = None) -> int:
    """
    Handles the 'analyze' command.

    The text source is, in order of precedence: --file, the positional
    arguments, then piped stdin.
    """
    try:
        parsed = _build_parser().parse_args(args)
    except SystemExit:
        return 1

    if parsed.file:
        raw_text = read_text_file(parsed.file)
        if raw_text is None:
            return 1
    elif parsed.text:
        raw_text = " ".join(parsed.text)
    else:
        raw_text = stdin

    report = analyze_into_context(raw_text, ctx)
    if report is None:
        return 1

    print_report(report, as_json=parsed.json)
    return 0
