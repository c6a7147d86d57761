# src/textpiper_shell/core/handlers/batch_handler.py
import argparse
import glob
import logging
from typing import List, Optional

import pandas as pd
from tqdm import tqdm

from analyzer.controllers.analysis_controller import analyze
from analyzer.utils.input_policy import prepare_input
from textpiper_shell.core.context.shell_context import ShellContext
from textpiper_shell.core.handlers.analyze_handler import read_text_file
from textpiper_shell.core.managers.config_manager import config_manager
from textpiper_shell.core.services.dataframe_service import DataFrameService

logger = logging.getLogger(__name__)

batch_help_text = """
BATCH:
  batch <paths...>    Analyze several text files (glob patterns allowed, e.g. docs/*.md)
                      and print one summary row per file. The table is kept
                      for 'export'. Blank files are skipped.
""".strip()

COMMAND_HIERARCHY = None


def _expand_paths(patterns: List[str]) -> List[str]:
    """Expands glob patterns; literal paths without matches are kept so they can be reported."""
    paths: List[str] = []
    for pattern in patterns:
        matches = sorted(glob.glob(pattern, recursive=True))
        paths.extend(matches or [pattern])
    # Keep the first occurrence of every path
    return list(dict.fromkeys(paths))


def handle_batch(args: List[str], ctx: ShellContext, _stdin: Optional[str] = None) -> int:
    """
    Handles the 'batch' command.

    Files are analyzed one after the other under a progress bar. Unreadable
    files are reported and skipped; the command fails only when no file
    could be analyzed.
    """
    parser = argparse.ArgumentParser(prog="batch", description="Analyze several text files.")
    parser.add_argument("paths", nargs="+", help="Files or glob patterns to analyze.")
    try:
        parsed = parser.parse_args(args)
    except SystemExit:
        return 1

    paths = _expand_paths(parsed.paths)
    reject_blank = config_manager.get_nested("analysis.reject_blank_input", True)
    service = DataFrameService()
    rows = []
    skipped = 0

    for path in tqdm(paths, desc="Analyzing", unit="file"):
        raw_text = read_text_file(path)
        text = prepare_input(raw_text, reject_blank=reject_blank) if raw_text is not None else None
        if text is None:
            skipped += 1
            logger.warning("Skipping %s: unreadable or blank.", path)
            continue
        rows.append(service.report_row(path, analyze(text)))

    if not rows:
        print("❌ Error: None of the given files could be analyzed.")
        return 1

    df = service.batch_frame(rows)
    ctx.batch_result_cache = df

    with pd.option_context("display.max_columns", None, "display.width", 200):
        print(df[["source", "words", "sentences", "paragraphs", "reading_time",
                  "flesch_score", "keyword_diversity", "top_keyword"]].to_string(index=False))

    print(f"\n✅ Analyzed {len(rows)} file(s), skipped {skipped}. Use 'export' to save the table.")
    return 0
