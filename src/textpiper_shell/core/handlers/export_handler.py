# src/textpiper_shell/core/handlers/export_handler.py
import argparse
import json
import logging
from pathlib import Path
from typing import List, Optional

import pandas as pd

from textpiper_shell.core.context.shell_context import ShellContext
from textpiper_shell.core.managers.config_manager import config_manager
from textpiper_shell.core.services.dataframe_service import DataFrameService
from textpiper_shell.core.utils.path_utils import PathUtils

logger = logging.getLogger(__name__)

EXPORT_FORMATS = ("json", "csv", "xlsx")

export_help_text = """
EXPORT:
  export [--batch] [-o <path>] [--format json|csv|xlsx]
                      Exports the last report (or with --batch the last batch
                      table) to the Documents folder, or to -o <path>
                      (relative paths are resolved against Documents).
                      csv writes one file per report section.
""".strip()

COMMAND_HIERARCHY = None
COMMAND_OPTIONS = ["--batch", "--format", "--output"]


def _write_report(ctx: ShellContext, fmt: str, output_file: Path) -> List[Path]:
    """Writes the last report and returns the files created."""
    report = ctx.last_report
    if fmt == "json":
        output_file.write_text(
            json.dumps(report.model_dump(mode="json"), indent=2, ensure_ascii=False),
            encoding="utf-8"
        )
        return [output_file]

    frames = DataFrameService.report_frames(report)
    if fmt == "xlsx":
        with pd.ExcelWriter(output_file, engine="openpyxl") as writer:
            for sheet_name, df in frames.items():
                df.to_excel(writer, sheet_name=sheet_name, index=False)
        return [output_file]

    written = []
    for section, df in frames.items():
        section_file = output_file.with_name(f"{output_file.stem}_{section}.csv")
        df.to_csv(section_file, index=False)
        written.append(section_file)
    return written


def _write_batch(df: pd.DataFrame, fmt: str, output_file: Path) -> List[Path]:
    if fmt == "json":
        df.to_json(output_file, orient="records", indent=2)
    elif fmt == "xlsx":
        df.to_excel(output_file, index=False, engine="openpyxl")
    else:
        df.to_csv(output_file, index=False)
    return [output_file]


def handle_export(args: List[str], ctx: ShellContext, _stdin: Optional[str] = None) -> int:
    """
    Exports the last analysis report or the cached batch table.

    Returns:
        0 for success, 1 for errors.
    """
    parser = argparse.ArgumentParser(prog="export", description="Export analysis results.")
    parser.add_argument("--output", "-o", help="Output file path (absolute or relative to Documents).")
    parser.add_argument("--format", choices=EXPORT_FORMATS, help="Output format.")
    parser.add_argument("--batch", action="store_true", help="Export the last batch table instead of the last report.")
    try:
        parsed = parser.parse_args(args)
    except SystemExit:
        return 1

    fmt = parsed.format or config_manager.get_nested("export.default_format", "json")
    if fmt not in EXPORT_FORMATS:
        print(f"❌ Error: Unsupported export format '{fmt}'. Choose from: {', '.join(EXPORT_FORMATS)}.")
        return 1

    if parsed.batch:
        df = ctx.batch_result_cache
        if df is None or df.empty:
            print("🤷 No batch results to export. Run 'batch <paths...>' first.")
            return 1
        default_name = "textpiper_batch"
    else:
        if ctx.last_report is None:
            print("🤷 No analysis to export. Run 'analyze <text>' or 'sample' first.")
            return 1
        default_name = "textpiper_report"

    output_file = PathUtils.resolve_output_path(parsed.output or default_name, f".{fmt}")
    try:
        output_file.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        print(f"❌ Error creating output directory '{output_file.parent}': {e}")
        return 1

    try:
        if parsed.batch:
            written = _write_batch(ctx.batch_result_cache, fmt, output_file)
        else:
            written = _write_report(ctx, fmt, output_file)
    except (OSError, ValueError, ImportError) as e:
        print(f"❌ Error during export: {e}")
        logger.error("Failed to export to %s: %s", output_file, e, exc_info=True)
        return 1

    print("✅ Successfully exported to:")
    for path in written:
        print(f"   {path}")
    return 0
