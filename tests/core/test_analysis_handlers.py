# tests/core/test_analysis_handlers.py
import json

import pytest

from analyzer.utils.input_policy import EMPTY_INPUT_MESSAGE
from analyzer.utils.sample_text import SAMPLE_TEXT
from textpiper_shell.core.context.shell_context import ShellContext
from textpiper_shell.core.handlers.analyze_handler import handle_analyze
from textpiper_shell.core.handlers.report_handler import handle_report
from textpiper_shell.core.handlers.sample_handler import handle_sample

FOX = "The quick brown fox jumps over the lazy dog."


@pytest.fixture
def ctx():
    return ShellContext()


# --- analyze ---

def test_analyze_positional_text(ctx, capsys):
    """Het rapport wordt getoond en in de context bewaard."""
    assert handle_analyze(FOX.split(), ctx) == 0
    out = capsys.readouterr().out

    assert "94.3 - Very Easy" in out
    assert ctx.last_report.basic.words == 9
    assert ctx.last_text == FOX
    assert ctx.get("report.words") == "9"
    assert ctx.get("report.flesch") == "94.3"
    assert ctx.get("report.top_keyword") == "quick"


def test_analyze_reads_piped_stdin(ctx, capsys):
    assert handle_analyze([], ctx, "Hello world.\n") == 0
    assert ctx.last_report.basic.words == 2
    assert ctx.last_text == "Hello world."


def test_analyze_file(ctx, tmp_path, capsys):
    doc = tmp_path / "doc.md"
    doc.write_text("# Title\n\nSee https://example.com for more.", encoding="utf-8")

    assert handle_analyze(["--file", str(doc)], ctx, "ignored stdin") == 0
    assert ctx.last_report.seo.heading_count == 1
    assert ctx.last_report.seo.link_count == 1
    assert ctx.last_report.basic.paragraphs == 2


def test_analyze_missing_file(ctx, tmp_path, capsys):
    assert handle_analyze(["-f", str(tmp_path / "nope.txt")], ctx) == 1
    assert "File not found" in capsys.readouterr().out
    assert ctx.last_report is None


def test_analyze_json_output(ctx, capsys):
    assert handle_analyze([FOX, "--json"], ctx) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["basic"]["words"] == 9
    assert data["seo"]["top_keywords"][0] == {"word": "quick", "count": 1, "density": 11.11}


def test_analyze_blank_input_is_rejected(ctx, capsys):
    assert handle_analyze([], ctx, "   \n\t ") == 1
    assert EMPTY_INPUT_MESSAGE in capsys.readouterr().out
    assert ctx.last_report is None


def test_analyze_replaces_report_variables(ctx, capsys):
    handle_analyze(FOX.split(), ctx)
    handle_analyze(["Nothing", "to", "see"], ctx)
    assert ctx.get("report.words") == "3"
    assert ctx.get("report.top_keyword") == "nothing"


# --- sample ---

def test_sample_analyzes_demo_text(ctx, capsys):
    assert handle_sample([], ctx) == 0
    assert ctx.last_text == SAMPLE_TEXT
    assert ctx.last_report.basic.paragraphs == 3
    assert "--- Summary ---" in capsys.readouterr().out


def test_sample_show_prints_without_analyzing(ctx, capsys):
    assert handle_sample(["show"], ctx) == 0
    assert capsys.readouterr().out.strip() == SAMPLE_TEXT
    assert ctx.last_report is None


def test_sample_unknown_subcommand(ctx, capsys):
    assert handle_sample(["shuffle"], ctx) == 1


# --- report ---

def test_report_without_analysis(ctx, capsys):
    assert handle_report([], ctx) == 1
    assert "No analysis yet" in capsys.readouterr().out


def test_report_section(ctx, capsys):
    handle_analyze(FOX.split(), ctx)
    capsys.readouterr()

    assert handle_report(["seo"], ctx) == 0
    out = capsys.readouterr().out
    assert out.startswith("--- SEO Metrics ---")
    assert "--- Summary ---" not in out


def test_report_json(ctx, capsys):
    handle_analyze(FOX.split(), ctx)
    capsys.readouterr()

    assert handle_report(["json"], ctx) == 0
    assert json.loads(capsys.readouterr().out)["readability"]["flesch_score"] == 94.3


def test_report_unknown_section(ctx, capsys):
    handle_analyze(FOX.split(), ctx)
    assert handle_report(["charts"], ctx) == 1
    assert "Unknown section 'charts'" in capsys.readouterr().out
