# tests/core/test_completion_manager.py
import pytest
from prompt_toolkit.document import Document
from prompt_toolkit.history import InMemoryHistory

from textpiper_shell.core.context.shell_context import ShellContext
from textpiper_shell.core.managers.completion_manager import CompletionManager

HIERARCHY = {
    "analyze": None,
    "report": {"summary": None, "readability": None, "seo": None, "words": None, "json": None},
    "sample": {"show": None},
}
OPTIONS = {"analyze": ["--file", "--json"]}


@pytest.fixture
def manager():
    """Een CompletionManager met een voorspelbare geschiedenis."""
    history = InMemoryHistory()
    for line in ("sample", "report seo", "!h", "sample"):
        history.append_string(line)
    return CompletionManager(ShellContext(), history, HIERARCHY, OPTIONS)


def _texts(manager, text):
    return [c.text for c in manager.generate_completions(Document(text))]


def test_main_command_completion(manager):
    assert _texts(manager, "ana") == ["analyze"]
    assert _texts(manager, "") == ["analyze", "report", "sample"]


def test_subcommand_completion(manager):
    assert _texts(manager, "report s") == ["seo", "summary"]
    assert _texts(manager, "sample ") == ["show"]
    assert _texts(manager, "analyze ") == []


def test_completion_restarts_after_operator(manager):
    assert _texts(manager, "sample show && rep") == ["report"]


def test_variable_completion(manager):
    manager.ctx.set("report.words", "9")
    manager.ctx.set("report.flesch", "94.3")
    assert _texts(manager, "echo @{report.w") == ["@{report.words}"]


def test_history_trigger_lists_recent_unique_commands(manager):
    assert _texts(manager, "!h") == ["sample", "report seo"]


def test_command_trigger_lists_everything(manager):
    assert _texts(manager, "!c") == ["analyze", "report", "sample"]


def test_option_completion_skips_used_options(manager):
    assert _texts(manager, "analyze --") == ["--file", "--json"]
    assert _texts(manager, "analyze --json --") == ["--file"]
    assert _texts(manager, "sample --") == []
