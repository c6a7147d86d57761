from __future__ import annotations

import logging
import shlex
import sys

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import Completer
from prompt_toolkit.document import Document
from prompt_toolkit.history import FileHistory

from textpiper_shell.core.command_registry import COMMAND_HIERARCHY, COMMAND_OPTIONS, register_all_commands
from textpiper_shell.core.context.shell_context import ShellContext
from textpiper_shell.core.core import execute_sequence, parse_command_line
from textpiper_shell.core.parser import OPERATORS
from textpiper_shell.core.services.report_service import analyze_into_context, print_report
from textpiper_shell.core.managers.config_manager import config_manager
from textpiper_shell.core.managers.completion_manager import CompletionManager
from textpiper_shell.core.utils.configure_logging import configure_logger
from textpiper_shell.core.utils.path_utils import PathUtils
from textpiper_shell.core.xngine import QUIT_EXIT_CODE

logger = logging.getLogger(__name__)


class PromptToolkitCompleter(Completer):
    """
    A wrapper that uses the CompletionManager to generate suggestions
    in a way that prompt_toolkit expects.
    """

    def __init__(self, manager: CompletionManager):
        self.manager = manager

    def get_completions(self, document: Document, complete_event):
        yield from self.manager.generate_completions(document)


# --- Shell Application ---


def run_line(line: str, ctx: ShellContext) -> int:
    """Parses and executes one input line; empty lines succeed without doing anything."""
    commands = parse_command_line(line)
    if not commands:
        return 0
    return execute_sequence(commands, ctx)


def _bootstrap() -> None:
    configure_logger(config_manager.get_nested("debug.level", "WARNING"))
    register_all_commands()


def start_shell() -> None:
    """Starts the interactive REPL (Read-Eval-Print Loop) for the TextPiper shell."""
    _bootstrap()

    ctx = ShellContext()
    print("Welcome to TextPiper Shell 1.0 (type 'help' for commands, 'sample' for a demo)")

    history_path = PathUtils.get_shell_history_file()
    history = FileHistory(str(history_path))

    completion_manager = CompletionManager(ctx, history, COMMAND_HIERARCHY, COMMAND_OPTIONS)
    session = PromptSession(
        history=history,
        completer=PromptToolkitCompleter(completion_manager),
        complete_while_typing=True
    )

    ctx.prompt_session = session
    logger.info("Shell startup; history file at: %s", history_path)

    try:
        while True:
            try:
                default_text = ctx.next_prompt_buffer or ""
                ctx.next_prompt_buffer = None
                line = session.prompt("TextPiper>> ", default=default_text).strip()
            except (EOFError, KeyboardInterrupt):
                break

            if run_line(line, ctx) == QUIT_EXIT_CODE:
                break
    finally:
        print("Bye!")


def main(argv: list[str] | None = None) -> int:
    """
    Entrypoint for the 'textpiper' console script.

    Without arguments the interactive shell starts, or, when a document is
    piped in (`cat post.md | textpiper`), that document is analyzed. With
    arguments they run as a single command line, e.g.
    `textpiper analyze --file README.md`.
    """
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        if not sys.stdin.isatty():
            _bootstrap()
            return analyze_piped_document(sys.stdin.read())
        start_shell()
        return 0

    _bootstrap()
    code = run_line(" ".join(_quote(arg) for arg in argv), ShellContext())
    return 0 if code == QUIT_EXIT_CODE else code


def analyze_piped_document(text: str) -> int:
    report = analyze_into_context(text, ShellContext())
    if report is None:
        return 1
    print_report(report)
    return 0


def _quote(arg: str) -> str:
    # Operators stay bare so 'textpiper sample ";" report seo' still chains.
    if arg in OPERATORS:
        return arg
    return shlex.quote(arg)


if __name__ == "__main__":
    sys.exit(main())
