import logging
import re
from typing import Any, Dict, Iterable, List, Optional

from prompt_toolkit.completion import Completion
from prompt_toolkit.document import Document
from prompt_toolkit.history import History

from textpiper_shell.core.context.shell_context import ShellContext
from textpiper_shell.core.managers.config_manager import config_manager

logger = logging.getLogger(__name__)

# Regex to find the last operator *before* the cursor
OPERATOR_PATTERN = re.compile(r"(\s+(?:&&|\|\||;|\|)\s+)")


class CompletionManager:
    """
    Generates command, subcommand, option, variable and history completions for the
    command segment the cursor is in.
    """

    def __init__(
        self,
        shell_context: ShellContext,
        history: History,
        command_hierarchy: Dict[str, Any],
        command_options: Optional[Dict[str, List[str]]] = None,
    ):
        self.ctx = shell_context
        self.history = history
        self.command_hierarchy = command_hierarchy
        self.command_options = command_options or {}

    def generate_completions(self, document: Document) -> Iterable[Completion]:
        text_before_cursor = document.text_before_cursor

        # --- Special Triggers (!c, !h) ---
        if text_before_cursor.endswith('!c'):
            yield from self._get_main_command_completions('!c')
            return
        if text_before_cursor.endswith('!h'):
            yield from self._get_history_completions()
            return

        segment_start = 0
        for match in OPERATOR_PATTERN.finditer(text_before_cursor):
            segment_start = match.end()

        relevant_text = text_before_cursor[segment_start:]
        words = relevant_text.lstrip().split()
        word_before_cursor = document.get_word_before_cursor(WORD=True)
        ends_with_space = relevant_text.endswith(" ")

        if "@{" in relevant_text and (word_before_cursor.startswith("@{") or document.char_before_cursor == '{'):
            yield from self._get_variable_completions(word_before_cursor)
            return

        if len(words) > 1 and word_before_cursor.startswith("-"):
            yield from self._get_option_completions(words[0], words[1:-1], word_before_cursor)
            return

        if not words or (len(words) == 1 and not ends_with_space):
            yield from self._get_main_command_completions(word_before_cursor)
            return

        completing_second_word = (
            (len(words) == 1 and ends_with_space) or (len(words) == 2 and not ends_with_space)
        )
        if completing_second_word:
            entry = self.command_hierarchy.get(words[0])
            if isinstance(entry, dict):
                partial = words[1] if len(words) == 2 else ""
                yield from self._get_sub_command_completions(entry.keys(), partial)

    # --- Helper methods for different completion types ---

    def _get_main_command_completions(self, word_before_cursor: str) -> Iterable[Completion]:
        is_trigger = word_before_cursor == '!c'
        start_pos = -2 if is_trigger else -len(word_before_cursor)
        for command_name in sorted(self.command_hierarchy.keys()):
            if is_trigger or command_name.startswith(word_before_cursor):
                yield Completion(command_name, start_position=start_pos, display_meta="Main Command")

    def _get_history_completions(self) -> Iterable[Completion]:
        max_len = config_manager.get_nested("autocomplete.h_max_len", 5)
        logger.debug("History completion (!h) triggered. Max items: %s", max_len)
        recent_commands, seen = [], set()
        for command in reversed(list(self.history.get_strings())):
            command = command.strip()
            if command and command != '!h' and command not in seen:
                seen.add(command)
                recent_commands.append(command)
                if len(recent_commands) >= max_len:
                    break
        for command in recent_commands:
            yield Completion(command, start_position=-2, display_meta="Command History")

    def _get_variable_completions(self, word_before_cursor: str) -> Iterable[Completion]:
        prefix = word_before_cursor if word_before_cursor.startswith("@{") else ""
        for var_name in sorted(self.ctx.variables()):
            suggestion = f"@{{{var_name}}}"
            if suggestion.startswith(prefix):
                yield Completion(suggestion, start_position=-len(prefix), display_meta="Context Variable")

    def _get_option_completions(self, command: str, used: List[str], partial: str) -> Iterable[Completion]:
        for option in self.command_options.get(command, []):
            if option.startswith(partial) and option not in used:
                yield Completion(option, start_position=-len(partial), display_meta="Option")

    @staticmethod
    def _get_sub_command_completions(subcommands: Iterable[str], partial: str) -> Iterable[Completion]:
        for sub in sorted(subcommands):
            if sub.startswith(partial):
                yield Completion(sub, start_position=-len(partial))
