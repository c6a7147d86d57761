# src/textpiper_shell/core/handlers/core/help_handler.py
from typing import List, Optional

from textpiper_shell.core.context.shell_context import ShellContext
from textpiper_shell.core.utils.helptext import get_command_help, get_help_text


def handle_help(args: List[str], _ctx: ShellContext, _stdin: Optional[str] = None) -> int:
    """Prints the full help, or with 'help <command>' only that command's section."""
    if not args:
        print(get_help_text())
        return 0

    text = get_command_help(args[0])
    if text is None:
        print(f"No help for '{args[0]}'. Type 'help' for all commands.")
        return 1
    print(text)
    return 0
