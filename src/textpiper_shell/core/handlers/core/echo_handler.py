# src/textpiper_shell/core/handlers/core/echo_handler.py
from typing import List, Optional

from textpiper_shell.core.context.shell_context import ShellContext


def handle_echo(args: List[str], _ctx: ShellContext, stdin: Optional[str] = None) -> int:
    """
    Handles the 'echo' command.

    Prints the arguments (or piped stdin when there are none). A '--code <N>'
    pair sets the exit code, which makes echo useful for testing '&&' and '||'.
    """
    words: List[str] = []
    exit_code = 0
    i = 0

    while i < len(args):
        arg = args[i]
        if arg == "--code" and i + 1 < len(args) and args[i + 1].lstrip("-").isdigit():
            exit_code = int(args[i + 1])
            i += 2
            continue
        words.append(arg)
        i += 1

    print(" ".join(words) if words else (stdin or ""))
    return exit_code
