# src/textpiper_shell/core/handlers/core/set_handler.py
from typing import List, Optional

from textpiper_shell.core.context.shell_context import REPORT_VAR_PREFIX, ShellContext
from textpiper_shell.core.parser import SET_PATTERN

USAGE = "Usage: set @{name}=value  (or: set name value)"


def handle_set(args: List[str], ctx: ShellContext, _stdin: Optional[str] = None) -> int:
    """
    Stores a session variable. Accepts the @{name}=value shorthand (the
    value may have been split on spaces by the parser) and 'set name value'.
    The report.* names belong to the last analysis and cannot be set.
    """
    m = SET_PATTERN.match(" ".join(args))
    if m:
        name, value = m.group(1).strip(), m.group(2).strip()
    elif len(args) >= 2 and not args[0].startswith("@{"):
        name, value = args[0], " ".join(args[1:])
    else:
        print(USAGE)
        return 1

    if name.startswith(REPORT_VAR_PREFIX):
        print(f"❌ Error: '@{{{name}}}' is set by 'analyze' and is read-only.")
        return 1

    if len(value) >= 2 and value[0] == value[-1] == '"':
        value = value[1:-1]
    ctx.set(name, value)
    return 0
