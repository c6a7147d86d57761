# src/textpiper_shell/core/handlers/core/get_handler.py
from typing import List, Optional

from textpiper_shell.core import core as shell_core
from textpiper_shell.core.context.shell_context import ShellContext
from textpiper_shell.core.parser import GET_PATTERN


def _print_all(ctx: ShellContext) -> int:
    variables = ctx.variables()
    if not variables:
        print("No variables set. Run 'analyze' or 'sample', or use @{name}=value.")
        return 0
    width = max(len(name) for name in variables) + 3
    for name in sorted(variables):
        print(f"{'@{' + name + '}':<{width}} {variables[name]}")
    return 0


def handle_get(args: List[str], ctx: ShellContext, _stdin: Optional[str] = None) -> int:
    """
    Prints one value per @{name} argument; without arguments lists every
    session variable. Dotted names also reach into the last report,
    e.g. @{report.seo.heading_count}.

    Returns 1 if any argument is malformed or cannot be resolved.
    """
    if not args:
        return _print_all(ctx)

    exit_code = 0
    for token in args:
        m = GET_PATTERN.match(token.strip())
        if not m:
            print(f"Invalid variable format: {token}. Must be in the format @{{name}}.")
            exit_code = 1
            continue

        value = shell_core.XNGINE.resolve_var(m.group(1), ctx)
        if value is None:
            print(f"Error: Variable '@{{{m.group(1)}}}' not found in context.")
            exit_code = 1
        else:
            print(value)
    return exit_code
