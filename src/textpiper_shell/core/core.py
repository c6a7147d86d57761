# src/textpiper_shell/core/core.py
from __future__ import annotations

import logging

from textpiper_shell.core.context.shell_context import ShellContext
from textpiper_shell.core.xngine import ExecuteEngine
from textpiper_shell.core.command_registry import CommandRegistry
from textpiper_shell.core.parser import VAR_PATTERN, parse_command_line

logger = logging.getLogger(__name__)

# Registration of the handlers happens in app.py; importing the registry here
# only binds the (still empty) dictionary the engine dispatches from.


def _maybe_expand_args(name: str, args: list[str], ctx: ShellContext) -> list[str]:
    """
    Expands @{var} references in every argument before the handler sees them.
    'get' receives its @{name} argument unexpanded and resolves it itself.
    """
    if name == "get":
        return list(args)
    return [XNGINE.expand_context_vars(a, ctx) for a in args]


def _post_refresh(ctx: ShellContext) -> None:
    logger.debug("Command finished; %r", ctx)


XNGINE = ExecuteEngine(
    command_registry=CommandRegistry,
    var_pattern=VAR_PATTERN,
    maybe_expand_args=_maybe_expand_args,
    post_refresh=_post_refresh,
    logger=logger,
)

execute_sequence = XNGINE.execute_sequence
expand_context_vars = XNGINE.expand_context_vars

__all__ = ["execute_sequence", "expand_context_vars", "parse_command_line"]
