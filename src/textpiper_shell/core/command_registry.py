# src/textpiper_shell/core/command_registry.py
import logging
from typing import Any, Callable, Dict, List

from textpiper_shell.core.discovery import discover_handlers

logger = logging.getLogger(__name__)

# Filled by register_all_commands(); the engine, completer and help read them.
CommandRegistry: Dict[str, Callable[..., int]] = {}
COMMAND_HIERARCHY: Dict[str, Any] = {}
COMMAND_HELP_TEXTS: Dict[str, str] = {}
COMMAND_OPTIONS: Dict[str, List[str]] = {}


def register_command(name: str, handler: Callable[..., int]) -> None:
    CommandRegistry[name] = handler
    logger.debug("Registered command '%s'", name)


def register_all_commands() -> None:
    """
    Registers every discovered handler. Names registered earlier win, so a
    command added by hand before discovery is not replaced. Safe to call
    more than once.
    """
    found = discover_handlers()

    for name, handler in found.handlers.items():
        if name not in CommandRegistry:
            register_command(name, handler)

    COMMAND_HIERARCHY.update(found.hierarchies)
    COMMAND_HELP_TEXTS.update(found.help_texts)
    COMMAND_OPTIONS.update(found.options)

    # The completer lists every command, with or without subcommands
    for name in CommandRegistry:
        COMMAND_HIERARCHY.setdefault(name, None)
