import importlib
import logging
from types import ModuleType
from typing import Any, Dict, List, NamedTuple

from textpiper_shell.core.utils.path_utils import PathUtils

logger = logging.getLogger(__name__)

HANDLERS_PACKAGE = "textpiper_shell.core.handlers"
HANDLER_PREFIX = "handle_"
HELP_TEXT_SUFFIX = "_help_text"


class DiscoveredCommands(NamedTuple):
    handlers: Dict[str, Any]
    hierarchies: Dict[str, Any]
    help_texts: Dict[str, str]
    options: Dict[str, List[str]]


def _handler_module_names() -> List[str]:
    """Dotted module names of every '*_handler.py' below the handlers directory."""
    handlers_dir = PathUtils.get_handlers_dir()
    if not handlers_dir.is_dir():
        logger.warning("Handlers directory not found: %s", handlers_dir)
        return []
    return [
        ".".join((HANDLERS_PACKAGE,) + path.relative_to(handlers_dir).with_suffix("").parts)
        for path in sorted(handlers_dir.glob("**/*_handler.py"))
    ]


def _collect(module: ModuleType, found: DiscoveredCommands) -> None:
    # COMMAND_HIERARCHY and COMMAND_OPTIONS apply to every handle_* in the module.
    hierarchy = getattr(module, "COMMAND_HIERARCHY", None)
    options = getattr(module, "COMMAND_OPTIONS", None)

    for attr_name, attr in vars(module).items():
        if attr_name.startswith(HANDLER_PREFIX) and callable(attr):
            command = attr_name[len(HANDLER_PREFIX):]
            found.handlers[command] = attr
            if hierarchy is not None:
                found.hierarchies[command] = hierarchy
            if options:
                found.options[command] = list(options)
        elif attr_name.endswith(HELP_TEXT_SUFFIX) and isinstance(attr, str):
            found.help_texts[attr_name[:-len(HELP_TEXT_SUFFIX)]] = attr


def discover_handlers() -> DiscoveredCommands:
    """
    Imports the handler modules and collects, per command name, the
    handle_<name> function, its subcommand hierarchy, its <name>_help_text
    and the --options the completer may offer.

    A module that fails to import is logged and skipped.
    """
    found = DiscoveredCommands({}, {}, {}, {})
    for module_name in _handler_module_names():
        try:
            # A regular import keeps one module object per handler, so module
            # level state (e.g. XNGINE in core.py) is shared with the shell.
            module = importlib.import_module(module_name)
        except Exception as e:
            logger.error("Failed to load handler module %s: %s", module_name, e, exc_info=True)
            continue
        _collect(module, found)

    logger.debug("Discovered %d commands.", len(found.handlers))
    return found
