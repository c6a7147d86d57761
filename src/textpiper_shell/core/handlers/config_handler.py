# src/textpiper_shell/core/handlers/config_handler.py
import json
import logging
from typing import Any, Callable, Dict, List, Optional

from textpiper_shell.core.context.shell_context import ShellContext
from textpiper_shell.core.managers.config_manager import config_manager

logger = logging.getLogger(__name__)

config_help_text = """
CONFIGURATION:
  config list [section]      Show the configuration (or one section, e.g. studio) as JSON.
  config get <key>           Show one value, e.g. config get report.frequent_words_shown.
  config set <key> <value>   Change a value for this session, e.g. studio.debounce_ms 500.
                             Values take the type of the value they replace.
  config reset               Drop session changes and reload settings.json.
""".strip()


def _config_list(args: List[str]) -> int:
    if not args:
        print(json.dumps(config_manager.get_all(), indent=2))
        return 0
    section = config_manager.get_nested(args[0])
    if not isinstance(section, dict):
        print(f"❌ Error: No configuration section named '{args[0]}'.")
        return 1
    print(json.dumps({args[0]: section}, indent=2))
    return 0


def _config_get(args: List[str]) -> int:
    if len(args) != 1:
        print("Usage: config get <key>")
        return 1
    value = config_manager.get_nested(args[0])
    if value is None:
        print(f"❌ Error: Unknown config key '{args[0]}'.")
        return 1
    print(json.dumps(value) if isinstance(value, (dict, bool)) else value)
    return 0


def _config_set(args: List[str]) -> int:
    if len(args) < 2:
        print("Usage: config set <key> <value>")
        return 1
    key_path, value = args[0], " ".join(args[1:])
    if len(value) >= 2 and value[0] == value[-1] == '"':
        value = value[1:-1]

    if not config_manager.set_nested(key_path, value):
        print(f"❌ Error: Failed to set config value for key '{key_path}'.")
        return 1

    stored = config_manager.get_nested(key_path)
    print(f"✅ Config updated: {key_path} = {stored} (type: {type(stored).__name__})")
    return 0


def _config_reset(_args: List[str]) -> int:
    config_manager.reset()
    print("✅ Configuration has been reset to the values from settings.json.")
    return 0


CONFIG_SUBCOMMANDS: Dict[str, Callable[[List[str]], int]] = {
    "list": _config_list,
    "get": _config_get,
    "set": _config_set,
    "reset": _config_reset,
}

COMMAND_HIERARCHY: Dict[str, Optional[Dict[str, Any]]] = {name: None for name in CONFIG_SUBCOMMANDS}


def handle_config(args: List[str], ctx: ShellContext, _stdin: Optional[str] = None) -> int:
    """Handles the 'config' command: inspect and change the session configuration."""
    if not args:
        print(config_help_text)
        return 1

    subcommand = CONFIG_SUBCOMMANDS.get(args[0])
    if subcommand is None:
        print(f"Unknown command: 'config {args[0]}'.\n\n{config_help_text}")
        return 1
    return subcommand(args[1:])
