# src/textpiper_shell/core/handlers/studio_handler.py
import argparse
from typing import List, Optional

from analyzer.utils.launcher import launch_studio_detached
from textpiper_shell.core.context.shell_context import ShellContext
from textpiper_shell.core.managers.config_manager import config_manager

studio_help_text = """
STUDIO:
  studio [--port <n>] Launch TextPiper Studio (web interface) in the background
                      on the first free port from studio.port (or <n>) upwards.
""".strip()

COMMAND_HIERARCHY = None
COMMAND_OPTIONS = ["--port"]


def handle_studio(args: List[str], ctx: ShellContext, _stdin: Optional[str] = None) -> int:
    """Handles the 'studio' command. Stores the chosen port in @{studio.port}."""
    parser = argparse.ArgumentParser(prog="studio", description="Launch TextPiper Studio.")
    parser.add_argument("--port", type=int, default=config_manager.get_nested("studio.port", 5000))
    try:
        parsed = parser.parse_args(args)
    except SystemExit:
        return 1

    port = launch_studio_detached(parsed.port, config_manager.get_nested("studio.host", "127.0.0.1"))
    if port is None:
        return 1

    ctx.set("studio.port", str(port))
    return 0
