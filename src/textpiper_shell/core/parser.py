# src/textpiper_shell/core/parser.py
from __future__ import annotations
import re
import shlex
from typing import List, Optional, Tuple

CommandSegment = Tuple[str, List[str], Optional[str]]

OPERATORS: set[str] = {"&&", "||", ";", "|"}
# Variable expansion: @{name}
VAR_PATTERN = re.compile(r"@\{([^}]+)\}")
# Variable SET shorthand: @{name}=value
SET_PATTERN = re.compile(r"^@\{([^}=]+)\}=(.*)$")
# Variable GET shorthand: @{name} (full match)
GET_PATTERN = re.compile(r"^@\{([A-Za-z_][\w\.]*)\}$")


def parse_command_line(line: str) -> List[CommandSegment]:
    """
    Parses the user input into a list of command segments.

    A segment is (command_name, args, op_before), where op_before is the
    operator that joined it to the previous segment (None for the first).
    '@{var}=value' becomes a 'set' command and a lone '@{var}' a 'get'.

    Args:
        line (str): The raw input string from the shell.

    Returns:
        List[CommandSegment]: The parsed segments in input order.
    """
    s = (line or "").strip()
    if not s:
        return []

    try:
        tokens = shlex.split(s, posix=True)
    except ValueError:
        # Unbalanced quotes: fall back to plain whitespace splitting
        tokens = s.split()

    segments: List[CommandSegment] = []
    name: Optional[str] = None
    args: List[str] = []
    op_before: Optional[str] = None

    for tok in tokens:
        if tok in OPERATORS:
            if name is not None:
                segments.append((name, args, op_before))
            name, args = None, []
            op_before = tok
            continue

        if name is not None:
            args.append(tok)
        elif SET_PATTERN.match(tok):
            name, args = "set", [tok]
        elif GET_PATTERN.fullmatch(tok):
            name, args = "get", [tok]
        else:
            name = tok

    if name is not None:
        segments.append((name, args, op_before))

    return segments
