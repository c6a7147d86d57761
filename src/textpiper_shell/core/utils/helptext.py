# src/textpiper_shell/core/utils/helptext.py
from typing import Optional

from textpiper_shell.core.command_registry import COMMAND_HELP_TEXTS

HEADER_HELP_TEXT = """
📝 TextPiper Shell - Help

Text statistics, readability (Flesch reading ease) and SEO signals for any
text you type, pipe in or load from a file. 'help <command>' shows one command.

---
CHAINING
---
  A ; B        always run B          A && B       run B if A succeeded
  A || B       run B if A failed     A | B        A's output becomes B's input

---
VARIABLES
---
  @{name}=value             set a session variable (long form: set @{name}=value)
  @{name}                   print it (long form: get @{name}; 'get' lists all)
  @{report.words}           headline numbers of the last analysis: words, sentences,
                            paragraphs, reading_time, flesch, top_keyword
  @{report.seo.link_count}  any field of the last report by dotted path

---
EXAMPLES
---
  sample ; report seo
  analyze --file draft.md && export --format xlsx -o draft
  sample show | analyze --json
  batch posts/*.md && export --batch --format csv

---
GENERAL
---
  help [command]      Show this help text, or the help of one command.
  quit                Exit the shell.
  cls                 Clear the screen.
  echo <text...>      Print text (echo --code N sets the exit code).
  !c / !h             Complete from all commands / recent history.
""".strip()


def get_command_help(command: str) -> Optional[str]:
    return COMMAND_HELP_TEXTS.get(command)


def get_help_text() -> str:
    """The header followed by every command's help fragment, sorted by command name."""
    return "\n\n".join([HEADER_HELP_TEXT] + [COMMAND_HELP_TEXTS[name] for name in sorted(COMMAND_HELP_TEXTS)])
