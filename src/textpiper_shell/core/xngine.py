from __future__ import annotations

import io
import inspect
import logging
import subprocess
import re
from contextlib import redirect_stdout
from typing import Any, Callable, Dict, List, Optional, Pattern, Tuple

from textpiper_shell.core.context.shell_context import ShellContext

QUIT_EXIT_CODE = 130
NOT_FOUND_EXIT_CODE = 127


class ExecuteEngine:
    """
    Core engine responsible for command execution, operator handling
    (';', '&&', '||', '|') and context variable expansion.
    """

    def __init__(
            self,
            *,
            command_registry: Dict[str, Callable[..., int]],
            var_pattern: Pattern[str],
            maybe_expand_args: Callable[[str, List[Any], ShellContext], List[str]],
            post_refresh: Callable[[ShellContext], None],
            logger: Optional[logging.Logger] = None,
    ) -> None:
        self._commands = command_registry
        self._VAR_PATTERN = var_pattern
        self._maybe_expand_args = maybe_expand_args
        self._post_refresh = post_refresh
        self._log = logger or logging.getLogger(__name__)

    def expand_context_vars(self, text: str, ctx: ShellContext) -> str:
        """Performs @{var} expansion in the given text. Unknown variables are left as-is."""
        def repl(m: re.Match) -> str:
            end = m.end()
            if end < len(text) and text[end] == '=':
                return m.group(0)
            val = self.resolve_var(m.group(1), ctx)
            return str(val) if val is not None else m.group(0)

        return self._VAR_PATTERN.sub(repl, text)

    def execute_sequence(
            self,
            commands: List[Tuple[str, List[str], Optional[str]]],
            context: Optional[ShellContext] = None
    ) -> int:
        """
        Executes a parsed command sequence and returns the last exit code.
        Returns QUIT_EXIT_CODE immediately when a handler asks the shell to stop.
        """
        ctx = context or ShellContext()
        if not commands:
            return 0

        last_exit = 0
        i = 0
        n = len(commands)

        while i < n:
            name, raw_args, op = commands[i]

            # --- Operator Logic (&&, ||): skip the command and its pipeline ---
            if (op == "&&" and last_exit != 0) or (op == "||" and last_exit == 0):
                i += 1
                while i < n and commands[i][2] == "|":
                    i += 1
                continue

            # --- Pipeline Handling ---
            segment: List[Tuple[str, List[str]]] = [(name, raw_args)]
            j = i + 1
            while j < n and commands[j][2] == "|":
                segment.append((commands[j][0], commands[j][1]))
                j += 1

            stdin: Optional[str] = None
            for k, (seg_name, seg_raw_args) in enumerate(segment):
                is_last = (k == len(segment) - 1)
                seg_args = self._maybe_expand_args(seg_name, seg_raw_args, ctx)
                handler = self._commands.get(seg_name)

                # Every stage but the last writes into the next stage's stdin
                if is_last:
                    last_exit = self._dispatch(handler, seg_name, seg_args, ctx, stdin)
                else:
                    buf = io.StringIO()
                    with redirect_stdout(buf):
                        last_exit = self._dispatch(handler, seg_name, seg_args, ctx, stdin)
                    stdin = buf.getvalue()

                self._post_refresh(ctx)
                if last_exit == QUIT_EXIT_CODE:
                    return QUIT_EXIT_CODE
                if last_exit != 0 and not is_last:
                    break

            i = j

        return last_exit

    def _dispatch(self, handler, name, args, ctx, stdin) -> int:
        if handler is None:
            return self._run_external(name, args, stdin)
        return self._call_handler(handler, args, ctx, stdin)

    def _call_handler(self, handler, args, ctx, stdin) -> int:
        sig = inspect.signature(handler)
        try:
            if len(sig.parameters) >= 3:
                return int(handler(args, ctx, stdin))
            return int(handler(args, ctx))
        except Exception as e:
            # A failing command must not take the REPL down with it.
            self._log.error("Command '%s' failed: %s", handler.__name__, e, exc_info=True)
            print(f"❌ Error: {e}")
            return 1

    def _run_external(self, name, args, stdin) -> int:
        try:
            proc = subprocess.run([name] + args, input=(stdin or ""), text=True, check=False)
            return int(proc.returncode)
        except FileNotFoundError:
            print(f"command not found: {name}")
            return NOT_FOUND_EXIT_CODE

    def resolve_var(self, name: str, ctx: ShellContext) -> Optional[Any]:
        """
        Resolves a context variable. Direct variable names are checked first,
        then dotted paths into the last report (e.g. 'report.seo.link_count').
        """
        variables = ctx.variables()
        if name in variables:
            return variables[name]

        head, _, tail = name.partition(".")
        roots = {
            "report": ctx.last_report,
            "ctx": ctx,
        }
        if head in roots and roots[head] is not None:
            return self._resolve_path(roots[head], tail)

        return None

    @staticmethod
    def _resolve_path(obj: Any, path: str) -> Optional[Any]:
        """Walks a dotted attribute/key path; returns None when a step is missing."""
        current = obj
        for part in filter(None, path.split(".")):
            if isinstance(current, dict):
                current = current.get(part)
            elif isinstance(current, (list, tuple)) and part.isdigit():
                index = int(part)
                current = current[index] if index < len(current) else None
            else:
                current = getattr(current, part, None)
            if current is None:
                return None
        return current
