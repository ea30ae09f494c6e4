from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional

class C:
    """ANSI color/style escape codes."""
    RESET = "\x1b[0m"
    BOLD  = "\x1b[1m"
    DIM   = "\x1b[2m"
    RED   = "\x1b[31m"
    YELLOW = "\x1b[33m"
    CYAN  = "\x1b[36m"
    GRAY  = "\x1b[90m"

@dataclass
class Diagnostic:
    kind: str
    code: str
    message: str
    path: Optional[str] = None      # JSON path of the offending value, e.g. "$[2].Scalar.value"
    filename: Optional[str] = None

def json_path(parent: str, key) -> str:
    """Extend a JSON path with an object key or a list index."""
    if isinstance(key, int):
        return f"{parent}[{key}]"
    return f"{parent}.{key}"


class Reporter:
    def __init__(self, filename: str = "<input>") -> None:
        self.filename = filename
        self.items: List[Diagnostic] = []

    def error(self, code: str, msg: str, path: Optional[str]):
        self.items.append(Diagnostic("error", code, msg, path, filename=self.filename))

    def warn(self, code: str, msg: str, path: Optional[str]):
        self.items.append(Diagnostic("warning", code, msg, path, filename=self.filename))

    @property
    def has_errors(self) -> bool:
        return any(d.kind == "error" for d in self.items)

    @property
    def has_warnings(self) -> bool:
        return any(d.kind == "warning" for d in self.items)

    def codes(self) -> List[str]:
        return [d.code for d in self.items]

    def format(self, use_color: bool = True, use_unicode: bool = True) -> str:
        """Render all diagnostics.

        use_color   → ANSI colorize location/kind/code
        use_unicode → use ╭ / ╰ guides around the JSON path line
        """
        out: List[str] = []

        for d in self.items:
            filename = d.filename or self.filename

            # Ensure message ends with period
            message = d.message if d.message.endswith('.') else f"{d.message}."

            if use_color:
                kind = f"{C.BOLD}{C.RED}error{C.RESET}" if d.kind == "error" else f"{C.BOLD}{C.YELLOW}warning{C.RESET}"
                head = f"{C.CYAN}{filename}{C.RESET}: {kind} [{C.DIM}{d.code}{C.RESET}]: {message}"
            else:
                head = f"{filename}: {d.kind} [{d.code}]: {message}"

            if d.path is None:
                out.append(head)
                continue

            if use_unicode:
                top, bottom = "  ╭──┤ ", "  ╰── at "
            else:
                top, bottom = "", "  ` at "
            if use_color:
                out.append(f"{C.GRAY}{top}{C.RESET}{head}")
                out.append(f"{C.GRAY}{bottom}{C.RESET}{d.path}")
            else:
                out.append(f"{top}{head}")
                out.append(f"{bottom}{d.path}")

        return "\n".join(out)

    def print(self, stream=None, use_color: Optional[bool] = None, use_unicode: Optional[bool] = None) -> None:
        """Print diagnostics to `stream` (default: sys.stderr).

        Color is auto-enabled for TTY unless NO_COLOR or TERM=dumb.
        Unicode guides are auto-enabled for TTY unless NO_UNICODE or TERM=dumb.
        """
        import os, sys
        stream = stream or sys.stderr

        if use_color is None:
            is_tty = getattr(stream, "isatty", lambda: False)()
            no_color = os.getenv("NO_COLOR") is not None
            dumb = os.getenv("TERM") == "dumb"
            use_color = bool(is_tty and not no_color and not dumb)

        if use_unicode is None:
            is_tty = getattr(stream, "isatty", lambda: False)()
            no_unicode = os.getenv("NO_UNICODE") is not None
            dumb = os.getenv("TERM") == "dumb"
            use_unicode = bool(is_tty and not no_unicode and not dumb)

        text = self.format(use_color=use_color, use_unicode=use_unicode)
        if text:
            print(text, file=stream)
