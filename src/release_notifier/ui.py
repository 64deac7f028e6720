"""Console UI helpers (color and message printers).

Small, dependency-free helpers for terminal output:
 - ANSI color codes gated by a conservative capability check
 - Printers for info/ok/error plus the celebrate/tip lines used by the
   update advisory

Capability checks never raise and respect ``NO_COLOR``. Color is only emitted
when the target stream is a TTY.
"""

from __future__ import annotations
import os
import sys
from typing import Optional, TextIO

RESET = "\033[0m"
RED = "\033[31m"
GREEN = "\033[32m"
BLUE = "\033[34m"
CYAN = "\033[36m"
MAGENTA = "\033[35m"


def supports_color(stream: Optional[TextIO] = None) -> bool:
    """Return True when ANSI colors are likely supported on ``stream``.

    Defaults to ``sys.stdout``. Any errors during detection result in ``False``.
    """
    try:
        if os.environ.get("NO_COLOR"):
            return False
        stream = stream if stream is not None else sys.stdout
        return bool(getattr(stream, "isatty", lambda: False)())
    except Exception:
        return False


def c(s: str, color: str, stream: Optional[TextIO] = None) -> str:
    """Wrap ``s`` in ``color`` when the stream supports it."""
    return f"{color}{s}{RESET}" if supports_color(stream) else s


def _emit(prefix: str, color: str, msg: str, file: Optional[TextIO]) -> None:
    stream = file if file is not None else sys.stdout
    print(c(prefix, color, stream) + msg, file=stream)


def info(msg: str, file: Optional[TextIO] = None) -> None:
    """Print an informational message prefixed with "ℹ"."""
    _emit("ℹ ", BLUE, msg, file)


def ok(msg: str, file: Optional[TextIO] = None) -> None:
    """Print a success message prefixed with "✓"."""
    _emit("✓ ", GREEN, msg, file)


def err(msg: str, file: Optional[TextIO] = None) -> None:
    """Print an error message prefixed with "✗"."""
    _emit("✗ ", RED, msg, file)


def celebrate(msg: str, file: Optional[TextIO] = None) -> None:
    _emit("🎉 ", MAGENTA, msg, file)


def tip(msg: str, file: Optional[TextIO] = None) -> None:
    _emit("💡 ", CYAN, msg, file)


__all__ = [
    "supports_color",
    "c",
    "info",
    "ok",
    "err",
    "celebrate",
    "tip",
    "RESET",
    "RED",
    "GREEN",
    "BLUE",
    "CYAN",
    "MAGENTA",
]
