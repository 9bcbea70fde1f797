"""Terminal support detection for SGR codes."""

import os
import stat
import sys
from enum import StrEnum, auto
from typing import IO

TRUE_COLOR_COLORTERM_VALUES = ("truecolor", "24bit")


class When(StrEnum):
    """When to emit SGR codes."""

    AUTO = auto()
    ALWAYS = auto()
    NEVER = auto()


class TerminalSupport(StrEnum):
    """Level of attribute support of the connected terminal."""

    NONE = auto()
    BASIC_COLOR = auto()
    TRUE_COLOR = auto()


def terminal_support(stream: IO[str] | None = None) -> TerminalSupport:
    """Detect the attribute support of the terminal connected to a stream.

    The stream defaults to standard output. There is no support when the
    stream is not a TTY, when it is not a character device, or when TERM is
    "dumb". COLORTERM tells apart true color terminals.
    """
    if stream is None:
        stream = sys.stdout

    try:
        if not stream.isatty():
            return TerminalSupport.NONE
        mode = os.fstat(stream.fileno()).st_mode
    except (OSError, ValueError):
        # Closed stream, or a stream without a file descriptor
        return TerminalSupport.NONE

    if not stat.S_ISCHR(mode):
        return TerminalSupport.NONE

    if os.getenv("TERM") == "dumb":
        return TerminalSupport.NONE

    colorterm = os.getenv("COLORTERM", "").lower()
    if colorterm in TRUE_COLOR_COLORTERM_VALUES:
        return TerminalSupport.TRUE_COLOR

    return TerminalSupport.BASIC_COLOR


def has_terminal_support(stream: IO[str] | None = None) -> bool:
    """Check if the terminal connected to a stream seems to support SGR."""
    return terminal_support(stream) != TerminalSupport.NONE


def should_emit_sgr(when: When, stream: IO[str] | None = None) -> bool:
    """Decide whether to emit SGR codes based on priority order.

    Priority:
    1. `when` if not AUTO
    2. NO_COLOR environment variable (if defined and not empty)
    3. FORCE_COLOR environment variable (if defined and not empty)
    4. Terminal support of `stream`
    """
    if when != When.AUTO:
        return when == When.ALWAYS

    if os.getenv("NO_COLOR"):
        return False

    if os.getenv("FORCE_COLOR"):
        return True

    return has_terminal_support(stream)
