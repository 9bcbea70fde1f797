"""Tag markup conversion.

An opening tag is, between `[` and `]`, an unordered sequence of at least one
of:

    `!`       bold
    `-`       dim
    `_`       underline
    `#`       italic
    `*`       bright foreground color
    `COLOR`   foreground color
    `:COLOR`  background color

where `COLOR` is one of `d` (default), `k` (black), `r` (red), `g` (green),
`y` (yellow), `b` (blue), `m` (magenta), `c` (cyan) or `w` (white). A closing
tag is `[/]`.

Tags nest up to five levels deep and must be balanced. Nesting is additive: a
nested tag cannot cancel an active attribute, but its colors replace the
enclosing ones until it is closed. Every emitted SGR sequence starts with a
reset, so closing a tag re-selects the attributes of the enclosing tag.

Escape `[` with `\\[` and `\\` with `\\\\`, see escape().

Examples:

    This is [r]red text[/]
    [!]Bold[/] and [_]underlined[/] text
    Error: [!*r]critical failure[/]!
    [y:b]Yellow on blue background[/]
"""

import re
from typing import IO

from mint.parser import MarkupParser
from mint.terminal import When, should_emit_sgr

SGR_REGEX = re.compile(
    r"""
    \x1b          # ESC character (0x1b)
    \[            # CSI - Control Sequence Introducer
    [0-9;]*       # Parameters: `;`-separated decimal codes
    m             # Final byte of SGR
    """,
    re.VERBOSE,
)


def render(text: str) -> str:
    """Convert the tags of `text` to SGR escape sequences.

    Raises:
        MarkupError: If `text` is not valid markup
    """
    return MarkupParser(text).parse()


def strip(text: str) -> str:
    """Remove the tags of `text`, resolving escapes.

    The markup is validated exactly like render() does.

    Raises:
        MarkupError: If `text` is not valid markup
    """
    return MarkupParser(text, emit_sgr=False).parse()


def escape(text: str) -> str:
    """Escape `\\` and `[` so that `text` is rendered verbatim."""
    return text.replace("\\", "\\\\").replace("[", "\\[")


def escape_ansi(text: str) -> str:
    """Remove the SGR escape sequences of `text`.

    Applied to the output of render(), this gives the output of strip().
    """
    return SGR_REGEX.sub("", text)


def mint(
    text: str, when: When = When.AUTO, stream: IO[str] | None = None
) -> str:
    """Render or strip the tags of `text` depending on `when`.

    With When.AUTO, SGR codes are emitted only when the terminal connected to
    `stream` (standard output by default) seems to support them, see
    should_emit_sgr().

    Raises:
        MarkupError: If `text` is not valid markup
    """
    return MarkupParser(text, emit_sgr=should_emit_sgr(when, stream)).parse()
