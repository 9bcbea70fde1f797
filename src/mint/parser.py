"""Parser for the tag markup.

The markup is scanned one character at a time by a state machine. Opening tags
push a merged style state onto a bounded nesting stack and closing tags pop it,
emitting the SGR sequence of the state that becomes active. The end of the
input is fed to the state machine as a final `None` character, so every state
decides for itself whether the input may end there.
"""

from enum import Enum, auto
from io import StringIO

from rich.markup import escape

from mint.colors import parse_color_letter
from mint.style import ROOT_STYLE, StyleState, TagDirective, render_sgr

MAX_DEPTH = 5

EMPTY_OPENING_TAG = "Empty opening tag"
EXPECTING_OPENING_TAG_END = "Expecting `]` to terminate the opening tag"
EXPECTING_COLOR_LETTER = "Expecting color letter"
UNKNOWN_COLOR_LETTER = "Unknown color letter `{}`"
INCOMPLETE_ESCAPE = "Incomplete escape sequence at end of string"
INVALID_ESCAPE = "Invalid escape sequence"
UNBALANCED_CLOSING_TAG = "Unbalanced closing tag"
EXPECTING_CLOSING_TAG_END = "Expecting `]` after `[/`"
UNBALANCED_OPENING_TAG = "Unbalanced opening tag"
MAX_DEPTH_EXCEEDED = "Maximum nesting depth exceeded"

# Tag body characters setting a boolean attribute
ATTRIBUTE_MARKERS: dict[str, str] = {
    "!": "bold",
    "-": "dim",
    "#": "italic",
    "_": "underline",
    "*": "bright",
}


class MarkupError(ValueError):
    """Syntax error in tag markup.

    The string value is the diagnostic message alone, the position is only
    informative.
    """

    def __init__(self, message: str, position: int) -> None:
        """Initialize with the message and the input offset of the error."""
        self.message = message
        self.position = position
        super().__init__(message)

    def __rich__(self) -> str:
        """Rich formatted error message."""
        return (
            f"{escape(self.message)}\n"
            f"[bold]Offset:[/] {self.position}"
        )


class State(Enum):
    """State machine states for markup scanning."""

    LITERAL = auto()
    ESCAPE = auto()
    TAG_START = auto()
    CLOSE_TAG = auto()
    TAG_BODY = auto()
    BG_COLOR = auto()


class NestingStack:
    """Bounded stack of the style states of the open tags.

    The root state is implicit: it is the top of an empty stack.
    """

    def __init__(self, max_depth: int = MAX_DEPTH) -> None:
        """Initialize an empty stack."""
        self.max_depth = max_depth
        self._frames: list[StyleState] = []

    def __len__(self) -> int:
        """Number of open tags."""
        return len(self._frames)

    @property
    def top(self) -> StyleState:
        """State of the innermost open tag, or the root state."""
        return self._frames[-1] if self._frames else ROOT_STYLE

    def is_full(self) -> bool:
        """Check if another tag would exceed the maximum depth."""
        return len(self._frames) >= self.max_depth

    def push(self, state: StyleState) -> None:
        """Push the state of a newly opened tag."""
        if self.is_full():
            msg = "push onto a full nesting stack"
            raise IndexError(msg)
        self._frames.append(state)

    def pop(self) -> StyleState:
        """Pop the state of the innermost open tag."""
        if not self._frames:
            msg = "pop from an empty nesting stack"
            raise IndexError(msg)
        return self._frames.pop()


class MarkupParser:
    """State machine converting tag markup to text.

    With `emit_sgr` false, tags are removed without emitting any escape
    sequence, but the markup is checked exactly the same way.
    """

    def __init__(self, text: str, *, emit_sgr: bool = True) -> None:
        """Initialize the parser for one input string."""
        self.text = text
        self.emit_sgr = emit_sgr
        self.state = State.LITERAL
        self.stack = NestingStack()
        self.directive = TagDirective()
        self.position = 0
        self._output = StringIO()
        self._handlers = {
            State.LITERAL: self._literal,
            State.ESCAPE: self._escape,
            State.TAG_START: self._tag_start,
            State.CLOSE_TAG: self._close_tag,
            State.TAG_BODY: self._tag_body,
            State.BG_COLOR: self._bg_color,
        }

    def parse(self) -> str:
        """Scan the whole input and return the converted text.

        Raises:
            MarkupError: At the first syntax error in the input
        """
        for position, char in enumerate(self.text):
            self.position = position
            self._handlers[self.state](char)
        self.position = len(self.text)
        self._handlers[self.state](None)
        return self._output.getvalue()

    def _fail(self, message: str) -> MarkupError:
        return MarkupError(message, self.position)

    def _emit_style(self, state: StyleState) -> None:
        if self.emit_sgr:
            self._output.write(render_sgr(state))

    def _literal(self, char: str | None) -> None:
        if char is None:
            if self.stack:
                raise self._fail(UNBALANCED_OPENING_TAG)
        elif char == "\\":
            self.state = State.ESCAPE
        elif char == "[":
            self.state = State.TAG_START
        else:
            self._output.write(char)

    def _escape(self, char: str | None) -> None:
        if char is None:
            raise self._fail(INCOMPLETE_ESCAPE)
        if char not in "\\[":
            raise self._fail(INVALID_ESCAPE)
        self._output.write(char)
        self.state = State.LITERAL

    def _tag_start(self, char: str | None) -> None:
        if char is None:
            raise self._fail(EXPECTING_OPENING_TAG_END)
        if char == "/":
            self.state = State.CLOSE_TAG
        elif char == "]":
            raise self._fail(EMPTY_OPENING_TAG)
        else:
            self.directive = TagDirective()
            self.state = State.TAG_BODY
            self._tag_body(char)

    def _close_tag(self, char: str | None) -> None:
        if char != "]":
            raise self._fail(EXPECTING_CLOSING_TAG_END)
        if not self.stack:
            raise self._fail(UNBALANCED_CLOSING_TAG)
        self.stack.pop()
        self._emit_style(self.stack.top)
        self.state = State.LITERAL

    def _tag_body(self, char: str | None) -> None:
        if char is None:
            raise self._fail(EXPECTING_OPENING_TAG_END)
        if char == "]":
            self._open_tag()
        elif attribute := ATTRIBUTE_MARKERS.get(char):
            setattr(self.directive, attribute, True)
        elif char == ":":
            self.state = State.BG_COLOR
        elif (color := parse_color_letter(char)) is not None:
            self.directive.fg = color
        else:
            raise self._fail(UNKNOWN_COLOR_LETTER.format(char))

    def _bg_color(self, char: str | None) -> None:
        if char is None:
            raise self._fail(EXPECTING_COLOR_LETTER)
        color = parse_color_letter(char)
        if color is None:
            raise self._fail(UNKNOWN_COLOR_LETTER.format(char))
        self.directive.bg = color
        self.state = State.TAG_BODY

    def _open_tag(self) -> None:
        if self.stack.is_full():
            raise self._fail(MAX_DEPTH_EXCEEDED)
        child = self.stack.top.merge(self.directive)
        self.stack.push(child)
        self._emit_style(child)
        self.state = State.LITERAL
