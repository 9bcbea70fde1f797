"""Style states and their SGR escape sequences.

A style state is the merged set of attributes active at one nesting level.
States are immutable: opening a tag merges the tag directive into the
enclosing state and produces a new state, and closing a tag simply returns to
the enclosing state.
"""

from __future__ import annotations

from dataclasses import dataclass

from mint.colors import ColorLetter, bg_code, fg_code

ESC = "\x1b"
RESET = f"{ESC}[0m"


@dataclass
class TagDirective:
    """Attributes mentioned in the body of one opening tag.

    Fields only go from unset to set while the tag body is scanned. A color
    given twice in the same body keeps the last one.
    """

    bold: bool = False
    dim: bool = False
    italic: bool = False
    underline: bool = False
    bright: bool = False
    fg: ColorLetter | None = None
    bg: ColorLetter | None = None


@dataclass(frozen=True)
class StyleState:
    """Snapshot of all attributes active at one nesting level."""

    bold: bool = False
    dim: bool = False
    italic: bool = False
    underline: bool = False
    bright: bool = False
    fg: ColorLetter | None = None
    bg: ColorLetter | None = None

    def merge(self, directive: TagDirective) -> StyleState:
        """Return the child state of this state for an opening tag.

        Attributes accumulate, colors given by the directive replace the
        inherited ones.
        """
        return StyleState(
            bold=self.bold or directive.bold,
            dim=self.dim or directive.dim,
            italic=self.italic or directive.italic,
            underline=self.underline or directive.underline,
            bright=self.bright or directive.bright,
            fg=directive.fg if directive.fg is not None else self.fg,
            bg=directive.bg if directive.bg is not None else self.bg,
        )


ROOT_STYLE = StyleState()


def sgr_codes(state: StyleState) -> list[int]:
    """SGR codes for a state, always starting with a reset."""
    codes = [0]
    if state.bold:
        codes.append(1)
    if state.dim:
        codes.append(2)
    if state.italic:
        codes.append(3)
    if state.underline:
        codes.append(4)
    if state.fg is not None:
        codes.append(fg_code(state.fg, bright=state.bright))
    if state.bg is not None:
        codes.append(bg_code(state.bg))
    return codes


def render_sgr(state: StyleState) -> str:
    """Escape sequence selecting exactly the attributes of a state."""
    return f"{ESC}[{';'.join(str(code) for code in sgr_codes(state))}m"
