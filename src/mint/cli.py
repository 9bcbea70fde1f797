"""Mint command line interface.

Three commands, each converting its single argument and writing the result to
standard output without a trailing newline:

- mint-render: convert tags to SGR escape sequences
- mint-escape: escape text for verbatim inclusion in markup
- mint-strip: remove tags

On a markup error, mint-render and mint-strip write `ERROR: <message>` to
standard output and exit with status 1.
"""

import sys
import typing

import typer

from mint.console import (
    is_verbose,
    print_error,
    print_event,
    print_text,
    print_verbose,
    set_verbose,
)
from mint.markup import escape, mint, strip
from mint.parser import MarkupError
from mint.terminal import When

# ruff: noqa: FBT001 FBT003 Typer API uses boolean arguments for flags
# ruff: noqa: B008 function-call-in-default-argument

render_app = typer.Typer(add_completion=False)
escape_app = typer.Typer(add_completion=False)
strip_app = typer.Typer(add_completion=False)


def _convert(
    name: str, convert: typing.Callable[[str], str], text: str
) -> None:
    """Convert text, write the result or the error to standard output.

    In verbose mode, the error and its offset also go to the console.
    """
    verbose = is_verbose()
    if verbose:
        print_event(name)
        print_text("Input:", text)
    try:
        output = convert(text)
    except MarkupError as error:
        sys.stdout.write(f"ERROR: {error}")
        if verbose:
            print_error("Markup error:", error)
        raise typer.Exit(1) from error
    sys.stdout.write(output)
    if verbose:
        print_text("Output:", output)


@render_app.command()
def render_command(
    text: str = typer.Argument(help="Markup to render"),
    color: When = typer.Option(
        When.ALWAYS, "--color", help="When to emit SGR codes"
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose", help="Show verbose output"
    ),
) -> None:
    """Render markup tags as terminal SGR codes."""
    if verbose:
        set_verbose()
        print_verbose("  Color:", color.value)
    _convert(
        "mint-render", lambda t: mint(t, color, stream=sys.stdout), text
    )


@escape_app.command()
def escape_command(
    text: str = typer.Argument(help="Text to escape"),
    verbose: bool = typer.Option(
        False, "-v", "--verbose", help="Show verbose output"
    ),
) -> None:
    """Escape text so that markup renders it verbatim."""
    if verbose:
        set_verbose()
    _convert("mint-escape", escape, text)


@strip_app.command()
def strip_command(
    text: str = typer.Argument(help="Markup to strip"),
    verbose: bool = typer.Option(
        False, "-v", "--verbose", help="Show verbose output"
    ),
) -> None:
    """Remove markup tags, keeping the text."""
    if verbose:
        set_verbose()
    _convert("mint-strip", strip, text)


if __name__ == "__main__":
    render_app()
