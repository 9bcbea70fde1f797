"""Color letters and their SGR codes."""

from enum import StrEnum

BG_OFFSET = 10
BRIGHT_OFFSET = 60


class ColorLetter(StrEnum):
    """Color letter usable as a foreground or background in a tag."""

    DEFAULT = "d"
    BLACK = "k"
    RED = "r"
    GREEN = "g"
    YELLOW = "y"
    BLUE = "b"
    MAGENTA = "m"
    CYAN = "c"
    WHITE = "w"


_BASE_CODES: dict[ColorLetter, int] = {
    ColorLetter.DEFAULT: 39,
    ColorLetter.BLACK: 30,
    ColorLetter.RED: 31,
    ColorLetter.GREEN: 32,
    ColorLetter.YELLOW: 33,
    ColorLetter.BLUE: 34,
    ColorLetter.MAGENTA: 35,
    ColorLetter.CYAN: 36,
    ColorLetter.WHITE: 37,
}


def parse_color_letter(char: str) -> ColorLetter | None:
    """Return the color for a tag character, or None if it is not one."""
    try:
        return ColorLetter(char)
    except ValueError:
        return None


def base_code(letter: ColorLetter) -> int:
    """Foreground SGR code of a color, without brightness."""
    return _BASE_CODES[letter]


def fg_code(letter: ColorLetter, *, bright: bool = False) -> int:
    """Foreground SGR code, shifted to the high intensity range if bright."""
    code = base_code(letter)
    return code + BRIGHT_OFFSET if bright else code


def bg_code(letter: ColorLetter) -> int:
    """Background SGR code. Brightness never applies to backgrounds."""
    return base_code(letter) + BG_OFFSET
