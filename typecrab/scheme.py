"""Terminal colors, styles and color schemes read from CSS variable files."""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass, field
from typing import Optional, Union
from pathlib import Path

RESET = "\x1b[0m"

_CSS_VARIABLE = re.compile(r"--([^:]+):\s*([^;]+);")
_HEX_BYTE = re.compile(r"\+?[0-9A-Fa-f]+")

_NAMED_CODES = {
    "black": 30,
    "red": 31,
    "green": 32,
    "yellow": 33,
    "blue": 34,
    "magenta": 35,
    "cyan": 36,
    "gray": 37,
    "dark_gray": 90,
    "light_red": 91,
    "light_green": 92,
    "light_yellow": 93,
    "light_blue": 94,
    "light_magenta": 95,
    "light_cyan": 96,
    "white": 97,
}


class SchemeError(Exception):
    """A color scheme could not be loaded."""


@dataclass(frozen=True)
class Color:
    """A named terminal color or a 24-bit RGB color."""

    name: str
    rgb: Optional[tuple[int, int, int]] = None

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> "Color":
        return cls("rgb", (r, g, b))

    def sgr(self, background: bool = False) -> str:
        """SGR parameters selecting this color as foreground or background."""
        if self.rgb is not None:
            r, g, b = self.rgb
            return f"{48 if background else 38};2;{r};{g};{b}"
        code = _NAMED_CODES[self.name]
        return str(code + 10 if background else code)


Color.BLACK = Color("black")
Color.RED = Color("red")
Color.GREEN = Color("green")
Color.YELLOW = Color("yellow")
Color.LIGHT_YELLOW = Color("light_yellow")
Color.WHITE = Color("white")
Color.DARK_GRAY = Color("dark_gray")


@dataclass(frozen=True)
class Style:
    fg: Optional[Color] = None
    bg: Optional[Color] = None
    underlined: bool = False

    def patch(self, other: "Style") -> "Style":
        """Overlay ``other`` on this style: colors it sets win, modifiers add up."""
        return Style(
            fg=other.fg if other.fg is not None else self.fg,
            bg=other.bg if other.bg is not None else self.bg,
            underlined=self.underlined or other.underlined,
        )

    def sgr(self) -> str:
        """The escape sequence that switches a terminal to this style."""
        params = []
        if self.underlined:
            params.append("4")
        if self.fg is not None:
            params.append(self.fg.sgr())
        if self.bg is not None:
            params.append(self.bg.sgr(background=True))
        return f"\x1b[{';'.join(params)}m" if params else ""

    def apply(self, text: str) -> str:
        """``text`` wrapped in this style's escape sequences."""
        start = self.sgr()
        return f"{start}{text}{RESET}" if start else text


def _char_width(ch: str) -> int:
    if unicodedata.combining(ch) or unicodedata.category(ch) in ("Mn", "Me", "Cf", "Cc"):
        return 0
    return 2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1


@dataclass(frozen=True)
class Span:
    """A piece of text drawn in one style."""

    content: str
    style: Style = field(default_factory=Style)

    @property
    def width(self) -> int:
        """Number of terminal cells the content occupies."""
        return sum(_char_width(ch) for ch in self.content)

    def render(self) -> str:
        return self.style.apply(self.content)


@dataclass
class Scheme:
    """A set of CSS color variables, with terminal fallbacks for missing ones."""

    variables: dict[str, str] = field(default_factory=dict)

    def color(self, var_name: str, fallback: Color) -> Color:
        hex_value = self.variables.get(var_name)
        return fallback if hex_value is None else parse_hex_color(hex_value)

    @property
    def red(self) -> Color:
        return self.color("red-color", Color.RED)

    @property
    def green(self) -> Color:
        return self.color("green-color", Color.GREEN)

    @property
    def yellow(self) -> Color:
        return self.color("yellow-color", Color.LIGHT_YELLOW)

    @property
    def orange(self) -> Color:
        return self.color("orange-color", Color.YELLOW)

    @property
    def white(self) -> Color:
        return self.color("white-color", Color.WHITE)

    @property
    def dark(self) -> Color:
        return self.color("dark-color", Color.BLACK)

    @property
    def light(self) -> Color:
        return self.color("light-color", Color.DARK_GRAY)

    @property
    def background(self) -> Style:
        return Style(bg=self.dark)

    @property
    def border(self) -> Style:
        return Style(fg=self.orange)

    @property
    def title(self) -> Style:
        return Style(fg=self.white)


def parse_css_variables(content: str) -> dict[str, str]:
    """Collect ``--name: value;`` declarations; later ones override earlier ones."""
    return {
        match.group(1).strip(): match.group(2).strip()
        for match in _CSS_VARIABLE.finditer(content)
    }


def parse_hex_color(hex_str: str) -> Color:
    """Parse ``#rrggbb``; anything else yields white."""
    value = hex_str.strip()
    if value.startswith("#"):
        digits = value[1:]
        if len(digits) == 6:
            pairs = [digits[i:i + 2] for i in range(0, 6, 2)]
            if all(_HEX_BYTE.fullmatch(pair) for pair in pairs):
                r, g, b = (int(pair, 16) for pair in pairs)
                return Color.from_rgb(r, g, b)
    return Color.WHITE


def load_scheme_file(path: Union[str, Path]) -> Scheme:
    """Read a CSS file of color variables; raises SchemeError if it cannot be read."""
    try:
        content = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SchemeError(f"cannot read scheme file '{path}'") from e
    return Scheme(parse_css_variables(content))