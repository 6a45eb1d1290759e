"""The start screen: the logo and the name, centered on the background."""

from __future__ import annotations

from itertools import groupby
from typing import Optional

from typecrab.scheme import RESET, Scheme, Span, Style

LOGO_LINES = (
    "   ████████",
    "▄▄▄████████",
    "████       ",
    "▀▀▀████    ",
    "   ████    ",
    "           ",
)

TEXT_LINES = (
    "                                                 ▄▄    ",
    "▄██▄▄ ▄▄   ▄▄ ▄▄▄▄▄   ▄▄▄▄   ▄▄▄▄  ▄ ▄▄▄   ▄▄▄▄  ██▄▄▄ ",
    "▀██▀▀ ▀██ ██▀ ██▀▀██ ██▀▀██ ██▀ ▀▀ ██▀▀██ ▀▀  ██ ██▀▀██",
    " ██▄   ▀███▀  ██  ██ ██▀▀▀  ██▄ ▄▄ ██     ▄█▀▀██ ██  ██",
    "  ▀▀  ▄▄██    ██▀▀▀   ▀▀▀▀▀  ▀▀▀▀  ▀▀     ▀▀▀▀▀▀ ▀▀▀▀▀ ",
    "      ▀▀▀     ▀▀                                       ",
)

Line = list[Span]


def build_start(scheme: Optional[Scheme] = None) -> list[Line]:
    """Lines of the start screen: logo, a gap, and the name beside it."""
    scheme = scheme or Scheme()
    logo_style = Style(fg=scheme.orange)
    text_style = Style(fg=scheme.white)

    logo_height, text_height = len(LOGO_LINES), len(TEXT_LINES)
    top_pad = (logo_height - text_height) // 2 if logo_height > text_height else 0
    total_height = max(logo_height, text_height)

    lines: list[Line] = []
    for i in range(total_height):
        logo = LOGO_LINES[i] if i < logo_height else ""
        text_idx = i - top_pad
        text = TEXT_LINES[text_idx] if 0 <= text_idx < text_height else ""
        lines.append([Span(logo, logo_style), Span("  "), Span(text, text_style)])
    return lines


def render_start(width: int, height: int, scheme: Optional[Scheme] = None) -> list[str]:
    """The start screen as ``height`` terminal rows of ``width`` cells each."""
    scheme = scheme or Scheme()
    background = scheme.background
    grid = [[(" ", background) for _ in range(width)] for _ in range(height)]

    lines = build_start(scheme)
    content_width = max((sum(span.width for span in line) for line in lines), default=0)
    y_offset = max(height - len(lines), 0) // 2
    x_offset = max(width - content_width, 0) // 2

    for i, line in enumerate(lines):
        y = y_offset + i
        if y >= height:
            break
        x = x_offset
        for span in line:
            style = span.style.patch(background)
            cursor = x
            for ch in span.content:
                cell_width = Span(ch).width
                if cell_width == 0:
                    continue
                if cursor + cell_width > width:
                    break
                grid[y][cursor] = (ch, style)
                for extra in range(1, cell_width):
                    grid[y][cursor + extra] = ("", style)
                cursor += cell_width
            x += span.width

    rows = []
    for row in grid:
        parts = [
            style.sgr() + "".join(ch for ch, _ in cells)
            for style, cells in groupby(row, key=lambda cell: cell[1])
        ]
        rows.append("".join(parts) + RESET)
    return rows