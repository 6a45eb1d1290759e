"""The test screen: the words being typed, highlighted, and a status bar."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import groupby
from typing import Optional, Sequence

from typecrab.response import Level
from typecrab.scheme import RESET, Scheme, Span, Style
from typecrab.session import TypingTest

Line = list[Span]
Cell = tuple[str, Style]

STATUS_HEIGHT = 3

_LEVEL_LABELS = {
    Level.INFO: "info",
    Level.WARNING: "warning",
    Level.ERROR: "error",
}


@dataclass(frozen=True)
class _Palette:
    correct: Style
    incorrect: Style
    active: Style
    underline: Style
    inactive: Style

    @classmethod
    def of(cls, scheme: Scheme) -> "_Palette":
        return cls(
            correct=Style(fg=scheme.green),
            incorrect=Style(fg=scheme.red),
            active=Style(fg=scheme.white),
            underline=Style(fg=scheme.white, underlined=True),
            inactive=Style(fg=scheme.light),
        )


def highlight_word(
    typed: str,
    text: str,
    is_current: bool,
    is_last: bool,
    scheme: Optional[Scheme] = None,
) -> Line:
    """Spans of one word, character by character.

    Characters before the first mistake are green, everything from it on red,
    the next expected character of the current word is underlined and the
    rest of the word is dimmed.
    """
    palette = _Palette.of(scheme or Scheme())
    spans: Line = []
    mismatch = False

    matched = min(len(typed), len(text))
    for t, r in zip(typed, text):
        if not mismatch and t == r:
            spans.append(Span(t, palette.correct))
        else:
            mismatch = True
            spans.append(Span(r, palette.incorrect))

    spans.extend(Span(c, palette.incorrect) for c in typed[matched:])

    rest = text[matched:]
    if is_current:
        if rest:
            spans.append(Span(rest[0], palette.underline))
            spans.extend(Span(c, palette.inactive) for c in rest[1:])
        elif is_last:
            spans.append(Span(" ", palette.underline))
    else:
        spans.extend(Span(c, palette.inactive) for c in rest)

    return spans


def _word_spans(index: int, test: TypingTest, scheme: Scheme) -> Line:
    word = test.words[index]
    if index > test.current_word:
        return [Span(word.text, _Palette.of(scheme).inactive)]
    return highlight_word(
        word.progress,
        word.text,
        index == test.current_word,
        index == len(test.words) - 1,
        scheme,
    )


def build_test(test: TypingTest, max_width: int, scheme: Optional[Scheme] = None) -> list[Line]:
    """Lay the words of ``test`` out in lines that fit inside a bordered area of ``max_width``."""
    scheme = scheme or Scheme()
    palette = _Palette.of(scheme)
    limit = max_width - 2
    last_index = len(test.words) - 1

    lines: list[Line] = []
    current: Line = []
    current_width = 0

    for i, word in enumerate(test.words):
        spans = _word_spans(i, test, scheme)
        word_width = sum(span.width for span in spans)

        separator = 1 if current else 0
        if current_width + word_width + separator > limit:
            lines.append(current)
            current = []
            current_width = 0

        if current:
            prev = test.words[i - 1]
            underline_space = (
                i - 1 == test.current_word
                and len(prev.progress) >= len(prev.text)
                and test.current_word < last_index
            )
            current.append(Span(" ", palette.underline) if underline_space else Span(" "))
            current_width += 1

        current.extend(spans)
        current_width += word_width

        if word.text.endswith("\n") or word.progress.endswith("\n"):
            lines.append(current)
            current = []
            current_width = 0

    if current:
        lines.append(current)
    return lines


def build_status(
    warning: Optional[tuple[Level, str]],
    status: Optional[str],
    scheme: Optional[Scheme] = None,
) -> Line:
    """The status line: a leveled message first, otherwise the status text."""
    scheme = scheme or Scheme()
    active = _Palette.of(scheme).active

    if warning is not None:
        level, message = warning
        label_colors = {
            Level.INFO: scheme.green,
            Level.WARNING: scheme.yellow,
            Level.ERROR: scheme.red,
        }
        return [
            Span(f"{_LEVEL_LABELS[level]}: ", Style(fg=label_colors[level])),
            Span(message, active),
        ]

    if status is not None:
        return [Span(status, active)]

    return [Span("")]


def _put(row: list[Cell], x: int, limit: int, text: str, style: Style) -> int:
    for ch in text:
        cell_width = Span(ch).width
        if cell_width == 0:
            continue
        if x + cell_width > limit:
            break
        row[x] = (ch, style)
        for extra in range(1, cell_width):
            row[x + extra] = ("", style)
        x += cell_width
    return x


def _serialize(row: Sequence[Cell]) -> str:
    parts = [
        RESET + style.sgr() + "".join(ch for ch, _ in cells)
        for style, cells in groupby(row, key=lambda cell: cell[1])
    ]
    return "".join(parts) + RESET


def render_block(
    lines: Sequence[Line],
    width: int,
    height: int,
    title: str,
    scheme: Optional[Scheme] = None,
) -> list[str]:
    """Draw ``lines`` inside a rounded, titled border as ``height`` terminal rows."""
    scheme = scheme or Scheme()
    base = scheme.background
    if height <= 0:
        return []
    width = max(width, 0)
    grid: list[list[Cell]] = [[(" ", base)] * width for _ in range(height)]
    if width < 2 or height < 2:
        return [_serialize(row) for row in grid]

    border = base.patch(scheme.border)
    for x in range(width):
        grid[0][x] = ("─", border)
        grid[-1][x] = ("─", border)
    for row in grid:
        row[0] = ("│", border)
        row[-1] = ("│", border)
    grid[0][0], grid[0][-1] = ("╭", border), ("╮", border)
    grid[-1][0], grid[-1][-1] = ("╰", border), ("╯", border)
    _put(grid[0], 1, width - 1, title, base.patch(scheme.title))

    for y, line in enumerate(lines[: height - 2], start=1):
        x = 1
        for span in line:
            x = _put(grid[y], x, width - 1, span.content, base.patch(span.style))

    return [_serialize(row) for row in grid]


def render_test_view(
    test: TypingTest,
    status: Optional[str],
    warning: Optional[tuple[Level, str]],
    width: int,
    height: int,
    scheme: Optional[Scheme] = None,
) -> list[str]:
    """The whole test screen: the words above, the status bar below."""
    scheme = scheme or Scheme()
    test_height = max(height - STATUS_HEIGHT, 0)
    status_height = height - test_height
    rows = render_block(build_test(test, width, scheme), width, test_height, " test ", scheme)
    rows += render_block(
        [build_status(warning, status, scheme)], width, status_height, " status ", scheme
    )
    return rows