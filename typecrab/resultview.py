"""The results screen: a speed chart, the statistics and a keyboard of mistakes."""

from __future__ import annotations

import math
from typing import Iterator, Optional

from typecrab.results import FinalResults
from typecrab.scheme import Color, Scheme, Span, Style
from typecrab.testview import Line, render_block

KEYS = (
    ("`", "1", "2", "3", "4", "5", "6", "7", "8", "9", "0", "-", "="),
    ("Q", "W", "E", "R", "T", "Y", "U", "I", "O", "P", "[", "]", "\\"),
    ("A", "S", "D", "F", "G", "H", "J", "K", "L", ";", "'"),
    ("Z", "X", "C", "V", "B", "N", "M", ",", ".", "/"),
)
SHIFTS = (0, 2, 4, 6)

GRAPH_PERCENT = 70
INFO_PERCENT = 40

Point = tuple[float, float]

_BRAILLE_BITS = ((0x01, 0x08), (0x02, 0x10), (0x04, 0x20), (0x40, 0x80))


def _round(x: float) -> int:
    """Round half away from zero."""
    return math.floor(x + 0.5) if x >= 0 else -math.floor(-x + 0.5)


def graph_series(results: FinalResults) -> tuple[list[Point], list[Point], list[Point]]:
    """Points of the wpm line, the raw wpm line, and the moments a mistake was made."""
    wpm_pts: list[Point] = []
    raw_pts: list[Point] = []
    err_pts: list[Point] = []
    prev_incorrect = 0
    for t, wpm, raw, incorrect, *_ in results.graph_data:
        wpm_pts.append((t, wpm))
        raw_pts.append((t, raw))
        if incorrect > prev_incorrect:
            err_pts.append((t, wpm))
        prev_incorrect = incorrect
    return wpm_pts, raw_pts, err_pts


def chart_bounds(results: FinalResults) -> tuple[float, int]:
    """Upper bounds of the chart: seconds on the x axis and wpm, a multiple of ten, on the y axis."""
    data = results.graph_data
    x_max = float(max(math.ceil(data[-1][0]), 1)) if data else 1.0
    highest = max([0.0, *(max(w, r) for _, w, r, *_ in data)])
    y_max = max(math.ceil(highest), 1)
    y_top = math.ceil(y_max / 10.0) * 10
    return x_max, int(y_top)


def build_info(results: FinalResults, scheme: Optional[Scheme] = None) -> list[Line]:
    """Lines of ``label value`` statistics."""
    scheme = scheme or Scheme()
    label_style = Style(fg=scheme.white)
    value_style = Style(fg=scheme.orange)
    k = results.key_presses
    rows = (
        ("wpm ", str(_round(results.wpm))),
        ("raw ", str(_round(results.raw_wpm))),
        ("accuracy ", f"{max(_round(results.accuracy), 0)}%"),
        ("consistency ", f"{max(_round(results.consistency), 0)}%"),
        ("characters ", f"{k.correct}/{k.incorrect}/{k.extra}/{k.missed}"),
    )
    return [[Span(label, label_style), Span(value, value_style)] for label, value in rows]


def build_keyboard(
    results: FinalResults, width: int, height: int, scheme: Optional[Scheme] = None
) -> list[Line]:
    """A keyboard, centered in a bordered area, with mistyped keys in red."""
    scheme = scheme or Scheme()
    ok_style = Style(fg=scheme.orange)
    err_style = Style(fg=scheme.red)
    error_keys = {c.upper() if c.isascii() else c for c, _ in results.errors}

    max_row_len = max(len(row) * 3 + shift for row, shift in zip(KEYS, SHIFTS))
    base_left = max(width - max_row_len, 0) // 2

    inner_height = max(height - 2, 0)
    total_pad = max(inner_height - len(KEYS), 0)
    top_pad = total_pad // 2
    bottom_pad = total_pad - top_pad

    lines: list[Line] = [[] for _ in range(top_pad)]
    for row, shift in zip(KEYS, SHIFTS):
        line: Line = [Span(" " * (base_left + shift))]
        line.extend(
            Span(f" {key} ", err_style if key[0] in error_keys else ok_style) for key in row
        )
        lines.append(line)
    lines.extend([] for _ in range(bottom_pad))
    return lines


def _spread(index: int, count: int, cells: int) -> int:
    return _round(index * (cells - 1) / (count - 1)) if count > 1 else 0


def _segment(x0: int, y0: int, x1: int, y1: int) -> Iterator[tuple[int, int]]:
    dx, dy = abs(x1 - x0), -abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx + dy
    while True:
        yield x0, y0
        if x0 == x1 and y0 == y1:
            return
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy


def _chart_lines(results: FinalResults, width: int, height: int, scheme: Scheme) -> list[Line]:
    if width <= 0 or height <= 0 or not results.graph_data:
        return []

    x_max, y_top = chart_bounds(results)
    label_style = Style(fg=scheme.orange)
    axis_style = Style(fg=scheme.white)
    y_labels = [str(v) for v in range(0, y_top + 1, 10)]
    x_labels = [str(v) for v in range(0, int(x_max) + 1)]

    label_w = max(len(label) for label in y_labels)
    plot_x0 = label_w + 1
    plot_w = width - plot_x0
    plot_h = height - 2
    if plot_w < 1 or plot_h < 1:
        return []

    cells: list[list[Span]] = [[Span(" ") for _ in range(width)] for _ in range(height)]

    for y in range(plot_h):
        cells[y][label_w] = Span("│", axis_style)
    cells[plot_h][label_w] = Span("└", axis_style)
    for x in range(plot_x0, width):
        cells[plot_h][x] = Span("─", axis_style)

    for j, label in enumerate(y_labels):
        row = plot_h - 1 - _spread(j, len(y_labels), plot_h)
        for k, ch in enumerate(label.rjust(label_w)):
            cells[row][k] = Span(ch, label_style)

    next_free = plot_x0
    for j, label in enumerate(x_labels):
        col = plot_x0 + _spread(j, len(x_labels), plot_w)
        if col < next_free or col + len(label) > width:
            continue
        for k, ch in enumerate(label):
            cells[height - 1][col + k] = Span(ch, label_style)
        next_free = col + len(label) + 1

    dot_w, dot_h = plot_w * 2, plot_h * 4

    def to_dot(point: Point) -> tuple[int, int]:
        t, w = point
        x = _round(t / x_max * (dot_w - 1))
        y = _round((1.0 - w / y_top) * (dot_h - 1))
        return min(max(x, 0), dot_w - 1), min(max(y, 0), dot_h - 1)

    canvas: dict[tuple[int, int], tuple[int, Color]] = {}

    def draw_line(points: list[Point], color: Color) -> None:
        dots = [to_dot(p) for p in points]
        path = dots[:1] if len(dots) == 1 else [
            dot for a, b in zip(dots, dots[1:]) for dot in _segment(*a, *b)
        ]
        for x, y in path:
            key = (x // 2, y // 4)
            bits = canvas.get(key, (0, color))[0]
            canvas[key] = (bits | _BRAILLE_BITS[y % 4][x % 2], color)

    wpm_pts, raw_pts, err_pts = graph_series(results)
    draw_line(raw_pts, scheme.light)
    draw_line(wpm_pts, scheme.orange)
    for (cx, cy), (bits, color) in canvas.items():
        cells[cy][plot_x0 + cx] = Span(chr(0x2800 + bits), Style(fg=color))
    for point in err_pts:
        x, y = to_dot(point)
        cells[y // 4][plot_x0 + x // 2] = Span("•", Style(fg=scheme.red))

    for k, ch in enumerate("wpm"):
        if plot_x0 + k < width:
            cells[0][plot_x0 + k] = Span(ch, label_style)
    cells[plot_h - 1][width - 1] = Span("s", label_style)

    return cells


def render_result_view(
    results: FinalResults, width: int, height: int, scheme: Optional[Scheme] = None
) -> list[str]:
    """The whole results screen as ``height`` terminal rows."""
    scheme = scheme or Scheme()
    graph_h = min(_round(height * GRAPH_PERCENT / 100), max(height, 0))
    bottom_h = max(height - graph_h, 0)
    info_w = _round(width * INFO_PERCENT / 100)
    keys_w = width - info_w

    rows = render_block(
        _chart_lines(results, width - 2, graph_h - 2, scheme), width, graph_h, " chart ", scheme
    )
    info = render_block(build_info(results, scheme), info_w, bottom_h, " stats ", scheme)
    keys = render_block(
        build_keyboard(results, keys_w, bottom_h, scheme), keys_w, bottom_h, " keystrokes ", scheme
    )
    rows += [left + right for left, right in zip(info, keys)]
    return rows