import re

from typecrab.results import FinalResults, KeyPresses
from typecrab.resultview import (
    KEYS,
    SHIFTS,
    build_info,
    build_keyboard,
    chart_bounds,
    graph_series,
    render_result_view,
)
from typecrab.scheme import Scheme

ANSI = re.compile(r"\x1b\[[0-9;]*m")
SCHEME = Scheme()

GRAPH = [
    (1.0, 10.0, 12.0, 0, 0, 0),
    (2.0, 20.0, 25.0, 1, 0, 0),
    (3.0, 30.0, 31.0, 1, 0, 0),
]


def text_of(line):
    return "".join(span.content for span in line)


def test_graph_series_splits_points():
    wpm, raw, err = graph_series(FinalResults(graph_data=GRAPH))
    assert wpm == [(1.0, 10.0), (2.0, 20.0), (3.0, 30.0)]
    assert raw == [(1.0, 12.0), (2.0, 25.0), (3.0, 31.0)]
    assert err == [(2.0, 20.0)]


def test_chart_bounds_empty():
    assert chart_bounds(FinalResults()) == (1.0, 10)


def test_chart_bounds_cover_data():
    x_max, y_top = chart_bounds(FinalResults(graph_data=GRAPH))
    assert x_max >= GRAPH[-1][0]
    assert y_top % 10 == 0
    assert y_top >= max(max(w, r) for _, w, r, *_ in GRAPH)
    assert y_top - 10 < max(max(w, r) for _, w, r, *_ in GRAPH)


def test_build_info_rows():
    results = FinalResults(
        wpm=52.0,
        raw_wpm=60.0,
        accuracy=95.5,
        consistency=80.0,
        key_presses=KeyPresses(1, 2, 3, 4),
    )
    lines = [text_of(line) for line in build_info(results)]
    assert lines[0] == "wpm 52"
    assert lines[1] == "raw 60"
    assert lines[2] == "accuracy 96%"
    assert lines[3] == "consistency 80%"
    assert lines[4] == "characters 1/2/3/4"


def test_build_info_rounds_half_away_from_zero():
    lines = build_info(FinalResults(wpm=2.5))
    assert lines[0][1].content == "3"
    assert lines[0][1].style.fg == SCHEME.orange


def test_build_keyboard_pads_to_inner_height():
    lines = build_keyboard(FinalResults(), 60, 10)
    assert len(lines) == 10 - 2
    key_rows = [line for line in lines if line]
    assert len(key_rows) == len(KEYS)


def test_build_keyboard_without_room_has_only_keys():
    lines = build_keyboard(FinalResults(), 60, 3)
    assert len(lines) == len(KEYS)


def test_build_keyboard_marks_error_keys():
    lines = build_keyboard(FinalResults(errors=[("q", 2)]), 60, 6)
    q_row = next(line for line in lines if line and line[1].content == " Q ")
    assert q_row[1].style.fg == SCHEME.red
    assert q_row[2].style.fg == SCHEME.orange


def test_build_keyboard_rows_are_shifted():
    lines = [line for line in build_keyboard(FinalResults(), 80, 6) if line]
    indents = [line[0].width for line in lines]
    assert [b - a for a, b in zip(indents, indents[1:])] == [
        b - a for a, b in zip(SHIFTS, SHIFTS[1:])
    ]
    assert all(len(line) - 1 == len(row) for line, row in zip(lines, KEYS))


def test_render_result_view_fills_screen():
    results = FinalResults(wpm=30.0, graph_data=GRAPH, errors=[("a", 1)])
    rows = render_result_view(results, 80, 24)
    plain = [ANSI.sub("", row) for row in rows]
    assert len(plain) == 24
    assert all(len(row) == 80 for row in plain)
    assert plain[0].startswith("╭ chart ")
    assert any("wpm 30" in row for row in plain)


def test_render_result_view_without_graph_data():
    rows = render_result_view(FinalResults(), 60, 20)
    plain = [ANSI.sub("", row) for row in rows]
    assert len(plain) == 20
    assert all(len(row) == 60 for row in plain)
    assert any(" Q " in row for row in plain)