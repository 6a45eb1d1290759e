import re

from typecrab.scheme import Color, Scheme, Style
from typecrab.startview import LOGO_LINES, TEXT_LINES, build_start, render_start

ANSI = re.compile(r"\x1b\[[0-9;]*m")


def visible(row):
    return ANSI.sub("", row)


def test_build_start_has_one_line_per_row():
    lines = build_start()
    assert len(lines) == max(len(LOGO_LINES), len(TEXT_LINES))
    assert all(len(line) == 3 for line in lines)
    assert all(line[1].content == "  " for line in lines)


def test_build_start_contents_follow_the_logo_and_text():
    lines = build_start()
    assert [line[0].content for line in lines] == list(LOGO_LINES)
    assert [line[2].content for line in lines] == list(TEXT_LINES)


def test_build_start_uses_scheme_colors():
    scheme = Scheme({"orange-color": "#112233", "white-color": "#445566"})
    lines = build_start(scheme)
    assert all(line[0].style == Style(fg=Color.from_rgb(17, 34, 51)) for line in lines)
    assert all(line[2].style == Style(fg=Color.from_rgb(68, 85, 102)) for line in lines)


def test_logo_lines_have_equal_width():
    widths = {line[0].width for line in build_start()}
    assert len(widths) == 1


def test_render_start_fills_the_area():
    rows = render_start(80, 20)
    assert len(rows) == 20
    assert all(len(visible(row)) == 80 for row in rows)


def test_render_start_centers_vertically():
    rows = render_start(80, 20)
    top = (20 - len(build_start())) // 2
    assert visible(rows[0]).strip() == ""
    assert visible(rows[top - 1]).strip() == ""
    assert "████" in visible(rows[top])


def test_render_start_clips_small_area():
    rows = render_start(10, 3)
    assert len(rows) == 3
    assert all(len(visible(row)) == 10 for row in rows)


def test_render_start_applies_background():
    scheme = Scheme({"dark-color": "#010203"})
    rows = render_start(20, 4, scheme)
    assert all("48;2;1;2;3" in row for row in rows)