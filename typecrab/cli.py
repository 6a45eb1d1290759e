"""Command line entry point: option parsing and the terminal typing test."""

from __future__ import annotations

import argparse
import os
import select
import shutil
import sys
import time
from pathlib import Path
from typing import Optional, Sequence, TextIO

from typecrab.config import DEFAULT_LANGUAGE, DEFAULT_WORD_COUNT, Config, GameMode
from typecrab.generator import generate_content
from typecrab.languages import PathLike, language_from_str, schemes_dir
from typecrab.listing import list_languages, list_schemes
from typecrab.response import Level
from typecrab.results import Key, KeyKind, process_results
from typecrab.resultview import render_result_view
from typecrab.scheme import Scheme, SchemeError, load_scheme_file
from typecrab.session import TypingTest
from typecrab.startview import render_start
from typecrab.testview import render_test_view

PROG = "typecrab"
VERSION = "1.0.0"
DEFAULT_SCHEME = "monokai"

STYLE_ERROR = "\x1b[1;31merror:\x1b[0m"

WARNING_SECONDS = 3
START_POLL = 0.05
TEST_POLL = 0.01

_STOP_KEYS = (KeyKind.ESCAPE, KeyKind.CTRL_C)


def _non_negative(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number '{text}'") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"invalid number '{text}'")
    return value


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG, description="A minimalistic, customizable typing test."
    )
    parser.add_argument("-V", "--version", action="version", version=f"{PROG} {VERSION}")

    listing = parser.add_mutually_exclusive_group()
    listing.add_argument("--list-languages", action="store_true",
                         help="list available languages")
    listing.add_argument("--list-schemes", action="store_true",
                         help="list available color schemes")

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("-w", "--words", action="store_true", help="enable words mode [default]")
    mode.add_argument("-q", "--quote", action="store_true", help="enable quote mode")
    mode.add_argument("-z", "--zen", action="store_true", help="enable zen mode")

    parser.add_argument("-p", "--punctuation", action="store_true",
                        help="include punctuation in test text")
    parser.add_argument("-n", "--numbers", action="store_true",
                        help="include numbers in test text")
    parser.add_argument("--strict", action="store_true",
                        help="disable backtracking of completed words")
    parser.add_argument("--death", action="store_true",
                        help="enable sudden death on first mistake")

    language = parser.add_mutually_exclusive_group()
    language.add_argument("-l", "--language", metavar="lang", default=None,
                          help=f"specify test language [default: {DEFAULT_LANGUAGE}]")
    language.add_argument("--language-file", metavar="path", default=None,
                          help="specify custom test file")

    scheme = parser.add_mutually_exclusive_group()
    scheme.add_argument("-s", "--scheme", metavar="name", default=None,
                        help=f"specify color scheme [default: {DEFAULT_SCHEME}]")
    scheme.add_argument("--scheme-file", metavar="path", default=None,
                        help="specify custom color scheme file")

    parser.add_argument("-c", "--count", metavar="n", type=_non_negative,
                        default=DEFAULT_WORD_COUNT, help="specify word count")
    parser.add_argument("-t", "--time", metavar="sec", type=_non_negative, default=None,
                        help="specify time limit")
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line options; exits with a usage message on bad input."""
    args = _parser().parse_args(argv)
    if args.language is None:
        args.language = DEFAULT_LANGUAGE
    if args.scheme is None:
        args.scheme = DEFAULT_SCHEME
    return args


def build_config(args: argparse.Namespace, root: Optional[PathLike] = None) -> Config:
    """The test configuration described by parsed options, before validation."""
    if args.quote:
        mode = GameMode.QUOTE
    elif args.zen:
        mode = GameMode.ZEN
    else:
        mode = GameMode.WORDS

    return Config(
        mode=mode,
        language=language_from_str(args.language, mode, root),
        file=args.language_file,
        word_count=args.count,
        time_limit=args.time,
        punctuation=args.punctuation,
        numbers=args.numbers,
        backtrack=not args.strict,
        death=args.death,
    )


def status_text(test: TypingTest, config: Config, elapsed: float) -> str:
    """Time left when there is a limit, otherwise the word position."""
    if config.time_limit is not None:
        return str(config.time_limit - int(elapsed))
    if config.mode is GameMode.ZEN:
        return str(test.current_word)
    return f"{test.current_word}/{len(test.words)}"


def _decode_keys(data: bytes) -> list[Key]:
    """Turn raw terminal input into key presses."""
    text = data.decode("utf-8", errors="replace")
    keys: list[Key] = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch == "\x1b":
            if i + 1 < len(text) and text[i + 1] in "[O":
                j = i + 2
                while j < len(text) and not (text[j].isalpha() or text[j] == "~"):
                    j += 1
                keys.append(Key.other(text[i:j + 1]))
                i = j + 1
                continue
            keys.append(Key.ESCAPE)
        elif ch in "\r\n":
            keys.append(Key.ENTER)
        elif ch in "\x7f\x08":
            keys.append(Key.BACKSPACE)
        elif ch == "\x03":
            keys.append(Key.CTRL_C)
        elif ch == " ":
            keys.append(Key.SPACE)
        elif ch.isprintable():
            keys.append(Key.char(ch))
        else:
            keys.append(Key.other(repr(ch)))
        i += 1
    return keys


class _Terminal:
    """Raw-mode alternate screen on the controlling terminal."""

    def __init__(self, stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout):
        self._in = stdin
        self._out = stdout
        self._fd = stdin.fileno()
        self._saved = None

    def __enter__(self) -> "_Terminal":
        import termios
        import tty

        self._saved = termios.tcgetattr(self._fd)
        tty.setraw(self._fd)
        self._out.write("\x1b[?1049h\x1b[?25l")
        self._out.flush()
        return self

    def __exit__(self, *exc_info) -> None:
        import termios

        if self._saved is not None:
            termios.tcsetattr(self._fd, termios.TCSADRAIN, self._saved)
        self._out.write("\x1b[?25h\x1b[?1049l")
        self._out.flush()

    def size(self) -> tuple[int, int]:
        size = shutil.get_terminal_size()
        return size.columns, size.lines

    def draw(self, rows: list[str]) -> None:
        self._out.write("\x1b[H" + "\r\n".join(rows))
        self._out.flush()

    def poll(self, timeout: float) -> list[Key]:
        ready, _, _ = select.select([self._fd], [], [], timeout)
        if not ready:
            return []
        return _decode_keys(os.read(self._fd, 1024))


def _fail(message: str) -> int:
    print(f"{STYLE_ERROR} {message}", file=sys.stderr)
    return 1


def _wait_for_key(term: _Terminal, render) -> None:
    while True:
        width, height = term.size()
        term.draw(render(width, height))
        if term.poll(START_POLL):
            return


def _run(
    term: _Terminal,
    test: TypingTest,
    config: Config,
    warning: Optional[tuple[Level, str]],
    scheme: Scheme,
) -> None:
    _wait_for_key(term, lambda w, h: render_start(w, h, scheme))

    start = time.monotonic()
    while True:
        stop = False
        for key in term.poll(TEST_POLL):
            test.handle_key(key)
            if key.kind in _STOP_KEYS:
                stop = True
                break
        if stop or test.complete:
            break

        elapsed = time.monotonic() - start
        if config.time_limit is not None and config.time_limit - int(elapsed) <= 0:
            break

        if warning is not None and elapsed >= WARNING_SECONDS:
            warning = None

        status = None if warning is not None else status_text(test, config, elapsed)
        width, height = term.size()
        term.draw(render_test_view(test, status, warning, width, height, scheme))

    # zen mode shows no results
    if config.mode is not GameMode.ZEN:
        final = process_results(test.raw_results()).payload
        _wait_for_key(term, lambda w, h: render_result_view(final, w, h, scheme))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the typing test; returns the process exit status."""
    args = parse_args(argv)

    if args.list_languages or args.list_schemes:
        response = list_languages() if args.list_languages else list_schemes()
        if response.is_error:
            return _fail(response.message[1])
        for item in response.payload:
            print(item)
        return 0

    scheme_path = args.scheme_file or Path(schemes_dir()) / f"{args.scheme}.css"
    try:
        scheme = load_scheme_file(scheme_path)
    except SchemeError as e:
        return _fail(str(e))

    config_response = validate_config_response = None
    from typecrab.config import validate_config

    config_response = validate_config(build_config(args))
    if config_response.is_error:
        return _fail(config_response.message[1])
    config = config_response.payload

    generation_response = generate_content(config)
    if generation_response.is_error:
        return _fail(generation_response.message[1])

    test = TypingTest(generation_response.payload, config)
    warning = config_response.message or generation_response.message
    del validate_config_response

    with _Terminal() as term:
        _run(term, test, config, warning, scheme)
    return 0