"""Generation of the text to type, from word lists, quotes or a custom file."""

from __future__ import annotations

import random
from pathlib import Path
from typing import Optional

from typecrab.config import Config, GameMode
from typecrab.languages import PathLike, quotes_dir, words_dir
from typecrab.response import Response

PUNCTS = (".", ",", "!", "?", ":", ";")
NUMBER_MIN = 1
NUMBER_MAX = 9999
PUNCT_PROBABILITY = 0.2
NUMBER_PROBABILITY = 0.2


def load_file(path: PathLike) -> list[str]:
    """Read a UTF-8 text file as lines without their line endings."""
    text = Path(path).read_text(encoding="utf-8")
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def finalize_lines(
    lines: list[str], config: Config, rng: Optional[random.Random] = None
) -> list[str]:
    """Pick ``config.word_count`` random words, adding punctuation and numbers if asked."""
    rng = rng or random.Random()
    base_words = [word for line in lines for word in line.split()]
    result: list[str] = []

    for _ in range(config.word_count):
        word = rng.choice(base_words) if base_words else ""
        if config.punctuation and rng.random() < PUNCT_PROBABILITY:
            word += rng.choice(PUNCTS)
        result.append(word)

        if config.numbers and rng.random() < NUMBER_PROBABILITY:
            result.append(str(rng.randint(NUMBER_MIN, NUMBER_MAX)))

    return result


def split_lines(lines: list[str]) -> list[str]:
    """Split lines into words, marking the last word of every line but the last with a newline."""
    result: list[str] = []
    last = len(lines) - 1
    for i, line in enumerate(lines):
        words = line.split()
        if words and i != last:
            words[-1] += "\n"
        result.extend(words)
    return result


def _load_words(lang: str, root: Optional[PathLike]) -> list[str]:
    path = words_dir(root) / f"{lang}.txt"
    try:
        return load_file(path)
    except (OSError, UnicodeDecodeError) as e:
        raise LookupError(f"cannot read words '{path}', {e}") from e


def _load_quote(lang: str, root: Optional[PathLike], rng: random.Random) -> list[str]:
    directory = quotes_dir(root) / lang
    try:
        files = sorted(directory.iterdir())
    except OSError as e:
        raise LookupError(f"cannot read directory '{directory}': {e}") from e
    if not files:
        raise LookupError("no quote files available for this language")

    chosen = rng.choice(files)
    try:
        return load_file(chosen)
    except (OSError, UnicodeDecodeError) as e:
        raise LookupError(f"failed to read quote '{chosen}', {e}") from e


def generate_content(
    config: Config,
    root: Optional[PathLike] = None,
    rng: Optional[random.Random] = None,
) -> Response[list[str]]:
    """Produce the words of a test according to ``config``."""
    rng = rng or random.Random()

    if config.file is not None:
        try:
            lines = load_file(config.file)
        except (OSError, UnicodeDecodeError) as e:
            return Response.with_error([], f"invalid file '{config.file}', {e}")
        if config.mode is GameMode.WORDS:
            return Response.plain(finalize_lines(lines, config, rng))
        if config.mode is GameMode.QUOTE:
            return Response.plain(split_lines(lines))
        return Response.plain([""])

    if config.mode is GameMode.WORDS:
        if not config.language.is_words:
            return Response.with_error([], "invalid language for words mode")
        try:
            lines = _load_words(config.language.name, root)
        except LookupError as e:
            return Response.with_error([], str(e))
        return Response.plain(finalize_lines(lines, config, rng))

    if config.mode is GameMode.QUOTE:
        if not config.language.is_quotes:
            return Response.with_error([], "invalid language for quote mode")
        try:
            lines = _load_quote(config.language.name, root, rng)
        except LookupError as e:
            return Response.with_error([], str(e))
        return Response.plain(split_lines(lines))

    return Response.plain([""])