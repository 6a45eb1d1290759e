import random

import pytest

from typecrab.config import Config, GameMode, Language
from typecrab.generator import (
    NUMBER_MAX,
    NUMBER_MIN,
    PUNCTS,
    finalize_lines,
    generate_content,
    load_file,
    split_lines,
)
from typecrab.response import Level


@pytest.fixture
def resources(tmp_path):
    words = tmp_path / "words"
    words.mkdir()
    (words / "en.txt").write_text("alpha\nbeta gamma\ndelta\n", encoding="utf-8")
    quotes = tmp_path / "quotes" / "en"
    quotes.mkdir(parents=True)
    (quotes / "one.txt").write_text("first line here\nsecond line\n", encoding="utf-8")
    return tmp_path


def test_load_file_strips_line_endings(tmp_path):
    path = tmp_path / "f.txt"
    path.write_bytes(b"a b\r\nc\n")
    assert load_file(path) == ["a b", "c"]


def test_load_file_keeps_last_unterminated_line(tmp_path):
    path = tmp_path / "f.txt"
    path.write_text("x\ny", encoding="utf-8")
    assert load_file(path) == ["x", "y"]


def test_load_file_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_file(tmp_path / "nope.txt")


def test_split_lines_marks_line_ends():
    assert split_lines(["a b", "c d", "e"]) == ["a", "b\n", "c", "d\n", "e"]


def test_split_lines_skips_empty_lines():
    assert split_lines(["a", "", "b"]) == ["a\n", "b"]


def test_finalize_lines_word_count_and_source():
    lines = ["one two", "three"]
    config = Config(word_count=40)
    words = finalize_lines(lines, config, random.Random(1))
    assert len(words) == config.word_count
    assert set(words) <= {"one", "two", "three"}


def test_finalize_lines_punctuation():
    config = Config(word_count=200, punctuation=True)
    words = finalize_lines(["cat"], config, random.Random(7))
    assert len(words) == config.word_count
    assert all(w == "cat" or (w[:-1] == "cat" and w[-1] in PUNCTS) for w in words)
    assert any(w != "cat" for w in words)


def test_finalize_lines_numbers():
    config = Config(word_count=200, numbers=True)
    words = finalize_lines(["cat"], config, random.Random(3))
    numbers = [w for w in words if w != "cat"]
    assert words.count("cat") == config.word_count
    assert numbers
    assert all(NUMBER_MIN <= int(n) <= NUMBER_MAX for n in numbers)


def test_finalize_lines_empty_source():
    config = Config(word_count=4)
    assert finalize_lines([], config, random.Random(0)) == [""] * config.word_count


def test_generate_words_mode(resources):
    config = Config(word_count=10)
    response = generate_content(config, resources, random.Random(2))
    assert response.message is None
    assert len(response.payload) == config.word_count
    assert set(response.payload) <= {"alpha", "beta", "gamma", "delta"}


def test_generate_is_deterministic_for_seed(resources):
    config = Config(word_count=15)
    first = generate_content(config, resources, random.Random(42)).payload
    second = generate_content(config, resources, random.Random(42)).payload
    assert first == second


def test_generate_quote_mode(resources):
    config = Config(mode=GameMode.QUOTE, language=Language.quotes("en"))
    response = generate_content(config, resources, random.Random(0))
    assert response.payload == split_lines(["first line here", "second line"])


def test_generate_unknown_words_language(resources):
    config = Config(language=Language.words("xx"))
    response = generate_content(config, resources)
    assert response.level is Level.ERROR
    assert response.message[1].startswith("cannot read words")
    assert response.payload == []


def test_generate_unknown_quote_language(resources):
    config = Config(mode=GameMode.QUOTE, language=Language.quotes("xx"))
    response = generate_content(config, resources)
    assert response.level is Level.ERROR
    assert response.message[1].startswith("cannot read directory")


def test_generate_wrong_language_kind(resources):
    config = Config(language=Language.quotes("en"))
    response = generate_content(config, resources)
    assert response.message == (Level.ERROR, "invalid language for words mode")
    quote = Config(mode=GameMode.QUOTE, language=Language.words("en"))
    assert generate_content(quote, resources).message == (
        Level.ERROR,
        "invalid language for quote mode",
    )


def test_generate_zen_mode(resources):
    assert generate_content(Config(mode=GameMode.ZEN), resources).payload == [""]


def test_generate_from_custom_file(tmp_path):
    path = tmp_path / "custom.txt"
    path.write_text("red green\nblue\n", encoding="utf-8")
    quote = Config(mode=GameMode.QUOTE, file=str(path))
    assert generate_content(quote).payload == ["red", "green\n", "blue"]

    words = Config(word_count=8, file=str(path))
    payload = generate_content(words, rng=random.Random(5)).payload
    assert len(payload) == words.word_count
    assert set(payload) <= {"red", "green", "blue"}


def test_generate_missing_custom_file(tmp_path):
    missing = tmp_path / "missing.txt"
    response = generate_content(Config(file=str(missing)))
    assert response.level is Level.ERROR
    assert response.message[1].startswith(f"invalid file '{missing}'")
    assert response.payload == []