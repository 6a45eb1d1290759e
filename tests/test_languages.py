import pytest

from typecrab.config import GameMode, Language
from typecrab.languages import (
    kebab_to_camel,
    language_from_str,
    quote_files,
    quotes_languages,
    scheme_names,
    words_languages,
)


@pytest.fixture
def resources(tmp_path):
    words = tmp_path / "words"
    words.mkdir()
    for name in ("en", "ru", "english-1k"):
        (words / f"{name}.txt").write_text("a b c\n")
    (words / "README.md").write_text("docs")
    (words / "nested").mkdir()

    quotes = tmp_path / "quotes"
    quotes.mkdir()
    (quotes / "en").mkdir()
    (quotes / "en" / "b.txt").write_text("second")
    (quotes / "en" / "a.txt").write_text("first")
    (quotes / "en" / "notes.md").write_text("skip")
    (quotes / "de").mkdir()
    (quotes / "stray.txt").write_text("not a language")

    schemes = tmp_path / "schemes"
    schemes.mkdir()
    (schemes / "monokai.css").write_text(":root {}")
    (schemes / "catppuccin.css").write_text(":root {}")
    (schemes / "preview.png").write_bytes(b"")
    return tmp_path


def test_kebab_to_camel_values():
    assert kebab_to_camel("en") == "En"
    assert kebab_to_camel("english-1k") == "English1k"


def test_kebab_to_camel_removes_dashes():
    for name in ("a-b-c", "monokai", "x--y", "-lead"):
        assert "-" not in kebab_to_camel(name)
        assert kebab_to_camel(name).lower() == name.replace("-", "").lower()


def test_words_languages(resources):
    assert words_languages(resources) == ["en", "english-1k", "ru"]


def test_quotes_languages(resources):
    assert quotes_languages(resources) == ["de", "en"]


def test_quote_files_sorted_txt_only(resources):
    assert quote_files("en", resources) == ["a.txt", "b.txt"]
    assert quote_files("de", resources) == []


def test_scheme_names(resources):
    assert scheme_names(resources) == ["catppuccin", "monokai"]


def test_missing_directory_raises(tmp_path):
    with pytest.raises(OSError):
        words_languages(tmp_path)


def test_language_from_str_words(resources):
    assert language_from_str("ru", GameMode.WORDS, resources) == Language.words("ru")
    assert language_from_str("ru", GameMode.ZEN, resources) == Language.words("ru")


def test_language_from_str_unknown_words(resources):
    assert language_from_str("xx", GameMode.WORDS, resources) == Language.words("en")


def test_language_from_str_quotes(resources):
    assert language_from_str("de", GameMode.QUOTE, resources) == Language.quotes("de")


def test_language_from_str_unknown_quotes_falls_back_to_words(resources):
    assert language_from_str("ru", GameMode.QUOTE, resources) == Language.words("en")


def test_language_from_str_without_resources(tmp_path):
    assert language_from_str("ru", GameMode.WORDS, tmp_path) == Language.words("en")