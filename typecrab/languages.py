"""Discovery of word lists, quote collections and color schemes on disk."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from typecrab.config import DEFAULT_LANGUAGE, GameMode, Language

PathLike = Union[str, Path]

RESOURCES_DIR = Path("resources")
WORDS_SUBDIR = "words"
QUOTES_SUBDIR = "quotes"
SCHEMES_SUBDIR = "schemes"


def _root(root: Optional[PathLike]) -> Path:
    return RESOURCES_DIR if root is None else Path(root)


def words_dir(root: Optional[PathLike] = None) -> Path:
    return _root(root) / WORDS_SUBDIR


def quotes_dir(root: Optional[PathLike] = None) -> Path:
    return _root(root) / QUOTES_SUBDIR


def schemes_dir(root: Optional[PathLike] = None) -> Path:
    return _root(root) / SCHEMES_SUBDIR


def kebab_to_camel(name: str) -> str:
    """Turn ``kebab-case`` into ``CamelCase``."""
    return "".join(part[:1].upper() + part[1:] for part in name.split("-"))


def _stems_with_suffix(directory: Path, suffix: str) -> list[str]:
    return sorted(
        entry.stem
        for entry in directory.iterdir()
        if entry.is_file() and entry.suffix == suffix
    )


def words_languages(root: Optional[PathLike] = None) -> list[str]:
    """Names of the available word lists (``words/*.txt``)."""
    return _stems_with_suffix(words_dir(root), ".txt")


def quotes_languages(root: Optional[PathLike] = None) -> list[str]:
    """Names of the available quote collections (subdirectories of ``quotes``)."""
    return sorted(entry.name for entry in quotes_dir(root).iterdir() if entry.is_dir())


def quote_files(language: str, root: Optional[PathLike] = None) -> list[str]:
    """File names of the quotes available for ``language``."""
    directory = quotes_dir(root) / language
    return sorted(
        entry.name
        for entry in directory.iterdir()
        if entry.is_file() and entry.suffix == ".txt"
    )


def scheme_names(root: Optional[PathLike] = None) -> list[str]:
    """Names of the available color schemes (``schemes/*.css``)."""
    return _stems_with_suffix(schemes_dir(root), ".css")


def language_from_str(lang: str, mode: GameMode, root: Optional[PathLike] = None) -> Language:
    """Resolve a language name for ``mode``; unknown names fall back to English words."""
    try:
        if mode is GameMode.QUOTE:
            if lang in quotes_languages(root):
                return Language.quotes(lang)
        elif lang in words_languages(root):
            return Language.words(lang)
    except OSError:
        pass
    return Language.words(DEFAULT_LANGUAGE)