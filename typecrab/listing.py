"""Listing of available languages and color schemes."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from typecrab.languages import PathLike, schemes_dir, words_dir
from typecrab.response import Response


def _list_stems(directory: Path, empty_message: str) -> Response[list[str]]:
    try:
        entries = list(directory.iterdir())
    except OSError:
        return Response.with_error([], f"cannot read directory '{directory}'")

    names = sorted(entry.stem for entry in entries)
    if not names:
        return Response.with_error([], empty_message)
    return Response.plain(names)


def list_languages(root: Optional[PathLike] = None) -> Response[list[str]]:
    """Sorted names of the available languages."""
    return _list_stems(words_dir(root), "no languages found")


def list_schemes(root: Optional[PathLike] = None) -> Response[list[str]]:
    """Sorted names of the available color schemes."""
    return _list_stems(schemes_dir(root), "no color schemes found")