"""Test configuration and its validation."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field, replace
from enum import Enum
from typing import Any, Optional

from typecrab.response import Level, Response

DEFAULT_WORD_COUNT = 25
FALLBACK_WORD_COUNT = 30
DEFAULT_LANGUAGE = "en"


class GameMode(Enum):
    WORDS = "Words"
    QUOTE = "Quote"
    ZEN = "Zen"


class LanguageKind(Enum):
    WORDS = "Words"
    QUOTES = "Quotes"


@dataclass(frozen=True)
class Language:
    """A language name together with the kind of content it provides."""

    kind: LanguageKind
    name: str

    @classmethod
    def words(cls, name: str) -> "Language":
        return cls(LanguageKind.WORDS, name)

    @classmethod
    def quotes(cls, name: str) -> "Language":
        return cls(LanguageKind.QUOTES, name)

    @property
    def is_words(self) -> bool:
        return self.kind is LanguageKind.WORDS

    @property
    def is_quotes(self) -> bool:
        return self.kind is LanguageKind.QUOTES

    def to_json(self) -> dict[str, str]:
        return {self.kind.value: self.name}

    @classmethod
    def from_json(cls, data: Any) -> "Language":
        if not isinstance(data, dict) or len(data) != 1:
            raise ValueError("language must be an object with a single key")
        (tag, name), = data.items()
        try:
            kind = LanguageKind(tag)
        except ValueError:
            raise ValueError(f"unknown language kind {tag!r}") from None
        if not isinstance(name, str):
            raise ValueError("language name must be a string")
        return cls(kind, name)


@dataclass
class Config:
    """Settings for one typing test."""

    mode: GameMode = GameMode.WORDS
    language: Language = field(default_factory=lambda: Language.words(DEFAULT_LANGUAGE))
    file: Optional[str] = None
    word_count: int = DEFAULT_WORD_COUNT
    time_limit: Optional[int] = None
    punctuation: bool = False
    numbers: bool = False
    backtrack: bool = True
    death: bool = False

    def to_json_string(self) -> str:
        data = asdict(self)
        data["mode"] = self.mode.value
        data["language"] = self.language.to_json()
        return json.dumps(data, separators=(",", ":"))

    @classmethod
    def from_json_string(cls, json_text: str) -> "Config":
        """Parse a configuration; raises ValueError on malformed input."""
        data = json.loads(json_text)
        if not isinstance(data, dict):
            raise ValueError("config must be a JSON object")

        def required(key: str) -> Any:
            if key not in data:
                raise ValueError(f"missing field {key!r}")
            return data[key]

        def boolean(key: str) -> bool:
            value = required(key)
            if not isinstance(value, bool):
                raise ValueError(f"field {key!r} must be a boolean")
            return value

        def natural(value: Any, key: str) -> int:
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError(f"field {key!r} must be a non-negative integer")
            return value

        try:
            mode = GameMode(required("mode"))
        except (ValueError, TypeError):
            raise ValueError(f"invalid mode {data.get('mode')!r}") from None

        file = data.get("file")
        if file is not None and not isinstance(file, str):
            raise ValueError("field 'file' must be a string or null")

        time_limit = data.get("time_limit")
        if time_limit is not None:
            time_limit = natural(time_limit, "time_limit")

        return cls(
            mode=mode,
            language=Language.from_json(required("language")),
            file=file,
            word_count=natural(required("word_count"), "word_count"),
            time_limit=time_limit,
            punctuation=boolean("punctuation"),
            numbers=boolean("numbers"),
            backtrack=boolean("backtrack"),
            death=boolean("death"),
        )


def validate_config(config: Config) -> Response[Config]:
    """Return a corrected copy of ``config`` with notes on what was changed."""
    cfg = replace(config)
    notes: list[str] = []
    level = Level.INFO

    def note(text: str, severity: Level = Level.WARNING) -> None:
        nonlocal level
        notes.append(text)
        level = level.escalate(severity)

    if cfg.word_count == 0:
        cfg.word_count = FALLBACK_WORD_COUNT
        note("invalid word count, set to 30")

    if cfg.time_limit == 0:
        cfg.time_limit = None
        note("invalid time limit, disabled")

    if cfg.file is not None and cfg.mode is GameMode.ZEN:
        note("provided custom file, but chosen zen mode", Level.ERROR)

    if cfg.mode is GameMode.WORDS:
        if not cfg.language.is_words:
            note("invalid language for words mode, fallback to 'en'")
            cfg.language = Language.words(DEFAULT_LANGUAGE)

    elif cfg.mode is GameMode.QUOTE:
        if not cfg.language.is_quotes:
            note("invalid language for quote mode, fallback to 'words' mode")
            cfg.mode = GameMode.WORDS
            cfg.language = Language.words(DEFAULT_LANGUAGE)
        else:
            if cfg.word_count != DEFAULT_WORD_COUNT:
                cfg.word_count = DEFAULT_WORD_COUNT
                note("quote mode ignores word count")
            if cfg.punctuation:
                cfg.punctuation = False
                note("quote mode ignores punctuation")
            if cfg.numbers:
                cfg.numbers = False
                note("quote mode ignores numbers")

    else:
        if cfg.word_count != DEFAULT_WORD_COUNT:
            cfg.word_count = DEFAULT_WORD_COUNT
            note("zen mode ignores word count")
        if cfg.punctuation:
            cfg.punctuation = False
            note("zen mode ignores punctuation")
        if cfg.numbers:
            cfg.numbers = False
            note("zen mode ignores numbers")
        if not cfg.backtrack:
            cfg.backtrack = True
            note("zen mode ignores strict mode")
        if cfg.death:
            cfg.death = False
            note("zen mode ignores sudden death mode")
        if cfg.time_limit is not None:
            cfg.time_limit = None
            note("zen mode ignores time limit")

    if not notes:
        return Response.plain(cfg)
    return Response(cfg, (level, ", ".join(notes)))