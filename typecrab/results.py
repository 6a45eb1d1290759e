"""Keystroke records of a typing test and the statistics computed from them."""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from typecrab.response import Response

CHARS_PER_WORD = 5.0

GraphPoint = tuple[float, float, float, int, int, int]


class KeyKind(Enum):
    CHAR = "Char"
    ENTER = "Enter"
    SPACE = "Space"
    BACKSPACE = "Backspace"
    ESCAPE = "Escape"
    CTRL_C = "CtrlC"
    OTHER = "Other"


@dataclass(frozen=True)
class Key:
    """A key press; ``value`` holds the character or the name of another key."""

    kind: KeyKind
    value: str = ""

    @classmethod
    def char(cls, c: str) -> "Key":
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return cls(KeyKind.CHAR, c)

    @classmethod
    def other(cls, name: str) -> "Key":
        return cls(KeyKind.OTHER, name)

    @property
    def is_char(self) -> bool:
        return self.kind is KeyKind.CHAR


Key.ENTER = Key(KeyKind.ENTER)
Key.SPACE = Key(KeyKind.SPACE)
Key.BACKSPACE = Key(KeyKind.BACKSPACE)
Key.ESCAPE = Key(KeyKind.ESCAPE)
Key.CTRL_C = Key(KeyKind.CTRL_C)


@dataclass
class Event:
    """One key press: when (seconds since start), which key, and whether it was right.

    ``correct`` is ``None`` for moves that are neither right nor wrong.
    """

    time: float
    key: Key
    correct: Optional[bool] = None


@dataclass
class Word:
    """A word to type, what has been typed of it, and its events."""

    text: str
    progress: str = ""
    events: list[Event] = field(default_factory=list)


@dataclass
class RawResults:
    words: list[Word]
    events: list[Event]

    @classmethod
    def from_words(cls, words: list[Word]) -> "RawResults":
        """Collect the events of all words, word after word."""
        return cls(list(words), [event for word in words for event in word.events])


@dataclass
class KeyPresses:
    correct: int = 0
    incorrect: int = 0
    extra: int = 0
    missed: int = 0


@dataclass
class FinalResults:
    wpm: float = 0.0
    raw_wpm: float = 0.0
    key_presses: KeyPresses = field(default_factory=KeyPresses)
    accuracy: float = 0.0
    consistency: float = 0.0
    graph_data: list[GraphPoint] = field(default_factory=list)
    errors: list[tuple[str, int]] = field(default_factory=list)


def _per_minute(chars: int, seconds: float) -> float:
    minutes = seconds / 60.0
    return (chars / CHARS_PER_WORD) / minutes if minutes > 0.0 else 0.0


def _graph(events: list[Event], first_time: float) -> list[GraphPoint]:
    points: list[GraphPoint] = []
    correct_chars = typed_chars = incorrect = extra = 0
    missed = 0
    last_second = 0.0

    for event in events:
        event_time = max(event.time - first_time, 0.0)
        if event.correct is None:
            if event.key.is_char:
                extra += 1
                typed_chars += 1
            continue
        if event.correct:
            correct_chars += 1
        else:
            incorrect += 1
        typed_chars += 1

        if math.floor(event_time) > last_second and event_time > 0.0:
            points.append((
                event_time,
                _per_minute(correct_chars, event_time),
                _per_minute(typed_chars, event_time),
                incorrect,
                extra,
                missed,
            ))
            last_second = float(math.floor(event_time))
    return points


def _consistency(times: list[float]) -> float:
    intervals = [later - earlier for earlier, later in zip(times, times[1:])]
    if not intervals:
        return 0.0
    mean = sum(intervals) / len(intervals)
    variance = sum((t - mean) ** 2 for t in intervals) / len(intervals)
    return (1.0 - min(math.sqrt(variance), 1.0)) * 100.0


def process_results(raw_results: RawResults) -> Response[FinalResults]:
    """Compute speed, accuracy, consistency and error statistics."""
    if not raw_results.events:
        return Response.with_error(FinalResults(), "No typing events recorded")

    scored_times = [e.time for e in raw_results.events if e.correct is not None]
    first_time = min(scored_times, default=0.0)
    last_time = max(scored_times, default=0.0)
    total_duration = last_time - first_time if last_time > first_time else 0.0

    presses = KeyPresses()
    errors_by_expected: Counter[str] = Counter()

    for word in raw_results.words:
        expected = word.text
        char_index = 0
        for event in word.events:
            if event.correct is not None:
                char_index += 1
                if event.correct:
                    presses.correct += 1
                else:
                    presses.incorrect += 1
                    if event.key.is_char and char_index <= len(expected):
                        errors_by_expected[expected[char_index - 1]] += 1
            elif event.key.kind is KeyKind.BACKSPACE and char_index > 0:
                char_index -= 1

        typed_len, expected_len = len(word.progress), len(expected)
        presses.extra += max(typed_len - expected_len, 0)
        presses.missed += max(expected_len - typed_len, 0)

    total_typed = presses.correct + presses.incorrect
    total_keypresses = presses.correct + presses.incorrect + presses.extra
    accuracy = presses.correct / total_keypresses * 100.0 if total_keypresses else 0.0

    errors = sorted(errors_by_expected.items(), key=lambda item: item[1], reverse=True)

    return Response.plain(FinalResults(
        wpm=_per_minute(presses.correct, total_duration),
        raw_wpm=_per_minute(total_typed, total_duration),
        key_presses=presses,
        accuracy=accuracy,
        consistency=_consistency(scored_times),
        graph_data=_graph(raw_results.events, first_time),
        errors=errors,
    ))