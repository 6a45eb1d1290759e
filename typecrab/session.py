"""A running typing test: the words, the cursor and every key press."""

from __future__ import annotations

import copy
import time
from typing import Callable, Iterable, Optional

from typecrab.config import Config, GameMode
from typecrab.results import Event, Key, KeyKind, RawResults, Word

Clock = Callable[[], float]

_FINISH_KEYS = (KeyKind.CTRL_C, KeyKind.ESCAPE)
_WORD_END_KEYS = (KeyKind.ENTER, KeyKind.SPACE)


class TypingTest:
    """State of one typing test, driven by :meth:`handle_key`."""

    def __init__(self, words: Iterable[str], config: Config, clock: Optional[Clock] = None):
        self.words: list[Word] = [Word(text) for text in words]
        self.current_word = 0
        self.complete = False
        self.backtrack = config.backtrack
        self.death = config.death
        self.mode = config.mode
        self._clock: Clock = clock or time.monotonic
        self._start = self._clock()

    @property
    def current(self) -> Word:
        return self.words[self.current_word]

    def handle_key(self, key: Key) -> None:
        """Record ``key`` and advance the test accordingly."""
        elapsed = self._clock() - self._start

        if not self.words:
            self.complete = True
            return

        if self.mode is GameMode.ZEN:
            self._handle_zen(key, elapsed)
        else:
            self._handle_timed(key, elapsed)

    def raw_results(self) -> RawResults:
        """A snapshot of the words and all their events."""
        return RawResults.from_words(copy.deepcopy(self.words))

    def _record(self, word: Word, key: Key, elapsed: float, correct: Optional[bool] = None) -> None:
        word.events.append(Event(elapsed, key, correct))

    def _backtrack(self, key: Key, elapsed: float) -> None:
        if self.backtrack and self.current_word > 0:
            self._prev_word()
            self._record(self.current, key, elapsed)

    def _handle_zen(self, key: Key, elapsed: float) -> None:
        current = self.current
        kind = key.kind

        if kind in _FINISH_KEYS:
            self._record(current, key, elapsed)
            self.complete = True
        elif kind in _WORD_END_KEYS:
            if not current.progress:
                return
            self._record(current, key, elapsed)
            self._next_word()
        elif kind is KeyKind.BACKSPACE:
            if not current.progress:
                self._backtrack(key, elapsed)
            else:
                current.progress = current.progress[:-1]
                current.text = current.text[:-1]
                self._record(current, key, elapsed)
        elif kind is KeyKind.CHAR:
            current.progress += key.value
            current.text += key.value
            self._record(current, key, elapsed, True)

    def _handle_timed(self, key: Key, elapsed: float) -> None:
        current = self.current
        kind = key.kind

        if kind in _FINISH_KEYS:
            self._record(current, key, elapsed)
            self.complete = True
        elif kind in _WORD_END_KEYS:
            if current.progress or not current.text:
                correct = current.text == current.progress
                self._record(current, key, elapsed)
                if self.death and not correct:
                    self.complete = True
                else:
                    self._next_word()
        elif kind is KeyKind.BACKSPACE:
            if not current.progress:
                self._backtrack(key, elapsed)
            else:
                current.progress = current.progress[:-1]
                self._record(current, key, elapsed)
        elif kind is KeyKind.CHAR:
            current.progress += key.value
            partial_correct = current.text.startswith(current.progress)
            self._record(current, key, elapsed, partial_correct)

            if self.death and not partial_correct:
                self.complete = True
                return

            if current.progress == current.text and self.current_word == len(self.words) - 1:
                self.complete = True

    def _prev_word(self) -> None:
        if self.current_word > 0:
            self.current_word -= 1

    def _next_word(self) -> None:
        is_last = self.current_word == len(self.words) - 1
        if self.mode is GameMode.ZEN:
            if is_last:
                self.words.append(Word(""))
            self.current_word += 1
        elif is_last:
            self.complete = True
        else:
            self.current_word += 1