"""Responses returned by the core API: a payload plus an optional leveled message."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, Tuple, TypeVar

T = TypeVar("T")


class Level(Enum):
    """Severity of a message attached to a response."""

    INFO = 0
    WARNING = 1
    ERROR = 2

    def escalate(self, new: "Level") -> "Level":
        """Return the more severe of this level and ``new``."""
        return new if new.value > self.value else self


@dataclass
class Response(Generic[T]):
    """A payload together with an optional ``(level, text)`` message."""

    payload: T
    message: Optional[Tuple[Level, str]] = None

    @classmethod
    def plain(cls, data: T) -> "Response[T]":
        return cls(data)

    @classmethod
    def with_info(cls, data: T, msg: str) -> "Response[T]":
        return cls(data, (Level.INFO, str(msg)))

    @classmethod
    def with_warning(cls, data: T, msg: str) -> "Response[T]":
        return cls(data, (Level.WARNING, str(msg)))

    @classmethod
    def with_error(cls, data: T, msg: str) -> "Response[T]":
        return cls(data, (Level.ERROR, str(msg)))

    @property
    def level(self) -> Optional[Level]:
        """Level of the attached message, if any."""
        return self.message[0] if self.message else None

    @property
    def is_error(self) -> bool:
        return self.level is Level.ERROR