"""Source span type shared by the lexer, parser and error reporting."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Span:
    """Half-open range ``[start, end)`` of character offsets into a source."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid span {self.start}:{self.end}")

    def extract(self, source: str) -> str:
        return source[self.start : self.end]

    def merge(self, other: Span) -> Span:
        return Span(min(self.start, other.start), max(self.end, other.end))

    @staticmethod
    def at_end(source: str) -> Span:
        return Span(len(source), len(source))
