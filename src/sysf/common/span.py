"""Source span type shared across layers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Span:
    """Half-open character range ``[start, end)`` plus the 1-based position of ``start``."""

    start: int
    end: int
    line: int = 1
    column: int = 1

    @staticmethod
    def locate(source: str, start: int, end: int) -> Span:
        """Build a span for ``source[start:end]``, computing line and column."""
        line = source.count("\n", 0, start) + 1
        column = start - (source.rfind("\n", 0, start) + 1) + 1
        return Span(start, end, line, column)

    def extract(self, source: str) -> str:
        return source[self.start : self.end]

    def join(self, other: Span) -> Span:
        return Span(self.start, other.end, self.line, self.column)

    def __str__(self) -> str:
        return f"line {self.line}, column {self.column}"
