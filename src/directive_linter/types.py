"""
Shared types for validation results.

Diagnostics are produced by rules and forwarded to a sink right away; they
are never attached to the template tree. Locations are derived from source
offsets so nodes only need to carry a `range`.
"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from dataclasses import field
from typing import Any

SEVERITY_OFF = "off"
SEVERITY_WARN = "warn"
SEVERITY_ERROR = "error"


@dataclass(frozen=True)
class Position:
    """A 1-based line and 0-based column."""

    line: int = 1
    column: int = 0


@dataclass(frozen=True)
class SourceLocation:
    start: Position = field(default_factory=Position)
    end: Position = field(default_factory=Position)

    @classmethod
    def from_range(
        cls,
        source: str,
        start: int,
        end: int,
        line_index: LineIndex | None = None,
    ) -> SourceLocation:
        """Locate `[start, end)`; pass `line_index` to reuse one source's table."""
        if line_index is None:
            line_index = LineIndex(source)
        return cls(start=line_index.position(start), end=line_index.position(end))


class LineIndex:
    """Line start offsets of one source, built once and bisected per lookup."""

    def __init__(self, source: str) -> None:
        self.length = len(source)
        self.line_starts = [0]
        self.line_starts.extend(i + 1 for i, char in enumerate(source) if char == "\n")

    def position(self, index: int) -> Position:
        index = max(0, min(index, self.length))
        line = bisect_right(self.line_starts, index)
        return Position(line=line, column=index - self.line_starts[line - 1])


@dataclass(frozen=True)
class TextEdit:
    """
    Replace `range` (half-open offsets into the source) with `text`.

    Removals use an empty `text`, insertions an empty range.
    """

    range: tuple[int, int]
    text: str = ""

    def apply(self, source: str) -> str:
        start, end = self.range
        return source[:start] + self.text + source[end:]


def remove_range(start: int, end: int) -> TextEdit:
    return TextEdit(range=(start, end), text="")


def insert_text_at(index: int, text: str) -> TextEdit:
    return TextEdit(range=(index, index), text=text)


@dataclass
class Diagnostic:
    """A violation found in a template."""

    rule: str
    message: str
    loc: SourceLocation
    severity: str = SEVERITY_ERROR
    message_template: str = ""
    data: dict[str, Any] = field(default_factory=dict)
    fix: TextEdit | None = None

    @property
    def line(self) -> int:
        return self.loc.start.line

    @property
    def column(self) -> int:
        return self.loc.start.column

    def __str__(self) -> str:
        return f"{self.rule} (line {self.line}, column {self.column}): {self.message}"
