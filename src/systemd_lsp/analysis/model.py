from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

FINDING_SOURCE = "systemd-lsp"


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class Position:
    """Zero-based line and UTF-16 column."""

    line: int
    character: int


@dataclass(frozen=True)
class Span:
    """Half-open [start, end) range of positions."""

    start: Position
    end: Position

    @classmethod
    def on_line(cls, line: int, start: int, end: int) -> "Span":
        return cls(Position(line, start), Position(line, end))


@dataclass(frozen=True)
class Finding:
    severity: Severity
    span: Span
    message: str
    source: str = FINDING_SOURCE


@dataclass(frozen=True)
class CompletionCandidate:
    label: str
    detail: str


@dataclass(frozen=True)
class HoverContent:
    markdown: str
    span: Span
