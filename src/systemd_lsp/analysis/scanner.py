"""Structural queries over raw unit-file text.

Nothing here caches: every call re-scans the text it is given, so two
queries over the same snapshot always agree on section boundaries.
"""

from __future__ import annotations

from typing import Iterator


def document_lines(text: str) -> list[str]:
    """Split text into editor lines.

    An empty document has no lines. A trailing newline opens one final empty
    line, which is where the editor cursor sits after typing a header.
    """
    if not text:
        return []
    return [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]


def line_at(text: str, line_index: int) -> str | None:
    lines = document_lines(text)
    if line_index < 0 or line_index >= len(lines):
        return None
    return lines[line_index]


def utf16_length(text: str) -> int:
    return len(text.encode("utf-16-le")) // 2


def header_interior(line: str) -> str | None:
    """Raw text between the brackets of a complete `[...]` line, else None."""
    stripped = line.strip()
    if len(stripped) >= 2 and stripped.startswith("[") and stripped.endswith("]"):
        return stripped[1:-1]
    return None


def header_name(line: str) -> str | None:
    interior = header_interior(line)
    return interior.strip() if interior is not None else None


def is_comment(line: str) -> bool:
    return line.strip().startswith("#")


def split_entry(line: str) -> tuple[str, str] | None:
    """Split a `key=value` line on the first `=`; both halves are trimmed."""
    key, sep, value = line.partition("=")
    if not sep:
        return None
    return key.strip(), value.strip()


def iter_entry_lines(text: str) -> Iterator[tuple[int, str, str, str]]:
    """Yield (line_index, line, key, value) for every entry line.

    Comment and header-like lines are skipped even when they contain `=`.
    """
    for index, line in enumerate(document_lines(text)):
        stripped = line.strip()
        if stripped.startswith("#") or stripped.startswith("["):
            continue
        entry = split_entry(line)
        if entry is None:
            continue
        key, value = entry
        yield index, line, key, value


def section_at(text: str, line_index: int) -> str | None:
    """Name of the section enclosing ``line_index``.

    The last complete header at or before the line wins. Unterminated headers
    such as ``[Uni`` leave the current section unchanged.
    """
    lines = document_lines(text)
    if line_index < 0 or line_index >= len(lines):
        return None
    current: str | None = None
    for line in lines[: line_index + 1]:
        name = header_name(line)
        if name is not None:
            current = name
    return current
