from __future__ import annotations

from systemd_lsp.analysis.knowledge import KEY_DOCS, SECTION_DOCS
from systemd_lsp.analysis.model import HoverContent, Position, Span
from systemd_lsp.analysis.scanner import (
    header_interior,
    is_comment,
    line_at,
    split_entry,
    utf16_length,
)


def hover_at(text: str, position: Position) -> HoverContent | None:
    """Explain the section header or entry key on the cursor line."""
    line = line_at(text, position.line)
    if line is None:
        return None

    # Hover matches the bracket contents exactly: `[ Unit ]` is not documented.
    section = header_interior(line)
    if section is not None:
        doc = SECTION_DOCS.get(section)
        if doc is None:
            return None
        return HoverContent(doc, Span.on_line(position.line, 0, utf16_length(line)))

    if is_comment(line):
        return None
    entry = split_entry(line)
    if entry is None:
        return None
    key, _value = entry
    doc = KEY_DOCS.get(key)
    if doc is None:
        return None
    return HoverContent(doc, Span.on_line(position.line, 0, utf16_length(key)))
