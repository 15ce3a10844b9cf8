from __future__ import annotations

from systemd_lsp.analysis.knowledge import (
    SECTION_CLOSERS,
    SECTION_HEADERS,
    SECTION_KEYS,
)
from systemd_lsp.analysis.model import CompletionCandidate, Position
from systemd_lsp.analysis.scanner import line_at, section_at


def _is_open_header(line: str) -> bool:
    return line.strip().startswith("[") and "]" not in line


def completions_at(text: str, position: Position) -> list[CompletionCandidate]:
    """Candidates for the structural context at ``position``.

    The list is not filtered by whatever the user already typed; the editor
    does prefix matching on display.
    """
    line = line_at(text, position.line)
    if line is None:
        return []
    if _is_open_header(line):
        return list(SECTION_CLOSERS)
    section = section_at(text, position.line)
    keys = SECTION_KEYS.get(section) if section is not None else None
    if keys is None:
        # No section, an unknown one, or Mount: offer headers instead.
        return list(SECTION_HEADERS)
    return list(keys)
